"""Domain layer for banksim.

Services are imported from their modules (``banksim.domain.account``,
``banksim.domain.transaction``) so that the storage layer can import the
entities without a circular import.
"""
