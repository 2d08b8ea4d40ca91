"""Shared domain error messages and error types."""

from enum import Enum


class ErrorKind(Enum):
    """Semantic category of a domain error."""

    INVALID_FORMAT = "InvalidFormat"
    INVALID_AMOUNT = "InvalidAmount"
    OUT_OF_RANGE = "OutOfRange"
    INSUFFICIENT = "Insufficient"
    SELF_TRANSFER = "SelfTransfer"
    ACCOUNT_NOT_FOUND = "AccountNotFound"
    AMBIGUOUS_IDENTIFIER = "AmbiguousIdentifier"
    SAVE_FAILED = "SaveFailed"
    DELETE_FAILED = "DeleteFailed"
    MALFORMED_RECORD = "MalformedRecord"
    INVALID_OPTION = "InvalidOption"
    INVALID_PIN = "InvalidPin"
    INVALID_NAME = "InvalidName"
    INVALID_IDENTIFIER_FORMAT = "InvalidIdentifierFormat"
    LOG_TRANSACTION_FAILED = "LogTransactionFailed"
    STORAGE_UNAVAILABLE = "StorageUnavailable"


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling. Every subclass sets ``kind``.
    """

    kind: ErrorKind


class InvalidFormatError(DomainError):
    """Amount text is not a number."""

    kind = ErrorKind.INVALID_FORMAT


class InvalidAmountError(DomainError):
    """Amount is not positive where a positive amount is required."""

    kind = ErrorKind.INVALID_AMOUNT


class OutOfRangeError(DomainError):
    """Amount is outside the accepted deposit range."""

    kind = ErrorKind.OUT_OF_RANGE


class InsufficientFundsError(DomainError):
    """Balance does not cover the requested amount."""

    kind = ErrorKind.INSUFFICIENT


class SelfTransferError(DomainError):
    """Sender and recipient are the same account."""

    kind = ErrorKind.SELF_TRANSFER


class AccountNotFoundError(DomainError):
    kind = ErrorKind.ACCOUNT_NOT_FOUND


class AmbiguousIdentifierError(DomainError):
    """Identifier matches more than one stored account."""

    kind = ErrorKind.AMBIGUOUS_IDENTIFIER


class InvalidIdentifierFormatError(DomainError):
    kind = ErrorKind.INVALID_IDENTIFIER_FORMAT


class InvalidOptionError(DomainError):
    kind = ErrorKind.INVALID_OPTION


class InvalidPinError(DomainError):
    kind = ErrorKind.INVALID_PIN


class InvalidNameError(DomainError):
    kind = ErrorKind.INVALID_NAME


class MalformedRecordError(DomainError):
    """A persisted account record failed to parse."""

    kind = ErrorKind.MALFORMED_RECORD


class SaveFailedError(DomainError):
    kind = ErrorKind.SAVE_FAILED


class DeleteFailedError(DomainError):
    kind = ErrorKind.DELETE_FAILED


class TransactionLogError(DomainError):
    """Appending to the transaction log failed. Never fatal."""

    kind = ErrorKind.LOG_TRANSACTION_FAILED


class StorageError(DomainError):
    """The account directory cannot be created or accessed. Fatal at startup."""

    kind = ErrorKind.STORAGE_UNAVAILABLE


def account_not_found(identifier: str) -> str:
    """Return message for missing account."""
    return f"Account '{identifier}' not found"


def insufficient_balance(amount, available) -> str:
    """Return message when the balance does not cover an amount."""
    return f"Insufficient balance: requested {amount:.2f}, available {available:.2f}"


def malformed_record(source: str, reason: str) -> str:
    """Return message for a record that failed to parse."""
    return f"Malformed file: {source} ({reason})"
