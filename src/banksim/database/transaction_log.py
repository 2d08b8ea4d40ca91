"""Append-only transaction log.

Each successful deposit, withdrawal or remittance is one tab-separated line:
timestamp, kind, account number, recipient account number (empty unless a
remittance), amount and tax.
"""

from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Optional

from banksim.domain.entities import TransactionKind
from banksim.domain.errors import TransactionLogError

LOG_FILE_NAME = "transactions.log"


class TransactionLog:
    """Transaction log stored as a text file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def append(
        self,
        kind: TransactionKind,
        account_number: str,
        amount: Decimal,
        recipient_number: Optional[str] = None,
        tax: Decimal = Decimal("0.00"),
        timestamp: Optional[datetime] = None,
    ) -> None:
        """Append one transaction to the log.

        Raises:
            TransactionLogError: If the log cannot be opened or written
        """
        timestamp = timestamp or datetime.now(timezone.utc)
        line = "\t".join(
            [
                timestamp.isoformat(timespec="seconds"),
                kind.value,
                account_number,
                recipient_number or "",
                f"{amount:.2f}",
                f"{tax:.2f}",
            ]
        )
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        except OSError as e:
            raise TransactionLogError(f"Failed to record transaction in {self.path}: {e}")
