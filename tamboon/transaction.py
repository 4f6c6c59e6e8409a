"""Payment transactions and their lifecycle."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from tamboon.money import Money


class TransactionError(Exception):
    """Base class for transaction errors."""


class MissingExternalRefIdError(TransactionError):
    """Raised when marking success without an external reference."""

    def __init__(self) -> None:
        super().__init__("missing external ref_id")


class MissingFailureDetailError(TransactionError):
    """Raised when marking failure without a message."""

    def __init__(self) -> None:
        super().__init__("missing failure detail")


class TransactionNotFoundError(TransactionError):
    """Raised when an operation needs a transaction but none is given."""

    def __init__(self) -> None:
        super().__init__("transaction not found")


class TransactionStatus(str, Enum):
    CREATED = "created"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class Transaction:
    """A single payment attempt."""

    status: TransactionStatus = TransactionStatus.CREATED
    payment_amount: Money | None = None
    external_ref_id: str = ""
    failure_message: str = ""
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def create(cls, amount: Money) -> Transaction:
        """Start a new transaction for the given amount."""
        now = datetime.now()
        return cls(
            status=TransactionStatus.CREATED,
            payment_amount=amount,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_payment_successful(self) -> bool:
        return self.status is TransactionStatus.SUCCEEDED

    def mark_failed(self, failure_message: str) -> None:
        """Record a failure with its reason."""
        if not failure_message.strip():
            raise MissingFailureDetailError()
        self.status = TransactionStatus.FAILED
        self.failure_message = failure_message
        self.updated_at = datetime.now()

    def mark_succeeded(self, external_ref_id: str) -> None:
        """Record success with the gateway's reference id."""
        if not external_ref_id.strip():
            raise MissingExternalRefIdError()
        self.status = TransactionStatus.SUCCEEDED
        self.external_ref_id = external_ref_id
        self.updated_at = datetime.now()