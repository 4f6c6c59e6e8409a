"""Validated payment card value object."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

BANGKOK_TZ = timezone(timedelta(hours=7), "Asia/Bangkok")


class CardError(ValueError):
    """Base class for card validation errors."""


class InvalidExpiryMonthError(CardError):
    """Raised when the expiry month is outside 1..12."""

    def __init__(self) -> None:
        super().__init__("invalid expiry month")


class InvalidExpiryYearError(CardError):
    """Raised when the expiry year is outside 2000..9999."""

    def __init__(self) -> None:
        super().__init__("invalid expiry year")


class FieldValueRequiredError(CardError):
    """Raised when a required text field is blank."""

    def __init__(self) -> None:
        super().__init__("field value is required")


@dataclass(frozen=True)
class Card:
    """A payment card; fields are validated and stripped on construction."""

    number: str
    holder: str
    security_code: str
    expiry_month: int
    expiry_year: int

    def __post_init__(self) -> None:
        if not 1 <= self.expiry_month <= 12:
            raise InvalidExpiryMonthError()
        if not 2000 <= self.expiry_year <= 9999:
            raise InvalidExpiryYearError()
        number = self.number.strip()
        holder = self.holder.strip()
        security_code = self.security_code.strip()
        if not (number and holder and security_code):
            raise FieldValueRequiredError()
        object.__setattr__(self, "number", number)
        object.__setattr__(self, "holder", holder)
        object.__setattr__(self, "security_code", security_code)

    @property
    def expiry_month_text(self) -> str:
        """The expiry month as two digits."""
        return f"{self.expiry_month:02d}"

    @property
    def expiry_year_text(self) -> str:
        """The expiry year as text."""
        return str(self.expiry_year)

    def is_expired(self, now: datetime | None = None) -> bool:
        """Whether the card's expiry month lies before the current Bangkok month."""
        if now is None:
            now = datetime.now(BANGKOK_TZ)
        elif now.tzinfo is not None:
            now = now.astimezone(BANGKOK_TZ)
        return (now.year, now.month) > (self.expiry_year, self.expiry_month)