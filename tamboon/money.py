"""Currency-tagged monetary amounts with two-decimal precision."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

_CENT = Decimal("0.01")


class MoneyError(ValueError):
    """Base class for money arithmetic errors."""


class MismatchedCurrencyError(MoneyError):
    """Raised when combining amounts of different currencies."""

    def __init__(self) -> None:
        super().__init__("money currencies do not match")


class DivideByZeroError(MoneyError):
    """Raised when dividing an amount by zero."""

    def __init__(self) -> None:
        super().__init__("money cannot be divided by zero")


def _decimal_from_float(value: float) -> Decimal:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"amount must be a finite number, got {value!r}")
    return Decimal(repr(number))


def _round2(value: Decimal) -> Decimal:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Money:
    """An immutable amount of money in a given currency."""

    currency: str
    value: Decimal = Decimal(0)

    @classmethod
    def from_float(cls, currency: str, amount: float) -> Money:
        """Build money from a float, rounded half away from zero to two places."""
        return cls(currency, _round2(_decimal_from_float(amount)))

    @classmethod
    def zero(cls, currency: str) -> Money:
        """Return a zero amount in the given currency."""
        return cls(currency, Decimal(0))

    @property
    def amount(self) -> float:
        """The amount as a float."""
        return float(self.value)

    def __str__(self) -> str:
        return f"{_round2(self.value):f}"

    def _check_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise MismatchedCurrencyError()

    def add(self, addend: Money) -> Money:
        """Return the sum of two amounts in the same currency."""
        self._check_currency(addend)
        return Money(self.currency, self.value + addend.value)

    def subtract(self, operand: Money) -> Money:
        """Return the difference of two amounts in the same currency."""
        self._check_currency(operand)
        return Money(self.currency, self.value - operand.value)

    def multiplied_by(self, multiplier: float) -> Money:
        """Return the amount multiplied and rounded to two places."""
        return Money(self.currency, _round2(self.value * _decimal_from_float(multiplier)))

    def divided_by(self, divisor: float) -> Money:
        """Return the amount divided and rounded to two places."""
        if divisor == 0:
            raise DivideByZeroError()
        return Money(self.currency, _round2(self.value / _decimal_from_float(divisor)))