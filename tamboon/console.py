"""Console presentation of a donation summary."""

from __future__ import annotations

import math
import sys
from typing import TextIO

from tamboon.donation import TonPahPaSummary
from tamboon.money import Money


def format_amount(value: float) -> str:
    """Format with comma thousands separators and two decimals."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{value:,.2f}"


def _line(label: str, money: Money) -> str:
    amount = format_amount(money.amount)
    return f"{label:>20}: {money.currency.upper():<5} {amount:>15}\n"


def print_summary(summary: TonPahPaSummary, out: TextIO | None = None) -> None:
    """Write the summary table to ``out`` (standard output by default)."""
    stream = sys.stdout if out is None else out
    stream.write(_line("total received", summary.total))
    stream.write(_line("successfully donated", summary.successful))
    stream.write(_line("faulty donation", summary.faulty))
    stream.write("\n")
    stream.write(_line("average per person", summary.average))