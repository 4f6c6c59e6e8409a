"""Use case that reads donation rows from CSV and charges each donor."""

from __future__ import annotations

import csv
import logging
import re
import threading
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TextIO

from tamboon.card import Card
from tamboon.donation import (
    PAH_PA_CURRENCY,
    PahPaRecord,
    SongPahPa,
    TonPahPa,
    TonPahPaSummary,
)
from tamboon.money import Money
from tamboon.payment import ChargeCreditCard
from tamboon.transaction import TransactionError

logger = logging.getLogger(__name__)

EXPECTED_HEADERS = ("Name", "AmountSubunits", "CCNumber", "CVV", "ExpMonth", "ExpYear")

_UNSIGNED = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")


class InvalidHeaderError(ValueError):
    """Raised when the input's header row is missing or not as expected."""

    def __init__(self) -> None:
        super().__init__("input file has the invalid headers")


def validate_header_row(row: Sequence[str]) -> bool:
    """Whether the row is exactly the expected header."""
    return tuple(row) == EXPECTED_HEADERS


def parse_record(record: Sequence[str]) -> PahPaRecord:
    """Build a record from a CSV row, trimming every field."""
    if len(record) < len(EXPECTED_HEADERS):
        raise ValueError("record is too short")
    name, amount, number, cvv, month, year = (value.strip() for value in record[:6])
    return PahPaRecord(
        name=name,
        amount_subunits=amount,
        cc_number=number,
        cvv=cvv,
        exp_month=month,
        exp_year=year,
    )


def _parse_float(text: str) -> float:
    if "_" in text:
        raise ValueError(f"invalid number: {text!r}")
    return float(text)


def _parse_int(text: str, pattern: re.Pattern[str], low: int, high: int) -> int:
    if not pattern.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not low <= value <= high:
        raise ValueError(f"integer out of range: {text!r}")
    return value


class FryPahPaUseCase:
    """Charges every donation row and keeps a running tally."""

    def __init__(self, charge_use_case: ChargeCreditCard) -> None:
        self.charge_use_case = charge_use_case
        self.ton_pah_pa = TonPahPa()
        self._lock = threading.Lock()

    def execute(self, stream: Iterable[str]) -> TonPahPaSummary:
        """Process CSV text with a header row; bad rows are skipped."""
        reader = csv.reader(stream)
        try:
            header = next(reader)
        except (StopIteration, csv.Error) as exc:
            raise InvalidHeaderError() from exc
        if not validate_header_row(header):
            raise InvalidHeaderError()

        row_number = 0
        while True:
            try:
                row = next(reader)
            except StopIteration:
                break
            except csv.Error as exc:
                row_number += 1
                logger.debug("row %d unreadable: %s", row_number, exc)
                continue
            if not row:
                continue
            row_number += 1
            if len(row) != len(header):
                logger.debug("row %d has the wrong number of fields", row_number)
                continue
            self._try_donate(row, row_number)

        return self.ton_pah_pa.summary()

    def execute_bulk(self, rows: Iterable[Sequence[str]]) -> None:
        """Process rows, the first being the header, charging concurrently."""
        iterator = iter(rows)
        try:
            header = next(iterator)
        except StopIteration as exc:
            raise InvalidHeaderError() from exc
        if not validate_header_row(header):
            raise InvalidHeaderError()

        with ThreadPoolExecutor() as executor:
            for row_number, row in enumerate(iterator, start=1):
                executor.submit(self._try_donate, row, row_number)

    def _try_donate(self, row: Sequence[str], row_number: int) -> None:
        try:
            self._donate(parse_record(row), row_number)
        except (ValueError, TransactionError) as exc:
            logger.debug("row %d skipped: %s", row_number, exc)

    def _donate(self, record: PahPaRecord, row_number: int) -> None:
        amount = _parse_float(record.amount_subunits)
        exp_month = _parse_int(record.exp_month, _UNSIGNED, 0, 255)
        exp_year = _parse_int(record.exp_year, _SIGNED, -32768, 32767)

        card = Card(
            number=record.cc_number,
            holder=record.name,
            security_code=record.cvv,
            expiry_month=exp_month,
            expiry_year=exp_year,
        )
        song_pah_pa = SongPahPa.create(
            str(row_number),
            record.name,
            Money.from_float(PAH_PA_CURRENCY, amount / 100),
            card,
        )
        transaction = self.charge_use_case.execute(
            song_pah_pa.donate_by_card,
            song_pah_pa.donate_amount.amount,
            song_pah_pa.donate_amount.currency,
        )
        song_pah_pa.attach_transaction(transaction)
        with self._lock:
            self.ton_pah_pa.add(song_pah_pa)