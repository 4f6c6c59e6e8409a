from decimal import Decimal

import pytest

from tamboon.card import Card
from tamboon.donation import (
    PAH_PA_CURRENCY,
    DonationError,
    InvalidDonateAmountError,
    PahPaRecord,
    RequiredFieldMissingError,
    SongPahPa,
    TonPahPa,
)
from tamboon.money import MismatchedCurrencyError, Money
from tamboon.transaction import Transaction


def _card(holder="Alice"):
    return Card(number="1111", holder=holder, security_code="123", expiry_month=1, expiry_year=2099)


def _song(amount=10.0, currency=PAH_PA_CURRENCY, paid=False, name="Alice"):
    song = SongPahPa.create("1", name, Money.from_float(currency, amount), _card(name))
    if paid:
        transaction = Transaction.create(song.donate_amount)
        transaction.mark_succeeded("ref")
        song.attach_transaction(transaction)
    return song


def test_create_strips_fields():
    song = SongPahPa.create("  7 ", "  Bob ", Money.from_float("thb", 5), _card("Bob"))
    assert song.id == "7"
    assert song.donor_name == "Bob"
    assert song.is_donated is False


@pytest.mark.parametrize("donation_id,name", [("", "Bob"), ("1", "   "), (" ", "")])
def test_create_requires_fields(donation_id, name):
    with pytest.raises(RequiredFieldMissingError) as info:
        SongPahPa.create(donation_id, name, Money.from_float("thb", 5), _card())
    assert str(info.value) == "required field missing"


@pytest.mark.parametrize("amount", [0, -1.5])
def test_create_rejects_non_positive_amount(amount):
    with pytest.raises(InvalidDonateAmountError) as info:
        SongPahPa.create("1", "Bob", Money.from_float("thb", amount), _card())
    assert str(info.value) == "donate amount must be greater than zero"
    assert isinstance(info.value, DonationError)


def test_attach_transaction_returns_self_and_sets_donated():
    song = _song()
    transaction = Transaction.create(song.donate_amount)
    transaction.mark_succeeded("ref")
    assert song.attach_transaction(transaction) is song
    assert song.is_donated is True


def test_failed_transaction_is_not_donated():
    song = _song()
    transaction = Transaction.create(song.donate_amount)
    transaction.mark_failed("declined")
    song.attach_transaction(transaction)
    assert song.is_donated is False


def test_empty_tally_summary_is_zero():
    summary = TonPahPa().summary()
    assert summary.donor_count == 0
    assert summary.total == Money.zero(PAH_PA_CURRENCY)
    assert summary.average == Money.zero(PAH_PA_CURRENCY)
    assert summary.successful == Money.zero(PAH_PA_CURRENCY)


def test_tally_splits_paid_and_faulty():
    tally = TonPahPa()
    paid_a = _song(10, paid=True)
    paid_b = _song(20, paid=True)
    faulty = _song(5)
    for song in (paid_a, paid_b, faulty):
        tally.add(song)

    summary = tally.summary()
    assert summary.donor_count == 2
    assert summary.faulty == faulty.donate_amount
    assert summary.successful == paid_a.donate_amount.add(paid_b.donate_amount)
    assert summary.successful.add(summary.faulty) == summary.total
    assert summary.average == summary.successful.divided_by(2)
    assert str(summary.average) == "15.00"


def test_tally_rejects_other_currency_without_change():
    tally = TonPahPa()
    tally.add(_song(10, paid=True))
    with pytest.raises(MismatchedCurrencyError):
        tally.add(_song(10, currency="usd", paid=True))
    assert tally.donor_count == 1
    assert tally.total.value == Decimal("10")


def test_record_holds_fields():
    record = PahPaRecord("A", "100", "1111", "123", "1", "2099")
    assert (record.name, record.amount_subunits, record.exp_year) == ("A", "100", "2099")