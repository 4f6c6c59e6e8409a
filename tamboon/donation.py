"""Donation records (song pah pa) and their running tally (ton pah pa)."""

from __future__ import annotations

from dataclasses import dataclass, field

from tamboon.card import Card
from tamboon.money import Money
from tamboon.transaction import Transaction

PAH_PA_CURRENCY = "thb"


class DonationError(ValueError):
    """Base class for donation validation errors."""


class RequiredFieldMissingError(DonationError):
    """Raised when a required donation field is blank."""

    def __init__(self) -> None:
        super().__init__("required field missing")


class InvalidDonateAmountError(DonationError):
    """Raised when a donation amount is not positive."""

    def __init__(self) -> None:
        super().__init__("donate amount must be greater than zero")


@dataclass(frozen=True)
class PahPaRecord:
    """One raw donation row, all fields as text."""

    name: str
    amount_subunits: str
    cc_number: str
    cvv: str
    exp_month: str
    exp_year: str


@dataclass
class SongPahPa:
    """A single donation made with a card."""

    id: str
    donor_name: str
    donate_amount: Money
    donate_by_card: Card
    transaction: Transaction = field(default_factory=Transaction)

    @classmethod
    def create(
        cls, id: str, donor_name: str, amount: Money, donate_by_card: Card  # noqa: A002
    ) -> SongPahPa:
        """Validate and build a donation with a fresh, unpaid transaction."""
        donation_id = id.strip()
        name = donor_name.strip()
        if not donation_id or not name:
            raise RequiredFieldMissingError()
        if amount.amount <= 0:
            raise InvalidDonateAmountError()
        return cls(
            id=donation_id,
            donor_name=name,
            donate_amount=amount,
            donate_by_card=donate_by_card,
            transaction=Transaction(),
        )

    @property
    def is_donated(self) -> bool:
        """Whether the attached transaction succeeded."""
        return self.transaction.is_payment_successful

    def attach_transaction(self, transaction: Transaction) -> SongPahPa:
        """Attach the payment transaction and return this donation."""
        self.transaction = transaction
        return self


@dataclass(frozen=True)
class TonPahPaSummary:
    """Totals over all donations received."""

    total: Money
    average: Money
    faulty: Money
    successful: Money
    donor_count: int


@dataclass
class TonPahPa:
    """Running tally of donations received, paid and failed."""

    total: Money = field(default_factory=lambda: Money.zero(PAH_PA_CURRENCY))
    faulty_amount: Money = field(default_factory=lambda: Money.zero(PAH_PA_CURRENCY))
    donor_count: int = 0

    def add(self, song_pah_pa: SongPahPa) -> None:
        """Count a donation towards the total, and as paid or faulty."""
        self.total = self.total.add(song_pah_pa.donate_amount)
        if song_pah_pa.is_donated:
            self.donor_count += 1
            return
        self.faulty_amount = self.faulty_amount.add(song_pah_pa.donate_amount)

    def summary(self) -> TonPahPaSummary:
        """Return the totals, the successful sum and the average per donor."""
        successful = self.total.subtract(self.faulty_amount)
        average = Money.zero(PAH_PA_CURRENCY)
        if self.donor_count > 0:
            average = successful.divided_by(float(self.donor_count))
        return TonPahPaSummary(
            total=self.total,
            average=average,
            faulty=self.faulty_amount,
            successful=successful,
            donor_count=self.donor_count,
        )