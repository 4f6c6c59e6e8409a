import pytest

from tamboon.card import Card
from tamboon.money import Money
from tamboon.payment import ChargeCreditCard, PaymentGateway, PaymentService
from tamboon.transaction import (
    MissingExternalRefIdError,
    TransactionStatus,
)


class RecordingService(PaymentService):
    def __init__(self, outcome):
        self.outcome = outcome
        self.calls = []

    @property
    def gateway(self):
        return PaymentGateway.OMISE

    def charge(self, card, transaction):
        self.calls.append((card, transaction))
        self.outcome(transaction)


@pytest.fixture
def card():
    return Card("1234", "Jane Doe", "123", 5, 2030)


def test_gateway_value():
    assert PaymentGateway("omise") is PaymentGateway.OMISE


def test_abstract_service_cannot_be_instantiated():
    with pytest.raises(TypeError):
        PaymentService()


def test_execute_succeeds(card):
    service = RecordingService(lambda t: t.mark_succeeded("chrg_test"))
    transaction = ChargeCreditCard(service).execute(card, 12.345, "thb")
    assert transaction.status is TransactionStatus.SUCCEEDED
    assert transaction.external_ref_id == "chrg_test"
    assert transaction.payment_amount == Money.from_float("thb", 12.345)
    charged_card, charged_transaction = service.calls[0]
    assert charged_card == card
    assert charged_transaction is transaction


def test_execute_failure_recorded(card):
    service = RecordingService(lambda t: t.mark_failed("declined"))
    transaction = ChargeCreditCard(service).execute(card, 10, "thb")
    assert transaction.status is TransactionStatus.FAILED
    assert transaction.failure_message == "declined"
    assert transaction.is_payment_successful is False


def test_execute_ignores_transaction_errors(card):
    def outcome(transaction):
        raise MissingExternalRefIdError()

    service = RecordingService(outcome)
    transaction = ChargeCreditCard(service).execute(card, 10, "thb")
    assert transaction.status is TransactionStatus.CREATED
    assert len(service.calls) == 1


def test_execute_propagates_other_errors(card):
    def outcome(transaction):
        raise RuntimeError("boom")

    service = RecordingService(outcome)
    with pytest.raises(RuntimeError, match="boom"):
        ChargeCreditCard(service).execute(card, 10, "thb")