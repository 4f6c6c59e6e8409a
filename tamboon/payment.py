"""Payment gateways and the credit-card charging use case."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from enum import Enum

from tamboon.card import Card, CardError
from tamboon.money import Money
from tamboon.transaction import Transaction, TransactionError


class PaymentGateway(str, Enum):
    OMISE = "omise"


class PaymentService(ABC):
    """A gateway able to charge a card, recording the outcome on a transaction."""

    @property
    @abstractmethod
    def gateway(self) -> PaymentGateway:
        """The gateway this service talks to."""

    @abstractmethod
    def charge(self, card: Card, transaction: Transaction) -> None:
        """Charge the card for the transaction's amount and mark the transaction."""


class ChargeCreditCard:
    """Charges a card through a payment service and returns the transaction."""

    def __init__(self, payment_service: PaymentService) -> None:
        self.payment_service = payment_service

    def execute(self, card: Card, amount: float, currency: str) -> Transaction:
        transaction = Transaction.create(Money.from_float(currency, amount))
        try:
            charging_card = dataclasses.replace(card)
        except CardError as exc:
            transaction.mark_failed(str(exc))
            return transaction

        try:
            self.payment_service.charge(charging_card, transaction)
        except TransactionError:
            pass
        return transaction