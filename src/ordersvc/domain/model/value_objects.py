"""Value objects for prices, order totals and line quantities."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from ordersvc.domain.exceptions import ValidationError

_CENT = Decimal("0.01")

# Stored as signed 64-bit integer cents
_MAX_AMOUNT = Decimal(2**63 - 1).scaleb(-2)

MAX_QUANTITY = 1_000_000


@dataclass(frozen=True)
class Money:
    """A non-negative amount, held to the cent.

    Amounts are rounded half-up to two places on construction, so a
    product price, a line total and an order total always compare and
    print the same way the database stores them (integer cents).
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")
        try:
            amount = self.amount.quantize(_CENT, rounding=ROUND_HALF_UP)
        except InvalidOperation as exc:
            raise ValidationError(f"Money amount is out of range: {self.amount}") from exc
        if amount > _MAX_AMOUNT:
            raise ValidationError(f"Money amount is out of range: {self.amount}")
        object.__setattr__(self, "amount", amount)

    def __add__(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise ValidationError(f"Cannot add {other.currency} to {self.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, quantity: int) -> Money:
        if not isinstance(quantity, int):
            raise TypeError(f"Can only multiply Money by int, got {type(quantity).__name__}")
        return Money(self.amount * quantity, self.currency)

    def __str__(self) -> str:
        return str(self.amount)

    @property
    def cents(self) -> int:
        return int(self.amount * 100)

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal(0), currency)

    @staticmethod
    def total(amounts: Iterable[Money], currency: str = "USD") -> Money:
        """Sum *amounts*; an empty iterable totals zero."""
        result = Money.zero(currency)
        for amount in amounts:
            result = result + amount
        return result

    @staticmethod
    def from_cents(cents: int, currency: str = "USD") -> Money:
        return Money(Decimal(cents).scaleb(-2), currency)

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Parse a price as entered by a person or read from a request."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """Units of one product on an order line, from 1 to MAX_QUANTITY."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError("Quantity must be positive")
        if self.value > MAX_QUANTITY:
            raise ValidationError(f"Quantity cannot exceed {MAX_QUANTITY}")

    def __str__(self) -> str:
        return str(self.value)
