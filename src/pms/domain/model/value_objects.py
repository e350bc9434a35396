"""Value Objects shared across the domain.

Both are immutable and compared by value.  Construction validates, so an
instance that exists is always usable.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import total_ordering
from typing import Iterable

from pms.domain.exceptions import InvalidQuantityError, ValidationError


@total_ordering
@dataclass(frozen=True)
class Money:
    """A non-negative dollar amount.

    The shop trades in a single currency, so Money is just a validated
    Decimal.  Sale prices and acquisition costs are both Money; profit is
    their difference, may be negative, and is kept as a plain Decimal.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, quantity: int) -> Money:
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise TypeError(f"Money can only be scaled by an int, got {type(quantity).__name__}")
        return Money(self.amount * quantity)

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @classmethod
    def of(cls, amount: str | int | Decimal) -> Money:
        """Parse operator input ("12", "12.50", 12) into Money."""
        try:
            return cls(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @classmethod
    def zero(cls) -> Money:
        return cls(Decimal("0.00"))

    @classmethod
    def total(cls, amounts: Iterable[Money]) -> Money:
        result = cls.zero()
        for amount in amounts:
            result = result + amount
        return result


@dataclass(frozen=True)
class Quantity:
    """How many units of a product an order line asks for (at least one)."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise InvalidQuantityError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise InvalidQuantityError(f"Quantity must be positive, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)
