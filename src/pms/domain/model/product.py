"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
they are added to the catalog by the operator and their stock goes down
when orders containing them are shipped.
"""

from __future__ import annotations

from dataclasses import dataclass

from pms.domain.exceptions import ValidationError
from pms.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``price`` is the unit sale price and ``cost`` the unit acquisition
    cost.  The two are independent: nothing forces price >= cost.

    ``stock`` starts non-negative but is deliberately *not* clamped on
    shipment, so it can drop below zero if stock changed between order
    creation and shipment.
    """

    id: str | None
    name: str
    category_id: str
    price: Money
    cost: Money
    stock: int
    supplier_id: str | None = None

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        category_id: str,
        price: Money,
        cost: Money,
        stock: int,
        supplier_id: str | None = None,
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not category_id:
            raise ValidationError("Product category is required")
        if not isinstance(stock, int) or isinstance(stock, bool):
            raise ValidationError(
                f"Stock must be an integer, got {type(stock).__name__}"
            )
        if stock < 0:
            raise ValidationError(f"Stock cannot be negative, got {stock}")
        return Product(
            id=None,
            name=name.strip(),
            category_id=category_id,
            price=price,
            cost=cost,
            stock=stock,
            supplier_id=supplier_id or None,
        )

    # --- Stock ----------------------------------------------------------------

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def can_supply(self, quantity: int) -> bool:
        return quantity <= self.stock

    def decrement_stock(self, quantity: int) -> None:
        """Remove shipped units from stock.

        No lower bound is applied; see the class docstring.
        """
        if quantity <= 0:
            raise ValidationError("Stock decrement must be positive")
        self.stock -= quantity
