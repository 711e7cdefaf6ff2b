"""Line items and order summaries.

Both are immutable value objects. Money is held as ``Decimal`` so totals do
not pick up binary floating point drift.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation
from uuid import uuid4

from orderflow.errors import InvalidLineItem


def to_decimal(value) -> Decimal:
    """Convert a price-like value to ``Decimal``.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather than
    its binary expansion. Raises ``ValueError`` for anything non-numeric.
    """
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int | float | str):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"not a number: {value!r}") from None
    else:
        raise ValueError(f"not a number: {value!r}")

    if not result.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    return result


@dataclass(frozen=True)
class LineItem:
    """A priced, quantified product entry in an order."""

    unit_price: Decimal
    quantity: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit_price", to_decimal(self.unit_price))

    @classmethod
    def from_mapping(cls, data: Mapping, index: int = 0) -> "LineItem":
        """Build a line item from a dict.

        The price may be given as ``unit_price`` or ``price``. ``index`` is the
        item's position in its order, used in ``InvalidLineItem`` messages.
        """
        if "unit_price" in data:
            price = data["unit_price"]
        elif "price" in data:
            price = data["price"]
        else:
            raise InvalidLineItem(index, "unit_price", "is missing")
        if "quantity" not in data:
            raise InvalidLineItem(index, "quantity", "is missing")
        return cls(unit_price=price, quantity=data["quantity"])

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class OrderSummary:
    """What gets persisted and announced once an order's total is known."""

    total: Decimal
    item_count: int = 0
    currency: str = "USD"
    order_id: str = field(default_factory=lambda: uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict:
        return {
            "order_id": self.order_id,
            "total": str(self.total),
            "item_count": self.item_count,
            "currency": self.currency,
            "created_at": self.created_at.isoformat(),
        }
