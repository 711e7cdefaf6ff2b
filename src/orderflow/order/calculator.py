"""Order total calculation.

Pure arithmetic over line items. No I/O and no logging.
"""

from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal, Inexact, InvalidOperation, localcontext

from orderflow.errors import CalculationError, InvalidLineItem
from orderflow.order.summary import to_decimal


class TotalCalculator:
    """Sums ``unit_price * quantity`` across line items.

    Items may be ``LineItem`` instances, any object with ``unit_price`` and
    ``quantity`` attributes, or mappings keyed by ``unit_price`` (or
    ``price``) and ``quantity``. Every item is validated before the result is
    rounded, so an invalid item anywhere in the input fails the whole call.

    Sums are exact up to ``max_digits`` significant digits. A total that needs
    more digits raises ``CalculationError`` instead of being rounded.
    """

    max_digits = 60

    def __init__(self, places: int = 2, rounding: str = ROUND_HALF_UP) -> None:
        if places < 0:
            raise ValueError("places must not be negative")
        self.places = places
        self.rounding = rounding
        self._quantum = Decimal(1).scaleb(-places)

    def compute_total(self, items: Iterable) -> Decimal:
        total = Decimal(0)
        with localcontext() as ctx:
            ctx.prec = self.max_digits
            ctx.traps[Inexact] = True
            for index, item in enumerate(items):
                price, quantity = self._read_item(index, item)
                try:
                    total += price * quantity
                except Inexact:
                    raise CalculationError(
                        f"Order total exceeds {self.max_digits} significant digits at line item {index}"
                    ) from None

            # rounding to the quantum is expected here
            ctx.traps[Inexact] = False
            try:
                return total.quantize(self._quantum, rounding=self.rounding)
            except InvalidOperation:
                raise CalculationError(
                    f"Order total {total} cannot be expressed with {self.places} places "
                    f"in {self.max_digits} digits"
                ) from None

    def _read_item(self, index: int, item) -> tuple[Decimal, int]:
        if isinstance(item, Mapping):
            if "unit_price" in item:
                raw_price = item["unit_price"]
            elif "price" in item:
                raw_price = item["price"]
            else:
                raise InvalidLineItem(index, "unit_price", "is missing")
            if "quantity" not in item:
                raise InvalidLineItem(index, "quantity", "is missing")
            raw_quantity = item["quantity"]
        else:
            if not hasattr(item, "unit_price"):
                raise InvalidLineItem(index, "unit_price", "is missing")
            if not hasattr(item, "quantity"):
                raise InvalidLineItem(index, "quantity", "is missing")
            raw_price = item.unit_price
            raw_quantity = item.quantity

        try:
            price = to_decimal(raw_price)
        except ValueError:
            raise InvalidLineItem(index, "unit_price", f"is not a number: {raw_price!r}") from None
        if price < 0:
            raise InvalidLineItem(index, "unit_price", f"must not be negative: {price}")

        # bool is an int subclass
        if isinstance(raw_quantity, bool) or not isinstance(raw_quantity, int):
            raise InvalidLineItem(index, "quantity", f"must be an integer: {raw_quantity!r}")
        if raw_quantity < 0:
            raise InvalidLineItem(index, "quantity", f"must not be negative: {raw_quantity}")

        return price, raw_quantity
