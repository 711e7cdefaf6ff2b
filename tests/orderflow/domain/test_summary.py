"""Tests for LineItem and OrderSummary value objects."""

from dataclasses import FrozenInstanceError
from datetime import UTC
from decimal import Decimal

import pytest
from orderflow.errors import InvalidLineItem
from orderflow.order.summary import LineItem, OrderSummary, to_decimal


class TestToDecimal:
    def test_int(self):
        assert to_decimal(10) == Decimal("10")

    def test_float_goes_through_str(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_string(self):
        assert to_decimal(" 19.99 ") == Decimal("19.99")

    def test_decimal_passes_through(self):
        value = Decimal("4.50")
        assert to_decimal(value) is value

    @pytest.mark.parametrize("value", ["abc", None, True, [1], "NaN", "Infinity"])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValueError):
            to_decimal(value)


class TestLineItem:
    def test_price_is_decimal(self):
        item = LineItem(unit_price=10, quantity=2)
        assert isinstance(item.unit_price, Decimal)
        assert item.unit_price == Decimal("10")

    def test_subtotal(self):
        assert LineItem(unit_price="2.50", quantity=4).subtotal == Decimal("10.00")

    def test_is_immutable(self):
        item = LineItem(unit_price=10, quantity=2)
        with pytest.raises(FrozenInstanceError):
            item.quantity = 5

    def test_equality_by_value(self):
        assert LineItem(unit_price=10, quantity=2) == LineItem(unit_price="10", quantity=2)

    def test_from_mapping_with_price_key(self):
        item = LineItem.from_mapping({"price": 15, "quantity": 1})
        assert item == LineItem(unit_price=15, quantity=1)

    def test_from_mapping_with_unit_price_key(self):
        item = LineItem.from_mapping({"unit_price": "3.25", "quantity": 3})
        assert item.unit_price == Decimal("3.25")
        assert item.quantity == 3

    def test_from_mapping_prefers_unit_price(self):
        item = LineItem.from_mapping({"unit_price": 1, "price": 99, "quantity": 1})
        assert item.unit_price == Decimal("1")

    def test_from_mapping_without_price(self):
        with pytest.raises(InvalidLineItem, match="unit_price is missing"):
            LineItem.from_mapping({"quantity": 1})

    def test_from_mapping_without_quantity(self):
        with pytest.raises(InvalidLineItem) as exc_info:
            LineItem.from_mapping({"price": 1}, index=3)
        assert exc_info.value.index == 3
        assert exc_info.value.field == "quantity"


class TestOrderSummary:
    def test_defaults(self):
        summary = OrderSummary(total=Decimal("35.00"))
        assert summary.item_count == 0
        assert summary.currency == "USD"
        assert len(summary.order_id) == 32
        assert summary.created_at.tzinfo is UTC

    def test_order_ids_are_unique(self):
        assert OrderSummary(total=Decimal(0)).order_id != OrderSummary(total=Decimal(0)).order_id

    def test_is_immutable(self):
        summary = OrderSummary(total=Decimal("35.00"))
        with pytest.raises(FrozenInstanceError):
            summary.total = Decimal("1.00")

    def test_to_dict(self):
        summary = OrderSummary(total=Decimal("35.00"), item_count=2, order_id="abc")
        data = summary.to_dict()
        assert data["order_id"] == "abc"
        assert data["total"] == "35.00"
        assert data["item_count"] == 2
        assert data["currency"] == "USD"
        assert data["created_at"] == summary.created_at.isoformat()
