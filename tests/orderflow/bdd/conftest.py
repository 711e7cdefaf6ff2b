"""Shared BDD fixtures and step definitions for order processing."""

from decimal import Decimal

import pytest
from orderflow.config import NotificationFailurePolicy
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for the captured processing error."""
    return {"exc": None}


@pytest.fixture()
def policy():
    return {"value": NotificationFailurePolicy.LOG}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("an order with items priced {priced}"), target_fixture="items")
def order_items(priced):
    items = []
    for part in priced.split(" and "):
        price, quantity = part.split(" x ")
        items.append({"price": Decimal(price), "quantity": int(quantity)})
    return items


@given("the order store is unavailable")
def store_unavailable(store):
    store.configure(should_succeed=False, failure_reason="database unavailable")


@given("notifications cannot be delivered")
def notifications_fail(notifier):
    notifier.configure(should_succeed=False, failure_reason="smtp timeout")


@given("notification failures are raised")
def raise_notification_failures(policy):
    policy["value"] = NotificationFailurePolicy.RAISE


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('processing fails with "{error_type}"'))
def processing_fails(error, error_type):
    assert error["exc"] is not None
    assert type(error["exc"]).__name__ == error_type


@then(parsers.cfparse("the saved total is {total}"))
def saved_total(store, total):
    assert len(store.saved) == 1
    assert store.saved[0].total == Decimal(total)


@then(parsers.cfparse("{count:d} orders were saved"))
def orders_saved(store, count):
    assert len(store.saved) == count


@then(parsers.cfparse("{count:d} notification was sent"))
@then(parsers.cfparse("{count:d} notifications were sent"))
def notifications_sent(notifier, count):
    assert len(notifier.sent) == count
