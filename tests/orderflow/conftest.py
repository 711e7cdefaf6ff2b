import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def orderflow_bed():
    from orderflow.domain import orderflow

    bed = DomainFixture(orderflow)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(orderflow_bed):
    with orderflow_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "ORDERFLOW_STORE",
        "ORDERFLOW_NOTIFIER",
        "ORDERFLOW_NOTIFICATION_FAILURE",
        "ORDERFLOW_CURRENCY",
        "ORDERFLOW_CURRENCY_PLACES",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def store():
    from orderflow.storage.fake_store import InMemoryOrderStore

    return InMemoryOrderStore()


@pytest.fixture
def notifier():
    from orderflow.notification.fake_sender import RecordingNotificationSender

    return RecordingNotificationSender()


@pytest.fixture
def sample_items():
    return [
        {"price": 10, "quantity": 2},
        {"price": 15, "quantity": 1},
    ]
