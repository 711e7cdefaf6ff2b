"""Order store factory.

Builds the store selected by ``ORDERFLOW_STORE``:
- RepositoryOrderStore (default) persists through the Protean domain
- InMemoryOrderStore keeps summaries in memory
"""

from orderflow.config import StoreBackend, get_store_backend
from orderflow.storage.fake_store import InMemoryOrderStore
from orderflow.storage.port import OrderStore
from orderflow.storage.repository_store import RepositoryOrderStore


def create_store(backend: StoreBackend | None = None) -> OrderStore:
    """Return a new store for ``backend``, or for the configured backend."""
    backend = backend or get_store_backend()
    if backend is StoreBackend.REPOSITORY:
        return RepositoryOrderStore()
    if backend is StoreBackend.MEMORY:
        return InMemoryOrderStore()
    raise ValueError(f"Unknown store backend: {backend}")
