from __future__ import annotations

from collections.abc import AsyncIterator

from hypnolint.core.ports.collection import DiagnosticCollection
from hypnolint.store import InMemoryDiagnosticCollection

_collection: InMemoryDiagnosticCollection | None = None


async def get_collection() -> AsyncIterator[DiagnosticCollection]:
    """Yield the process-wide ``DiagnosticCollection``, creating it lazily on first call."""
    global _collection  # noqa: PLW0603
    if _collection is None:
        _collection = InMemoryDiagnosticCollection()
    yield _collection


async def shutdown_collection() -> None:
    global _collection  # noqa: PLW0603
    if _collection is not None:
        _collection.clear()
        _collection = None
