"""Process-wide store lifecycle and the FastAPI storage dependency.

``init_storage`` runs once at startup. With the memory backend a single
MemoryStorage lives for the whole process; with the SQL backend each
request gets a SqlStorage bound to its own session.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

from schoolpulse.database import close_db, create_tables, get_session, init_db
from schoolpulse.storage.base import Storage
from schoolpulse.storage.memory import MemoryStorage
from schoolpulse.storage.sql import SqlStorage

BACKENDS = ("memory", "sql")

_backend: str | None = None
_memory: MemoryStorage | None = None


async def init_storage(backend: str, database_url: str | None = None, create_schema: bool = False) -> None:
    """Initialize the configured backend."""
    global _backend, _memory  # noqa: PLW0603
    if backend not in BACKENDS:
        msg = f"Unknown storage backend {backend!r}; expected one of {BACKENDS}"
        raise ValueError(msg)

    if backend == "sql":
        if not database_url:
            msg = "database_url is required for the sql storage backend"
            raise ValueError(msg)
        await init_db(database_url)
        if create_schema:
            await create_tables()
    else:
        _memory = MemoryStorage()
    _backend = backend


async def close_storage() -> None:
    """Tear down the backend."""
    global _backend, _memory  # noqa: PLW0603
    if _backend == "sql":
        await close_db()
    _memory = None
    _backend = None


async def get_storage() -> AsyncGenerator[Storage, None]:
    """Yield a store for the current request (FastAPI dependency)."""
    if _backend is None:
        msg = "Storage not initialized. Call init_storage() first."
        raise RuntimeError(msg)
    if _backend == "memory":
        assert _memory is not None
        yield _memory
        return
    async for session in get_session():
        yield SqlStorage(session)


__all__ = [
    "MemoryStorage",
    "SqlStorage",
    "Storage",
    "close_storage",
    "get_storage",
    "init_storage",
]
