"""Reference adapters for the collaborator contracts."""

from .memory import (
    FixedClock,
    InMemoryAccountStore,
    InMemoryTransferHistoryStore,
    InMemoryUnitOfWork,
    SystemClock,
)

__all__ = [
    "FixedClock",
    "InMemoryAccountStore",
    "InMemoryTransferHistoryStore",
    "InMemoryUnitOfWork",
    "SystemClock",
]
