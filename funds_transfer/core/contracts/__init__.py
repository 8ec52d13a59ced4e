"""
Collaborator contracts consumed by the transfer core.
"""

from .stores import AccountStore, Clock, TransferHistoryStore, UnitOfWork

__all__ = [
    "AccountStore",
    "TransferHistoryStore",
    "Clock",
    "UnitOfWork",
]
