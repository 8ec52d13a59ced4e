"""
Domain models and value objects.

Contains fundamental domain entities: Account, HistoryEntry, TransferRequest.
"""

from funds_transfer.core.domain.account import Account
from funds_transfer.core.domain.history import HistoryEntry, HistoryType
from funds_transfer.core.domain.transfer_request import TransferRequest

__all__ = [
    # Account model
    "Account",
    # History model
    "HistoryEntry",
    "HistoryType",
    # Request
    "TransferRequest",
]
