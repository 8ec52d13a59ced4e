"""
In-memory implementations of the transfer collaborators.

Thread-safe stores for tests and for embedding the core before a real
storage backend exists.
"""

import logging
import threading
from contextlib import contextmanager
from datetime import date, datetime, timezone
from typing import Dict, Iterable, Iterator, List, Optional

from funds_transfer.core.domain.account import Account
from funds_transfer.core.domain.history import HistoryEntry, HistoryType

logger = logging.getLogger(__name__)


class InMemoryAccountStore:
    """Account store backed by a dict keyed by account id."""

    def __init__(self, accounts: Iterable[Account] = ()):
        """Initialize the store.

        Args:
            accounts: Initial account snapshots
        """
        self._lock = threading.RLock()
        self._accounts: Dict[int, Account] = {account.id: account for account in accounts}

    def find_by_id(self, account_id: int) -> Optional[Account]:
        with self._lock:
            return self._accounts.get(account_id)

    def save(self, account: Account) -> None:
        with self._lock:
            self._accounts[account.id] = account

    def snapshot(self) -> Dict[int, Account]:
        with self._lock:
            return dict(self._accounts)

    def restore(self, accounts: Dict[int, Account]) -> None:
        with self._lock:
            self._accounts = dict(accounts)


class InMemoryTransferHistoryStore:
    """Append-only history kept in insertion order."""

    def __init__(self):
        self._lock = threading.RLock()
        self._entries: List[HistoryEntry] = []

    def amount_withdrawn_today(self, account_id: int, on: date) -> int:
        with self._lock:
            return sum(
                entry.amount
                for entry in self._entries
                if entry.account_id == account_id
                and entry.kind == HistoryType.WITHDRAW
                and entry.recorded_on == on
            )

    def append(
        self,
        account_id: int,
        amount: int,
        kind: HistoryType,
        *,
        transfer_id: str,
        recorded_on: date,
    ) -> HistoryEntry:
        entry = HistoryEntry(
            transfer_id=transfer_id,
            account_id=account_id,
            amount=amount,
            kind=kind,
            recorded_on=recorded_on,
        )
        with self._lock:
            self._entries.append(entry)
        return entry

    def entries(self, account_id: Optional[int] = None) -> List[HistoryEntry]:
        """Entries in append order, optionally filtered by account.

        Args:
            account_id: Account filter

        Returns:
            List[HistoryEntry]: Copy of the matching entries
        """
        with self._lock:
            if account_id is None:
                return list(self._entries)
            return [entry for entry in self._entries if entry.account_id == account_id]

    def truncate(self, length: int) -> None:
        with self._lock:
            del self._entries[length:]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class InMemoryUnitOfWork:
    """Atomic write boundary over the two in-memory stores.

    Both store locks are held for the whole block, so no other writer
    observes a partially applied transfer. On an escaping exception the
    account snapshot and the history length are restored.
    """

    def __init__(
        self,
        account_store: InMemoryAccountStore,
        history_store: InMemoryTransferHistoryStore,
    ):
        self.account_store = account_store
        self.history_store = history_store

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self.account_store._lock, self.history_store._lock:
            accounts = self.account_store.snapshot()
            history_length = len(self.history_store)
            try:
                yield
            except Exception:
                self.account_store.restore(accounts)
                self.history_store.truncate(history_length)
                logger.warning("In-memory unit of work rolled back")
                raise


class SystemClock:
    """Current UTC calendar date."""

    def today(self) -> date:
        return datetime.now(timezone.utc).date()


class FixedClock:
    """Clock pinned to a given date; `advance_to` moves it."""

    def __init__(self, current: date):
        self.current = current

    def today(self) -> date:
        return self.current

    def advance_to(self, current: date) -> None:
        self.current = current
