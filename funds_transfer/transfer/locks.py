"""Per-account mutual exclusion.

Locks are acquired in ascending account id order, so two transfers that swap
source and destination cannot deadlock. An entry lives only while some
caller holds or waits for it.
"""

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List


class _LockEntry:
    __slots__ = ("lock", "holders")

    def __init__(self):
        self.lock = threading.Lock()
        self.holders = 0


class AccountLockRegistry:
    """Reference-counted lock per account id."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[int, _LockEntry] = {}

    def _reserve(self, account_ids: List[int]) -> List[_LockEntry]:
        with self._guard:
            entries = []
            for account_id in account_ids:
                entry = self._locks.get(account_id)
                if entry is None:
                    entry = _LockEntry()
                    self._locks[account_id] = entry
                entry.holders += 1
                entries.append(entry)
            return entries

    def _release(self, account_ids: List[int]) -> None:
        with self._guard:
            for account_id in account_ids:
                entry = self._locks[account_id]
                entry.holders -= 1
                if entry.holders == 0:
                    del self._locks[account_id]

    @contextmanager
    def hold(self, *account_ids: int) -> Iterator[None]:
        """Hold the locks of all given accounts (duplicates are taken once)."""
        ordered_ids = sorted(set(account_ids))
        entries = self._reserve(ordered_ids)
        acquired = []
        try:
            for entry in entries:
                entry.lock.acquire()
                acquired.append(entry.lock)
            yield
        finally:
            for lock in reversed(acquired):
                lock.release()
            self._release(ordered_ids)

    def is_held(self, account_id: int) -> bool:
        with self._guard:
            entry = self._locks.get(account_id)
            return entry is not None and entry.lock.locked()

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
