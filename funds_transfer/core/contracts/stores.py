"""
Collaborator Contracts — узкие интерфейсы внешних хранилищ

Ядро не знает о реализации хранилищ: только эти протоколы.
Реализации для тестов и встраивания: funds_transfer.adapters.memory.

Контракты:
- AccountStore: поиск и сохранение снапшота счёта
- TransferHistoryStore: сумма списаний за день и append записей истории
- Clock: источник "текущего дня" для дневного окна (инжектируемый)
- UnitOfWork: граница атомарной записи обоих хранилищ
"""

from contextlib import AbstractContextManager
from datetime import date
from typing import Optional, Protocol, runtime_checkable

from funds_transfer.core.domain.account import Account
from funds_transfer.core.domain.history import HistoryEntry, HistoryType


@runtime_checkable
class AccountStore(Protocol):
    """Хранилище счетов."""

    def find_by_id(self, account_id: int) -> Optional[Account]:
        """Текущий снапшот счёта или None, если счёт не существует."""
        ...

    def save(self, account: Account) -> None:
        """Заменить снапшот счёта (по account.id)."""
        ...


@runtime_checkable
class TransferHistoryStore(Protocol):
    """Хранилище истории переводов."""

    def amount_withdrawn_today(self, account_id: int, on: date) -> int:
        """Сумма WITHDRAW записей счёта за календарный день `on`."""
        ...

    def append(
        self,
        account_id: int,
        amount: int,
        kind: HistoryType,
        *,
        transfer_id: str,
        recorded_on: date,
    ) -> HistoryEntry:
        """Добавить запись истории. Записи не изменяются и не удаляются."""
        ...


@runtime_checkable
class Clock(Protocol):
    """Источник текущей календарной даты."""

    def today(self) -> date:
        ...


@runtime_checkable
class UnitOfWork(Protocol):
    """
    Граница атомарной записи.

    Все записи внутри atomic() применяются целиком либо отбрасываются,
    если из блока вылетает исключение.
    """

    def atomic(self) -> AbstractContextManager[None]:
        ...
