"""Transfer Service — единая точка входа ядра перевода средств

Оркестрация: lookup → validation → изменение балансов → запись истории.

Шаги:
1. Санитарные проверки запроса (amount — положительный int, source != destination)
2. Захват per-account locks в фиксированном порядке (меньший id первым)
3. Поиск счёта-источника, затем получателя (fail fast на первом отсутствующем)
4. TransferValidator по снапшоту источника (отказ пробрасывается как есть)
5. Commit внутри UnitOfWork.atomic(): save(debited), save(credited),
   WITHDRAW на источнике, DEPOSIT на получателе

Конкурентность:
- Шаги 3-5 выполняются под locks обоих счетов: два конкурентных перевода
  с одного счёта не могут оба пройти дневной лимит (нет lost update).
- Фаза commit атомарна: при сбое любой записи UnitOfWork отбрасывает
  все изменения перевода, включая уже добавленные записи истории.

Ретраев внутри нет: отказ окончателен для данного запроса.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

from funds_transfer.core.contracts import (
    AccountStore,
    TransferHistoryStore,
    UnitOfWork,
)
from funds_transfer.core.domain.account import Account
from funds_transfer.core.domain.history import HistoryType
from funds_transfer.core.domain.transfer_request import TransferRequest
from funds_transfer.core.errors import (
    TransferCommitError,
    TransferError,
    TransferErrorKind,
)
from funds_transfer.transfer.locks import AccountLockRegistry
from funds_transfer.transfer.validator import TransferValidator


logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class TransferResult:
    """Результат перевода."""

    success: bool
    error: Optional[TransferError]

    # Заполняются только при success
    transfer_id: Optional[str] = None
    source_balance: Optional[int] = None
    destination_balance: Optional[int] = None

    @classmethod
    def rejected(cls, error: TransferError) -> "TransferResult":
        return cls(success=False, error=error)


def is_valid_amount(amount: object) -> bool:
    """Сумма перевода: положительный int (bool не считается числом)."""
    return isinstance(amount, int) and not isinstance(amount, bool) and amount > 0


# =============================================================================
# SERVICE
# =============================================================================


class TransferService:
    """Исполнитель перевода средств.

    Взаимное исключение действует только между сервисами с одним и тем же
    AccountLockRegistry. Все сервисы, работающие с общим хранилищем,
    должны получать один экземпляр реестра через `locks`; реестр по умолчанию
    защищает только переводы этого сервиса.

    Дата записей истории и дневное окно берутся из одного Clock: `validator.clock`.
    """

    def __init__(
        self,
        account_store: AccountStore,
        history_store: TransferHistoryStore,
        validator: TransferValidator,
        unit_of_work: UnitOfWork,
        locks: AccountLockRegistry | None = None,
    ):
        """
        Args:
            account_store: хранилище счетов
            history_store: хранилище истории
            validator: валидатор списания (его clock задаёт "сегодня")
            unit_of_work: граница атомарной записи обоих хранилищ
            locks: реестр per-account locks, общий для всех сервисов
                над одним хранилищем
        """
        self.account_store = account_store
        self.history_store = history_store
        self.validator = validator
        self.unit_of_work = unit_of_work
        self.locks = locks or AccountLockRegistry()

    def execute(self, request: TransferRequest) -> TransferResult:
        """Перевод по готовому запросу."""
        return self.transfer(
            request.source_account_id,
            request.destination_account_id,
            request.amount,
        )

    def transfer(
        self, source_account_id: int, destination_account_id: int, amount: int
    ) -> TransferResult:
        """Перевод `amount` со счёта-источника на счёт-получатель.

        Args:
            source_account_id: id счёта-источника
            destination_account_id: id счёта-получателя
            amount: сумма перевода (положительный int)

        Returns:
            TransferResult; при отказе балансы и история не изменены

        Raises:
            TransferCommitError: сбой хранилища в фазе записи (изменения откатаны)
        """
        # 1. Санитарные проверки
        if not is_valid_amount(amount):
            return self._reject(
                TransferErrorKind.INVALID_AMOUNT, source_account_id, destination_account_id, amount
            )
        if source_account_id == destination_account_id:
            return self._reject(
                TransferErrorKind.SAME_ACCOUNT, source_account_id, destination_account_id, amount
            )

        with self.locks.hold(source_account_id, destination_account_id):
            # 2. Lookup (источник проверяется первым)
            source = self.account_store.find_by_id(source_account_id)
            if source is None:
                return self._reject(
                    TransferErrorKind.ACCOUNT_NOT_FOUND,
                    source_account_id,
                    destination_account_id,
                    amount,
                )
            destination = self.account_store.find_by_id(destination_account_id)
            if destination is None:
                return self._reject(
                    TransferErrorKind.ACCOUNT_NOT_FOUND,
                    source_account_id,
                    destination_account_id,
                    amount,
                )

            # 3. Validation
            validation = self.validator.validate(source, amount)
            if not validation.allowed:
                return self._reject(
                    validation.error.kind,
                    source_account_id,
                    destination_account_id,
                    amount,
                    error=validation.error,
                )

            # 4. Commit
            transfer_id = uuid4().hex
            debited = source.debit(amount)
            credited = destination.credit(amount)
            self._commit(transfer_id, debited, credited, amount)

        logger.info(
            "Transfer %s: %d from account %d to account %d",
            transfer_id,
            amount,
            source_account_id,
            destination_account_id,
        )
        return TransferResult(
            success=True,
            error=None,
            transfer_id=transfer_id,
            source_balance=debited.balance,
            destination_balance=credited.balance,
        )

    # =========================================================================
    # COMMIT
    # =========================================================================

    def _commit(self, transfer_id: str, debited: Account, credited: Account, amount: int) -> None:
        today = self.validator.clock.today()
        try:
            with self.unit_of_work.atomic():
                self.account_store.save(debited)
                self.account_store.save(credited)
                self.history_store.append(
                    debited.id, amount, HistoryType.WITHDRAW, transfer_id=transfer_id, recorded_on=today
                )
                self.history_store.append(
                    credited.id, amount, HistoryType.DEPOSIT, transfer_id=transfer_id, recorded_on=today
                )
        except Exception as exc:
            logger.error("Transfer %s rolled back: %s", transfer_id, exc)
            raise TransferCommitError(transfer_id, str(exc)) from exc

    def _reject(
        self,
        kind: TransferErrorKind,
        source_account_id: int,
        destination_account_id: int,
        amount: object,
        error: TransferError | None = None,
    ) -> TransferResult:
        logger.info(
            "Transfer rejected (%s): %r from account %s to account %s",
            kind.value,
            amount,
            source_account_id,
            destination_account_id,
        )
        return TransferResult.rejected(error or TransferError.of(kind))
