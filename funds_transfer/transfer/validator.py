"""Transfer Validator — проверка допустимости списания со счёта

Чистое решение без побочных эффектов: по снапшоту счёта-источника и сумме
возвращает "ok" либо конкретную причину отказа.

Порядок проверок фиксирован (определяет, какая ошибка всплывает первой):
1. Недостаточный баланс: amount > balance
2. Дневной лимит: withdrawn_today + amount > per_day_transfer_limit
3. Лимит на операцию: amount > per_transaction_limit

Единственный внешний вызов: запрос суммы списаний за сегодня
в TransferHistoryStore. "Сегодня" берётся из инжектированного Clock.
Счёт-получатель не проверяется (входящих лимитов нет).
"""

import logging
from dataclasses import dataclass
from typing import Optional

from funds_transfer.core.contracts import Clock, TransferHistoryStore
from funds_transfer.core.domain.account import Account
from funds_transfer.core.errors import TransferError, TransferErrorKind


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TransferValidatorConfig:
    """Конфигурация валидатора.

    per_day_limit_inclusive:
        True:  лимит включительный: итог за день == лимит допустим,
                отказ только при withdrawn_today + amount > limit.
        False: строгий вариант: отказ при withdrawn_today + amount >= limit.
    """

    per_day_limit_inclusive: bool = True


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ValidationResult:
    """Результат проверки перевода."""

    allowed: bool
    error: Optional[TransferError]

    # Для диагностики (0, если до запроса истории не дошли)
    amount_withdrawn_today: int

    details: str


# =============================================================================
# VALIDATOR
# =============================================================================


class TransferValidator:
    """Валидатор списания со счёта-источника."""

    def __init__(
        self,
        history_store: TransferHistoryStore,
        clock: Clock,
        config: TransferValidatorConfig | None = None,
    ):
        """
        Args:
            history_store: источник суммы списаний за день
            clock: источник текущей даты
            config: конфигурация (опционально, используется default)
        """
        self.history_store = history_store
        self.clock = clock
        self.config = config or TransferValidatorConfig()

    def validate(self, account: Account, amount: int) -> ValidationResult:
        """Проверка списания `amount` со счёта `account`.

        Args:
            account: снапшот счёта-источника
            amount: сумма перевода

        Returns:
            ValidationResult с решением и причиной отказа
        """
        # 1. Баланс
        if amount > account.balance:
            return self._rejected(
                TransferErrorKind.INSUFFICIENT_BALANCE,
                withdrawn_today=0,
                details=f"amount {amount} > balance {account.balance}",
            )

        # 2. Дневной лимит
        withdrawn_today = self.history_store.amount_withdrawn_today(
            account.id, self.clock.today()
        )
        total_after = withdrawn_today + amount
        if self._exceeds_per_day_limit(total_after, account.per_day_transfer_limit):
            return self._rejected(
                TransferErrorKind.EXCEEDS_PER_DAY_LIMIT,
                withdrawn_today=withdrawn_today,
                details=(
                    f"withdrawn today {withdrawn_today} + amount {amount} = {total_after}"
                    f" vs per-day limit {account.per_day_transfer_limit}"
                ),
            )

        # 3. Лимит на операцию
        if amount > account.per_transaction_limit:
            return self._rejected(
                TransferErrorKind.EXCEEDS_PER_TRANSACTION_LIMIT,
                withdrawn_today=withdrawn_today,
                details=f"amount {amount} > per-transaction limit {account.per_transaction_limit}",
            )

        return ValidationResult(
            allowed=True,
            error=None,
            amount_withdrawn_today=withdrawn_today,
            details=f"PASS: amount={amount}, withdrawn_today={withdrawn_today}",
        )

    def _exceeds_per_day_limit(self, total_after: int, limit: int) -> bool:
        if self.config.per_day_limit_inclusive:
            return total_after > limit
        return total_after >= limit

    def _rejected(
        self, kind: TransferErrorKind, withdrawn_today: int, details: str
    ) -> ValidationResult:
        logger.debug("Validation rejected: %s (%s)", kind.value, details)
        return ValidationResult(
            allowed=False,
            error=TransferError.of(kind),
            amount_withdrawn_today=withdrawn_today,
            details=details,
        )
