"""
Account — Модель банковского счёта

Immutable Pydantic модель, представляющая снапшот счёта.
Хранилище счетов владеет текущим значением; любое изменение баланса
создаёт новый экземпляр (debit/credit), который сохраняется через AccountStore.save.
"""

from pydantic import BaseModel, Field


def _check_amount(operation: str, amount: int) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"{operation} amount must be an int, got {amount!r}")
    if amount <= 0:
        raise ValueError(f"{operation} amount must be positive, got {amount}")


class Account(BaseModel):
    """
    Снапшот счёта.

    Immutable модель (frozen=True): исполнитель перевода не мутирует объект,
    который могут держать другие конкурентные вызовы.
    """

    id: int = Field(..., description="Уникальный идентификатор счёта")
    balance: int = Field(..., description="Текущий баланс (целое, со знаком)")

    # Лимиты списания
    per_day_transfer_limit: int = Field(
        ..., ge=0, description="Максимальная сумма списаний за календарный день"
    )
    per_transaction_limit: int = Field(
        ..., ge=0, description="Максимальная сумма одного перевода"
    )

    model_config = {"frozen": True}

    def debit(self, amount: int) -> "Account":
        """
        Списание со счёта.

        Args:
            amount: Сумма списания (положительный int)

        Returns:
            Новый снапшот счёта с уменьшенным балансом

        Raises:
            ValueError: Если сумма не положительный int
        """
        _check_amount("debit", amount)
        return self._with_balance(self.balance - amount)

    def credit(self, amount: int) -> "Account":
        """
        Зачисление на счёт.

        Args:
            amount: Сумма зачисления (> 0)

        Returns:
            Новый снапшот счёта с увеличенным балансом
        """
        _check_amount("credit", amount)
        return self._with_balance(self.balance + amount)

    def _with_balance(self, balance: int) -> "Account":
        # новый снапшот проходит валидацию полей
        return Account.model_validate({**self.model_dump(), "balance": balance})
