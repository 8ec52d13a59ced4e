"""
Error taxonomy перевода средств.

Бизнес-отказы не бросаются как исключения: они возвращаются вызывающему
в виде TransferError (kind + стабильное сообщение) внутри result-объектов.
Единственное исключение: TransferCommitError (сбой записи в хранилище).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final


class TransferErrorKind(str, Enum):
    """Вид отказа в переводе."""

    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    EXCEEDS_PER_DAY_LIMIT = "EXCEEDS_PER_DAY_LIMIT"
    EXCEEDS_PER_TRANSACTION_LIMIT = "EXCEEDS_PER_TRANSACTION_LIMIT"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    SAME_ACCOUNT = "SAME_ACCOUNT"


ERROR_MESSAGES: Final[dict[TransferErrorKind, str]] = {
    TransferErrorKind.ACCOUNT_NOT_FOUND: "account not found",
    TransferErrorKind.INSUFFICIENT_BALANCE: "transfer amount exceeds account balance",
    TransferErrorKind.EXCEEDS_PER_DAY_LIMIT: "cannot exceed withdrawal amount per day",
    TransferErrorKind.EXCEEDS_PER_TRANSACTION_LIMIT: "cannot exceed withdrawal amount at once",
    TransferErrorKind.INVALID_AMOUNT: "transfer amount must be positive",
    TransferErrorKind.SAME_ACCOUNT: "source and destination accounts must differ",
}


@dataclass(frozen=True)
class TransferError:
    """Типизированный отказ: вид + человекочитаемое сообщение."""

    kind: TransferErrorKind
    message: str

    @classmethod
    def of(cls, kind: TransferErrorKind) -> "TransferError":
        """Отказ со стандартным сообщением для данного вида."""
        return cls(kind=kind, message=ERROR_MESSAGES[kind])


class TransferCommitError(RuntimeError):
    """
    Сбой фазы записи (save / append) после успешной валидации.

    Изменения перевода к моменту исключения уже откатаны;
    исходная причина доступна через __cause__.
    """

    def __init__(self, transfer_id: str, message: str):
        super().__init__(f"transfer {transfer_id} failed to commit: {message}")
        self.transfer_id = transfer_id
