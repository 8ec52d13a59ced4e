"""
HistoryEntry — Запись истории движения средств

Append-only запись: создаётся один раз на каждую ногу успешного перевода
(WITHDRAW на счёте-источнике, DEPOSIT на счёте-получателе), никогда не изменяется.
"""

from datetime import date
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class HistoryType(str, Enum):
    """Тип записи истории"""

    WITHDRAW = "WITHDRAW"
    DEPOSIT = "DEPOSIT"


# =============================================================================
# HISTORY ENTRY MODEL
# =============================================================================


class HistoryEntry(BaseModel):
    """
    Запись истории по счёту.

    amount хранится как положительная величина, направление задаёт kind.
    """

    entry_id: str = Field(default_factory=lambda: uuid4().hex, min_length=1)
    transfer_id: str = Field(..., min_length=1, description="Общий id обеих ног перевода")
    account_id: int = Field(..., description="Счёт, к которому относится запись")
    amount: int = Field(..., gt=0, description="Сумма (положительная)")
    kind: HistoryType = Field(..., description="WITHDRAW или DEPOSIT")
    recorded_on: date = Field(..., description="Календарный день записи")

    model_config = {"frozen": True}

    @property
    def signed_amount(self) -> int:
        """Сумма со знаком: отрицательная для WITHDRAW, положительная для DEPOSIT."""
        if self.kind == HistoryType.WITHDRAW:
            return -self.amount
        return self.amount
