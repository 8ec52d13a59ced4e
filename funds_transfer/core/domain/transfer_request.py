"""
TransferRequest — эфемерный запрос на перевод (не сохраняется).
"""

from pydantic import BaseModel, Field


class TransferRequest(BaseModel):
    """Запрос на перевод: источник, получатель, сумма (> 0)."""

    source_account_id: int
    destination_account_id: int
    amount: int = Field(..., gt=0, description="Сумма перевода")

    model_config = {"frozen": True}
