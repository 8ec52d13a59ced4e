"""Transfer — валидатор и исполнитель перевода средств.

- TransferValidator: баланс → дневной лимит → лимит на операцию
- TransferService: lookup → validation → balances → history
"""

from .locks import AccountLockRegistry
from .service import TransferResult, TransferService
from .validator import TransferValidator, TransferValidatorConfig, ValidationResult

__all__ = [
    "AccountLockRegistry",
    "TransferResult",
    "TransferService",
    "TransferValidator",
    "TransferValidatorConfig",
    "ValidationResult",
]
