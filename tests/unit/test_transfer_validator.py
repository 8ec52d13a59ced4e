"""Unit тесты для TransferValidator.

Coverage:
- Порядок проверок: баланс → дневной лимит → лимит на операцию
- Граница дневного лимита (включительный / строгий вариант)
- Запрос истории использует дату из Clock
- Validator не обращается к истории, если баланс недостаточен
"""

from datetime import date
from unittest.mock import MagicMock

import pytest

from funds_transfer.adapters import FixedClock
from funds_transfer.core.domain import Account
from funds_transfer.core.errors import ERROR_MESSAGES, TransferErrorKind
from funds_transfer.transfer import TransferValidator, TransferValidatorConfig


TODAY = date(2024, 3, 15)


@pytest.fixture
def history_store():
    """History store без списаний за сегодня."""
    store = MagicMock()
    store.amount_withdrawn_today.return_value = 0
    return store


@pytest.fixture
def validator(history_store):
    return TransferValidator(history_store, FixedClock(TODAY))


def make_account(balance=1000, per_day=10000, per_tx=1000) -> Account:
    return Account(
        id=1,
        balance=balance,
        per_day_transfer_limit=per_day,
        per_transaction_limit=per_tx,
    )


# =============================================================================
# PASS SCENARIOS
# =============================================================================


def test_pass_within_all_limits(validator, history_store):
    """PASS: сумма в пределах баланса и лимитов."""
    result = validator.validate(make_account(), 1000)

    assert result.allowed is True
    assert result.error is None
    assert result.amount_withdrawn_today == 0
    assert "PASS" in result.details
    history_store.amount_withdrawn_today.assert_called_once_with(1, TODAY)


def test_pass_when_day_total_reaches_limit_exactly(validator, history_store):
    """PASS: итог за день == лимит (лимит включительный)."""
    history_store.amount_withdrawn_today.return_value = 9000

    result = validator.validate(make_account(), 1000)

    assert result.allowed is True
    assert result.amount_withdrawn_today == 9000


# =============================================================================
# REJECTIONS
# =============================================================================


def test_insufficient_balance(validator, history_store):
    """Сумма больше баланса → INSUFFICIENT_BALANCE, история не запрашивается."""
    result = validator.validate(make_account(balance=1000), 2000)

    assert result.allowed is False
    assert result.error.kind == TransferErrorKind.INSUFFICIENT_BALANCE
    assert result.error.message == ERROR_MESSAGES[TransferErrorKind.INSUFFICIENT_BALANCE]
    assert result.amount_withdrawn_today == 0
    history_store.amount_withdrawn_today.assert_not_called()


def test_exceeds_per_day_limit(validator, history_store):
    """withdrawn_today 10000 + 1000 > 10000 → EXCEEDS_PER_DAY_LIMIT."""
    history_store.amount_withdrawn_today.return_value = 10000

    result = validator.validate(make_account(), 1000)

    assert result.allowed is False
    assert result.error.kind == TransferErrorKind.EXCEEDS_PER_DAY_LIMIT
    assert result.amount_withdrawn_today == 10000
    assert "11000" in result.details


def test_exceeds_per_transaction_limit(validator):
    """amount 600 > per-transaction limit 500 → EXCEEDS_PER_TRANSACTION_LIMIT."""
    result = validator.validate(make_account(balance=10000, per_tx=500), 600)

    assert result.allowed is False
    assert result.error.kind == TransferErrorKind.EXCEEDS_PER_TRANSACTION_LIMIT


# =============================================================================
# CHECK ORDER
# =============================================================================


def test_balance_checked_before_limits(validator, history_store):
    """Нарушены все три правила → всплывает INSUFFICIENT_BALANCE."""
    history_store.amount_withdrawn_today.return_value = 10000

    result = validator.validate(make_account(balance=100, per_day=500, per_tx=50), 1000)

    assert result.error.kind == TransferErrorKind.INSUFFICIENT_BALANCE


def test_per_day_checked_before_per_transaction(validator, history_store):
    """Нарушены дневной лимит и лимит на операцию → EXCEEDS_PER_DAY_LIMIT."""
    history_store.amount_withdrawn_today.return_value = 9800

    result = validator.validate(make_account(balance=10000, per_tx=100), 500)

    assert result.error.kind == TransferErrorKind.EXCEEDS_PER_DAY_LIMIT


# =============================================================================
# CONFIG
# =============================================================================


def test_strict_per_day_limit_rejects_exact_boundary(history_store):
    """per_day_limit_inclusive=False: итог == лимит уже отказ."""
    history_store.amount_withdrawn_today.return_value = 9000
    validator = TransferValidator(
        history_store,
        FixedClock(TODAY),
        TransferValidatorConfig(per_day_limit_inclusive=False),
    )

    result = validator.validate(make_account(), 1000)

    assert result.allowed is False
    assert result.error.kind == TransferErrorKind.EXCEEDS_PER_DAY_LIMIT


def test_uses_clock_date(history_store):
    """Дневное окно берётся из инжектированного Clock."""
    clock = FixedClock(TODAY)
    validator = TransferValidator(history_store, clock)

    clock.advance_to(date(2024, 3, 16))
    validator.validate(make_account(), 10)

    history_store.amount_withdrawn_today.assert_called_once_with(1, date(2024, 3, 16))
