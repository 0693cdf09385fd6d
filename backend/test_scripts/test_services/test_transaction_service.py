"""
Tests for TransactionService.

Covers the three gates (operation type, account existence, amount sign) and
error propagation, using in-memory repository doubles.

Reference: backend/app/services/transaction_service.py
"""
import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from backend.test_scripts.test_db_config import setup_test_database

setup_test_database()

from backend.app.db.models import Account
from backend.app.services.errors import AccountNotFoundError, TransactionTypeNotFoundError, ErrorKind
from backend.app.services.operation_types import (
    OperationClassification,
    OperationType,
    OperationTypeRegistry,
    build_default_registry,
    )
from backend.app.services.transaction_service import TransactionService
from backend.test_scripts.test_services.ledger_fakes import (
    FakeAccountRepository,
    FakeTransactionRepository,
    StorageFailure,
    )

DEBIT_CODES = [1, 2, 3]
CREDIT_CODES = [4]


# ============================================================================
# PYTEST FIXTURES
# ============================================================================

@pytest.fixture
def accounts() -> FakeAccountRepository:
    return FakeAccountRepository(accounts=[Account(id=1, document_number="12345678900")])


@pytest.fixture
def transactions() -> FakeTransactionRepository:
    return FakeTransactionRepository(next_id=2)


@pytest.fixture
def service(accounts, transactions) -> TransactionService:
    return TransactionService(accounts, transactions, build_default_registry())


# ============================================================================
# AMOUNT SIGN
# ============================================================================

class TestAmountSign:
    """The stored sign follows the operation type, never the caller."""

    @pytest.mark.asyncio
    async def test_debit_scenario(self, transactions, service):
        """TX-U-001: account 1, type 1 (debit), amount 4 -> stored -4."""
        transaction_id = await service.create_transaction(1, 1, Decimal("4"))

        assert transaction_id == 2
        assert transactions.inserted == [(1, 1, Decimal("-4"))]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", DEBIT_CODES)
    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("0.01"), Decimal("50"), Decimal("123456.789")])
    async def test_debit_types_store_negative(self, transactions, service, code, amount):
        """TX-U-002: every debit type persists -M."""
        await service.create_transaction(1, code, amount)

        assert transactions.inserted[-1][2] == -amount

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", CREDIT_CODES)
    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("0.01"), Decimal("60"), Decimal("123456.789")])
    async def test_credit_types_store_positive(self, transactions, service, code, amount):
        """TX-U-003: every credit type persists +M."""
        await service.create_transaction(1, code, amount)

        assert transactions.inserted[-1][2] == amount

    @pytest.mark.asyncio
    async def test_caller_sign_is_not_trusted(self, transactions, service):
        """TX-U-004: a negative input is re-signed from the classification."""
        await service.create_transaction(1, 4, Decimal("-10"))
        await service.create_transaction(1, 3, Decimal("-10"))

        assert [row[2] for row in transactions.inserted] == [Decimal("10"), Decimal("-10")]

    @pytest.mark.asyncio
    async def test_injected_registry_is_used(self, accounts, transactions):
        """TX-U-005: classification comes from the registry the service was given."""
        registry = OperationTypeRegistry([OperationType(9, "REFUND", OperationClassification.CREDIT)])
        service = TransactionService(accounts, transactions, registry)

        await service.create_transaction(1, 9, Decimal("3"))

        assert transactions.inserted == [(1, 9, Decimal("3"))]
        with pytest.raises(TransactionTypeNotFoundError):
            await service.create_transaction(1, 1, Decimal("3"))


# ============================================================================
# GATES
# ============================================================================

class TestGates:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", [0, 5, 99, -1])
    async def test_unknown_operation_type_touches_nothing(self, accounts, transactions, service, code):
        """TX-U-010: unknown type -> TransactionTypeNotFound, no lookup, no insert."""
        with pytest.raises(TransactionTypeNotFoundError) as exc_info:
            await service.create_transaction(1, code, Decimal("4"))

        assert exc_info.value.kind is ErrorKind.DOMAIN_REJECTION
        assert exc_info.value.operation_type_id == code
        assert accounts.calls == []
        assert transactions.inserted == []

    @pytest.mark.asyncio
    async def test_missing_account_blocks_insert(self, transactions, service):
        """TX-U-011: valid type, no account -> AccountNotFound, no insert."""
        with pytest.raises(AccountNotFoundError) as exc_info:
            await service.create_transaction(404, 1, Decimal("4"))

        assert exc_info.value.account_id == 404
        assert transactions.inserted == []

    @pytest.mark.asyncio
    async def test_lookup_account_not_found_propagates_same_error(self, accounts, transactions, service):
        """TX-U-012: an AccountNotFound raised by the lookup is propagated as that exact error."""
        error = AccountNotFoundError(1)
        accounts.fail_on["get_by_id"] = error

        with pytest.raises(AccountNotFoundError) as exc_info:
            await service.create_transaction(1, 1, Decimal("4"))

        assert exc_info.value is error
        assert transactions.inserted == []

    @pytest.mark.asyncio
    async def test_lookup_failure_propagates_unchanged(self, accounts, transactions, service):
        """TX-U-013: other lookup errors are infrastructure errors, passed through."""
        failure = StorageFailure("lookup failed")
        accounts.fail_on["get_by_id"] = failure

        with pytest.raises(StorageFailure) as exc_info:
            await service.create_transaction(1, 1, Decimal("4"))

        assert exc_info.value is failure
        assert transactions.inserted == []

    @pytest.mark.asyncio
    async def test_insert_failure_propagates_unchanged(self, transactions, service):
        """TX-U-014: insert errors are passed through."""
        failure = StorageFailure("insert failed")
        transactions.fail_with = failure

        with pytest.raises(StorageFailure) as exc_info:
            await service.create_transaction(1, 4, Decimal("4"))

        assert exc_info.value is failure

    @pytest.mark.asyncio
    async def test_one_lookup_one_insert(self, accounts, transactions, service):
        """TX-U-015: a successful call issues exactly one lookup and one insert."""
        await service.create_transaction(1, 2, Decimal("7.5"))

        assert accounts.calls == ["get_by_id"]
        assert len(transactions.inserted) == 1
