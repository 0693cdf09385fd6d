"""
Tests for AccountService.

Runs the service against an in-memory AccountRepository double, so each test
controls exactly what storage reports and can count the writes.

Reference: backend/app/services/account_service.py
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from backend.test_scripts.test_db_config import setup_test_database

setup_test_database()

from backend.app.db.models import Account
from backend.app.services.account_service import AccountService
from backend.app.services.errors import (
    AccountExistsError,
    AccountNotFoundError,
    AccountListIsEmptyError,
    ErrorKind,
    )
from backend.test_scripts.test_services.ledger_fakes import FakeAccountRepository, StorageFailure


# ============================================================================
# PYTEST FIXTURES
# ============================================================================

@pytest.fixture
def repo() -> FakeAccountRepository:
    return FakeAccountRepository()


@pytest.fixture
def service(repo) -> AccountService:
    return AccountService(repo)


# ============================================================================
# CREATE ACCOUNT
# ============================================================================

class TestCreateAccount:
    """Document-number uniqueness and id passthrough."""

    @pytest.mark.asyncio
    async def test_create_returns_repository_id(self, repo, service):
        """AC-U-001: count=0 for "12345" -> the id insert returned, unmodified."""
        repo.next_id = 21

        account_id = await service.create_account("12345")

        assert account_id == 21
        assert repo.calls == ["count_by_document_number", "insert_account"]

    @pytest.mark.asyncio
    async def test_second_create_same_document_conflicts(self, repo, service):
        """AC-U-002: create(D) then create(D) -> success then AccountExists, one insert total."""
        await service.create_account("12345678900")

        with pytest.raises(AccountExistsError) as exc_info:
            await service.create_account("12345678900")

        assert exc_info.value.kind is ErrorKind.CONFLICT
        assert exc_info.value.document_number == "12345678900"
        assert repo.count("insert_account") == 1

    @pytest.mark.asyncio
    async def test_existing_count_skips_insert(self, repo, service):
        """AC-U-003: count > 0 -> AccountExists and no write attempted."""
        repo.count_override = 1

        with pytest.raises(AccountExistsError):
            await service.create_account("12345")

        assert repo.count("insert_account") == 0

    @pytest.mark.asyncio
    async def test_different_documents_both_created(self, repo, service):
        """AC-U-004: distinct document numbers get distinct ids."""
        first = await service.create_account("11111111111")
        second = await service.create_account("22222222222")

        assert first != second
        assert repo.count("insert_account") == 2

    @pytest.mark.asyncio
    async def test_count_failure_propagates_unchanged(self, repo, service):
        """AC-U-005: storage error on count is re-raised as-is, nothing inserted."""
        failure = StorageFailure("count failed")
        repo.fail_on["count_by_document_number"] = failure

        with pytest.raises(StorageFailure) as exc_info:
            await service.create_account("12345")

        assert exc_info.value is failure
        assert repo.count("insert_account") == 0

    @pytest.mark.asyncio
    async def test_insert_failure_propagates_unchanged(self, repo, service):
        """AC-U-006: storage error on insert is re-raised as-is."""
        failure = StorageFailure("insert failed")
        repo.fail_on["insert_account"] = failure

        with pytest.raises(StorageFailure) as exc_info:
            await service.create_account("12345")

        assert exc_info.value is failure

    @pytest.mark.asyncio
    async def test_storage_side_conflict_is_account_exists(self, repo, service):
        """AC-U-007: a repository reporting a unique violation surfaces as AccountExists."""
        repo.fail_on["insert_account"] = AccountExistsError("12345")

        with pytest.raises(AccountExistsError):
            await service.create_account("12345")


# ============================================================================
# GET ACCOUNT
# ============================================================================

class TestGetAccount:

    @pytest.mark.asyncio
    async def test_get_existing_account(self, repo, service):
        """AC-U-010: existing id -> the repository's account."""
        account = Account(id=1, document_number="12345")
        repo.accounts.append(account)

        assert await service.get_account(1) is account

    @pytest.mark.asyncio
    async def test_get_missing_account(self, service):
        """AC-U-011: no row -> AccountNotFound (NOT_FOUND kind)."""
        with pytest.raises(AccountNotFoundError) as exc_info:
            await service.get_account(123)

        assert exc_info.value.account_id == 123
        assert exc_info.value.kind is ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_get_failure_propagates_unchanged(self, repo, service):
        """AC-U-012: other storage errors are not turned into NotFound."""
        repo.fail_on["get_by_id"] = StorageFailure("boom")

        with pytest.raises(StorageFailure):
            await service.get_account(1)


# ============================================================================
# GET ALL ACCOUNTS
# ============================================================================

class TestGetAllAccounts:

    @pytest.mark.asyncio
    async def test_empty_listing_is_an_error(self, service):
        """AC-U-020: zero accounts -> AccountListIsEmpty, not an empty list."""
        with pytest.raises(AccountListIsEmptyError) as exc_info:
            await service.get_all_accounts()

        assert exc_info.value.kind is ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_listing_keeps_repository_order(self, repo, service):
        """AC-U-021: non-empty -> exactly the repository's accounts, same order."""
        repo.accounts.extend([
            Account(id=2, document_number="12346"),
            Account(id=1, document_number="12345"),
            Account(id=7, document_number="99999"),
            ])

        accounts = await service.get_all_accounts()

        assert [a.id for a in accounts] == [2, 1, 7]
        assert accounts == repo.accounts

    @pytest.mark.asyncio
    async def test_listing_failure_propagates_unchanged(self, repo, service):
        """AC-U-022: storage errors pass through."""
        repo.fail_on["get_all"] = StorageFailure("boom")

        with pytest.raises(StorageFailure):
            await service.get_all_accounts()
