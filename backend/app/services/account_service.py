"""
Account Service.

Business rules for accounts:
- a document number may own at most one account
- single and full-list lookups, where "nothing found" is a domain error

Design Notes:
- Depends only on the AccountRepository contract
- Stateless: safe to share across concurrent requests
- The caller is responsible for commit/rollback
"""
from __future__ import annotations

from typing import List

from backend.app.db.models import Account
from backend.app.logging_config import get_logger
from backend.app.repositories.account_repository import AccountRepository
from backend.app.services.errors import (
    AccountExistsError,
    AccountNotFoundError,
    AccountListIsEmptyError,
    )

logger = get_logger(__name__)


class AccountService:
    """Service for creating and reading accounts."""

    def __init__(self, accounts: AccountRepository):
        self.accounts = accounts

    async def create_account(self, document_number: str) -> int:
        """
        Create an account for a document number.

        The pre-check avoids a write for known duplicates; the storage UNIQUE
        constraint still catches two concurrent creations that both pass it.

        Args:
            document_number: Holder's document number (already validated)

        Returns:
            Id assigned by the repository

        Raises:
            AccountExistsError: document number already has an account
        """
        count = await self.accounts.count_by_document_number(document_number)
        if count > 0:
            logger.info("Account creation rejected, document number in use", document_number=document_number)
            raise AccountExistsError(document_number)

        account_id = await self.accounts.insert_account(document_number)
        logger.info("Account created", account_id=account_id)
        return account_id

    async def get_account(self, account_id: int) -> Account:
        """
        Raises:
            AccountNotFoundError: no account with this id
        """
        account = await self.accounts.get_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    async def get_all_accounts(self) -> List[Account]:
        """
        All accounts in repository order.

        Raises:
            AccountListIsEmptyError: there are no accounts at all
        """
        accounts = await self.accounts.get_all()
        if not accounts:
            raise AccountListIsEmptyError()
        return accounts
