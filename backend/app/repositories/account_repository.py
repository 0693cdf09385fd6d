"""
Account persistence.

AccountRepository is the contract the ledger services depend on;
SQLAccountRepository implements it over an SQLAlchemy AsyncSession.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db.models import Account
from backend.app.logging_config import get_logger
from backend.app.services.errors import AccountExistsError
from backend.app.utils.datetime_utils import utcnow

logger = get_logger(__name__)


class AccountRepository(ABC):
    """Storage capability for accounts."""

    @abstractmethod
    async def count_by_document_number(self, document_number: str) -> int:
        """Number of accounts registered with this document number."""

    @abstractmethod
    async def insert_account(self, document_number: str) -> int:
        """
        Insert a new account and return its id.

        Raises:
            AccountExistsError: storage rejected a duplicate document number
        """

    @abstractmethod
    async def get_by_id(self, account_id: int) -> Optional[Account]:
        """Account with this id, or None."""

    @abstractmethod
    async def get_all(self) -> List[Account]:
        """All accounts, possibly empty."""


class SQLAccountRepository(AccountRepository):
    """
    AccountRepository backed by the `accounts` table.

    Only flushes; the caller owns commit/rollback.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def count_by_document_number(self, document_number: str) -> int:
        stmt = select(func.count(Account.id)).where(Account.document_number == document_number)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def insert_account(self, document_number: str) -> int:
        account = Account(
            document_number=document_number,
            created_at=utcnow(),
            updated_at=utcnow(),
            )
        try:
            # Savepoint: a rejected insert discards only this row, never the caller's pending work
            async with self.session.begin_nested():
                self.session.add(account)
                await self.session.flush()  # Get ID
        except IntegrityError as e:
            if "document_number" in str(e.orig):
                logger.warning("Duplicate document number rejected by storage", document_number=document_number)
                raise AccountExistsError(document_number) from e
            raise
        return account.id

    async def get_by_id(self, account_id: int) -> Optional[Account]:
        return await self.session.get(Account, account_id)

    async def get_all(self) -> List[Account]:
        result = await self.session.execute(select(Account).order_by(Account.id))
        return list(result.scalars().all())
