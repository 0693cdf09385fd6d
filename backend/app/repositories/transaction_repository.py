"""
Transaction persistence.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db.models import Transaction
from backend.app.utils.datetime_utils import utcnow


class TransactionRepository(ABC):
    """Storage capability for transactions."""

    @abstractmethod
    async def insert_transaction(self, account_id: int, operation_type_id: int, amount: Decimal) -> int:
        """Insert one transaction with an already-signed amount and return its id."""


class SQLTransactionRepository(TransactionRepository):
    """TransactionRepository backed by the `transactions` table. Flush only, no commit."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert_transaction(self, account_id: int, operation_type_id: int, amount: Decimal) -> int:
        now = utcnow()
        tx = Transaction(
            account_id=account_id,
            operation_type_id=operation_type_id,
            amount=amount,
            event_date=now,
            created_at=now,
            updated_at=now,
            )
        self.session.add(tx)
        await self.session.flush()
        return tx.id
