"""
Database models for the ledger.

All models use SQLModel (SQLAlchemy 2.x) with the following conventions:
- Decimal columns use Numeric(18, 6)
- Timestamps in UTC (created_at, updated_at, event_date)
- Foreign keys enforced with PRAGMA foreign_keys=ON

Operation types are NOT a table: they live in the in-process registry
(backend.app.services.operation_types) and are only referenced by code here.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Column, Numeric, event
from sqlmodel import Field, SQLModel

from backend.app.utils.datetime_utils import utcnow


class Account(SQLModel, table=True):
    """
    Account holder, identified by a unique document number.

    Created once and never mutated by the ledger rules; the UNIQUE index on
    document_number is the storage-side guarantee behind AccountExistsError.
    """
    __tablename__ = "accounts"

    id: Optional[int] = Field(default=None, primary_key=True)
    document_number: str = Field(unique=True, index=True, nullable=False)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Transaction(SQLModel, table=True):
    """
    Financial transaction on an account.

    amount is stored already signed: negative for debit operation types,
    positive for credit ones.
    """
    __tablename__ = "transactions"

    id: Optional[int] = Field(default=None, primary_key=True)

    account_id: int = Field(foreign_key="accounts.id", nullable=False, index=True)
    operation_type_id: int = Field(nullable=False)
    amount: Decimal = Field(sa_column=Column(Numeric(18, 6), nullable=False))
    event_date: datetime = Field(default_factory=utcnow, nullable=False)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


# ============================================================================
# EVENT LISTENERS
# ============================================================================


@event.listens_for(Account, "before_update")
@event.listens_for(Transaction, "before_update")
def receive_before_update(mapper, connection, target):
    """Update updated_at timestamp on update."""
    target.updated_at = utcnow()
