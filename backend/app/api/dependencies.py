"""
FastAPI dependency providers.

Services are built per request on top of the request's AsyncSession; the
operation type registry is built once at startup and read from app.state.
"""
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db.session import get_session_generator
from backend.app.repositories.account_repository import SQLAccountRepository
from backend.app.repositories.transaction_repository import SQLTransactionRepository
from backend.app.services.account_service import AccountService
from backend.app.services.operation_types import OperationTypeRegistry
from backend.app.services.transaction_service import TransactionService


def get_operation_types(request: Request) -> OperationTypeRegistry:
    return request.app.state.operation_types


def get_account_service(session: AsyncSession = Depends(get_session_generator)) -> AccountService:
    return AccountService(SQLAccountRepository(session))


def get_transaction_service(
    session: AsyncSession = Depends(get_session_generator),
    operation_types: OperationTypeRegistry = Depends(get_operation_types),
    ) -> TransactionService:
    return TransactionService(
        accounts=SQLAccountRepository(session),
        transactions=SQLTransactionRepository(session),
        operation_types=operation_types,
        )
