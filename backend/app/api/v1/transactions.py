"""
Transaction API endpoints.

- POST /transactions: Create a transaction
- GET /transactions/operation-types: Operation type registry
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.dependencies import get_operation_types, get_transaction_service
from backend.app.db.session import get_session_generator
from backend.app.logging_config import get_logger
from backend.app.schemas.common import CreatedResponse, ErrorResponse
from backend.app.schemas.transactions import TXCreateItem, TXOperationTypeItem
from backend.app.services.operation_types import OperationTypeRegistry
from backend.app.services.transaction_service import TransactionService

logger = get_logger(__name__)

tx_router = APIRouter(prefix="/transactions", tags=["TX (Transactions)"])


@tx_router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    )
async def create_transaction(
    item: TXCreateItem,
    service: TransactionService = Depends(get_transaction_service),
    session: AsyncSession = Depends(get_session_generator),
    ) -> CreatedResponse:
    """
    Create a transaction.

    The stored amount is negative for debit operation types and positive for
    credit ones, whatever sign the request carries.

    Raises:
        400: Unknown operation type
        404: Account not found
    """
    transaction_id = await service.create_transaction(
        account_id=item.account_id,
        operation_type_id=item.operation_type_id,
        amount=item.amount,
        )
    await session.commit()
    logger.info("Transaction committed", transaction_id=transaction_id, account_id=item.account_id)
    return CreatedResponse(id=transaction_id)


@tx_router.get("/operation-types", response_model=List[TXOperationTypeItem])
async def list_operation_types(
    operation_types: OperationTypeRegistry = Depends(get_operation_types),
    ) -> List[TXOperationTypeItem]:
    """Operation types accepted by POST /transactions, ordered by code."""
    return [
        TXOperationTypeItem.from_operation_type(operation_types[code])
        for code in sorted(operation_types)
        ]
