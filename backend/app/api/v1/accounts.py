"""
Account API endpoints.

- POST /accounts: Create an account
- GET /accounts: List all accounts (404 when there are none)
- GET /accounts/{account_id}: Get a single account
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.dependencies import get_account_service
from backend.app.db.session import get_session_generator
from backend.app.logging_config import get_logger
from backend.app.schemas.accounts import ACCreateItem, ACReadItem
from backend.app.schemas.common import CreatedResponse, ErrorResponse
from backend.app.services.account_service import AccountService

logger = get_logger(__name__)

account_router = APIRouter(prefix="/accounts", tags=["AC (Accounts)"])


@account_router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
    )
async def create_account(
    item: ACCreateItem,
    service: AccountService = Depends(get_account_service),
    session: AsyncSession = Depends(get_session_generator),
    ) -> CreatedResponse:
    """
    Create an account.

    Returns:
        Id of the new account

    Raises:
        409: An account already exists for the document number
    """
    account_id = await service.create_account(item.document_number)
    await session.commit()
    logger.info("Account committed", account_id=account_id)
    return CreatedResponse(id=account_id)


@account_router.get(
    "",
    response_model=List[ACReadItem],
    responses={404: {"model": ErrorResponse}},
    )
async def list_accounts(
    service: AccountService = Depends(get_account_service),
    ) -> List[ACReadItem]:
    """
    List all accounts, ordered by id.

    Raises:
        404: There are no accounts
    """
    accounts = await service.get_all_accounts()
    return [ACReadItem.from_model(account) for account in accounts]


@account_router.get(
    "/{account_id}",
    response_model=ACReadItem,
    responses={404: {"model": ErrorResponse}},
    )
async def get_account(
    account_id: int,
    service: AccountService = Depends(get_account_service),
    ) -> ACReadItem:
    """
    Get a single account by ID.

    Raises:
        404: Account not found
    """
    account = await service.get_account(account_id)
    return ACReadItem.from_model(account)
