"""
API v1 router.
Aggregates all v1 endpoints.
"""
from fastapi import APIRouter

from backend.app.api.v1.accounts import account_router
from backend.app.api.v1.transactions import tx_router
from backend.app.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter()

router.include_router(account_router)
router.include_router(tx_router)


@router.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns:
        dict: Status message
    """
    logger.debug("Health check requested")
    return {"status": "ok"}
