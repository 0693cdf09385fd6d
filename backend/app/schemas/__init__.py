"""
Pydantic schemas for the ledger API.

**Organization by Domain**:
- common.py: ErrorResponse, CreatedResponse
- accounts.py: Account schemas (AC prefix)
- transactions.py: Transaction schemas (TX prefix)
"""
from backend.app.schemas.accounts import ACCreateItem, ACReadItem
from backend.app.schemas.common import CreatedResponse, ErrorResponse
from backend.app.schemas.transactions import TXCreateItem, TXOperationTypeItem

__all__ = [
    "ACCreateItem",
    "ACReadItem",
    "CreatedResponse",
    "ErrorResponse",
    "TXCreateItem",
    "TXOperationTypeItem",
    ]
