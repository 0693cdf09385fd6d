"""
Account schemas.

**Naming Convention**:
- AC prefix: Account-related schemas
- Item suffix: single item (e.g., ACCreateItem)
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from backend.app.db.models import Account

DOCUMENT_NUMBER_MIN_LENGTH = 11
DOCUMENT_NUMBER_MAX_LENGTH = 20


class ACCreateItem(BaseModel):
    """
    DTO for creating an account.

    Used by POST /api/v1/accounts.
    """
    model_config = ConfigDict(extra="forbid")

    document_number: str = Field(
        ...,
        min_length=DOCUMENT_NUMBER_MIN_LENGTH,
        max_length=DOCUMENT_NUMBER_MAX_LENGTH,
        description="Holder's document number (digits only)",
        )

    @field_validator('document_number', mode='before')
    @classmethod
    def _strip_document_number(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('document_number')
    @classmethod
    def _digits_only(cls, v: str) -> str:
        if not (v.isascii() and v.isdigit()):
            raise ValueError("document_number must contain only digits")
        return v


class ACReadItem(BaseModel):
    """Account as returned by the API."""
    model_config = ConfigDict(extra="forbid", from_attributes=True)

    id: int
    document_number: str
    created_at: datetime

    @classmethod
    def from_model(cls, account: Account) -> "ACReadItem":
        return cls.model_validate(account)
