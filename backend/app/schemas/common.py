"""
Common schemas shared across the API.

- ErrorResponse: body of every non-2xx response produced by the ledger
- CreatedResponse: body of every successful POST (id of the new row)
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Error body returned for domain and infrastructure failures."""
    model_config = ConfigDict(extra="forbid")

    message: str = Field(..., description="Human-readable error message")
    kind: str | None = Field(default=None, description="Domain error kind (CONFLICT, NOT_FOUND, DOMAIN_REJECTION)")


class CreatedResponse(BaseModel):
    """Id assigned to a newly created resource."""
    model_config = ConfigDict(extra="forbid")

    id: int = Field(..., description="Assigned id")
