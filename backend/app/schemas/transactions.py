"""
Transaction schemas.

DTOs for transaction creation and operation type metadata.

**Naming Convention**:
- TX prefix: Transaction-related schemas
- Item suffix: single item (e.g., TXCreateItem)

**Design Notes**:
- amount is a positive magnitude on input; the stored sign comes from the
  operation type (debit negative, credit positive)
- operation_type_id is only range-checked here, the registry lookup belongs
  to TransactionService
"""
from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from backend.app.services.operation_types import OperationClassification, OperationType


class TXCreateItem(BaseModel):
    """
    DTO for creating a single transaction.

    Used by POST /api/v1/transactions.
    """
    model_config = ConfigDict(extra="forbid")

    account_id: int = Field(..., gt=0, description="Account ID")
    operation_type_id: int = Field(..., gt=0, description="Operation type code")
    amount: Decimal = Field(
        ...,
        gt=0,
        max_digits=18,
        decimal_places=6,
        description="Amount magnitude; sign is applied from the operation type",
        )


class TXOperationTypeItem(BaseModel):
    """
    Metadata about an operation type.

    Used by GET /api/v1/transactions/operation-types.
    """
    model_config = ConfigDict(extra="forbid")

    id: int = Field(..., description="Operation type code")
    description: str = Field(..., description="Display name")
    classification: OperationClassification = Field(..., description="DEBIT or CREDIT")
    amount_sign: Literal["+", "-"] = Field(..., description="Sign applied to the stored amount")

    @classmethod
    def from_operation_type(cls, operation_type: OperationType) -> "TXOperationTypeItem":
        return cls(
            id=operation_type.id,
            description=operation_type.description,
            classification=operation_type.classification,
            amount_sign="-" if operation_type.is_debit else "+",
            )
