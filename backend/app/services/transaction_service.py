"""
Transaction Service.

Creates transactions through three ordered gates:
1. the operation type must exist in the registry (no storage access otherwise)
2. the account must exist
3. the amount is re-signed from the operation type's classification

Then a single insert persists it, so there is never a partial write.

Design Notes:
- Depends on AccountRepository, not on AccountService
- The registry is injected and never mutated
- The caller is responsible for commit/rollback
"""
from __future__ import annotations

from decimal import Decimal

from backend.app.logging_config import get_logger
from backend.app.repositories.account_repository import AccountRepository
from backend.app.repositories.transaction_repository import TransactionRepository
from backend.app.services.errors import AccountNotFoundError, TransactionTypeNotFoundError
from backend.app.services.operation_types import OperationTypeRegistry

logger = get_logger(__name__)


class TransactionService:
    """Service for recording transactions."""

    def __init__(
        self,
        accounts: AccountRepository,
        transactions: TransactionRepository,
        operation_types: OperationTypeRegistry,
        ):
        self.accounts = accounts
        self.transactions = transactions
        self.operation_types = operation_types

    async def create_transaction(self, account_id: int, operation_type_id: int, amount: Decimal) -> int:
        """
        Record a transaction.

        Args:
            account_id: Existing account id
            operation_type_id: Code from the operation type registry
            amount: Magnitude; its sign is recomputed from the operation type

        Returns:
            Id assigned by the repository

        Raises:
            TransactionTypeNotFoundError: unknown operation type code
            AccountNotFoundError: no account with this id
        """
        operation_type = self.operation_types.get(operation_type_id)
        if operation_type is None:
            logger.info("Unknown operation type", operation_type_id=operation_type_id)
            raise TransactionTypeNotFoundError(operation_type_id)

        account = await self.accounts.get_by_id(account_id)
        if account is None:
            logger.info("Transaction rejected, account not found", account_id=account_id)
            raise AccountNotFoundError(account_id)

        signed_amount = operation_type.signed_amount(amount)

        transaction_id = await self.transactions.insert_transaction(account_id, operation_type_id, signed_amount)
        logger.info(
            "Transaction created",
            transaction_id=transaction_id,
            account_id=account_id,
            operation_type=operation_type.description,
            amount=str(signed_amount),
            )
        return transaction_id
