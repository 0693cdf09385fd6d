"""
Repository layer: storage contracts consumed by the ledger services and
their SQL implementations.
"""
from backend.app.repositories.account_repository import AccountRepository, SQLAccountRepository
from backend.app.repositories.transaction_repository import TransactionRepository, SQLTransactionRepository

__all__ = [
    "AccountRepository",
    "SQLAccountRepository",
    "TransactionRepository",
    "SQLTransactionRepository",
    ]
