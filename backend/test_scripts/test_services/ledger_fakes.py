"""
In-memory repository doubles for service tests.

They record every call so tests can assert which storage operations ran
(and which did not), and can be told to fail on a given operation.
"""
from decimal import Decimal
from typing import List, Optional

from backend.app.db.models import Account
from backend.app.repositories.account_repository import AccountRepository
from backend.app.repositories.transaction_repository import TransactionRepository


class StorageFailure(Exception):
    """Stands in for a driver/storage error the services must not reinterpret."""


class FakeAccountRepository(AccountRepository):

    def __init__(self, accounts: Optional[List[Account]] = None, next_id: int = 1):
        self.accounts: List[Account] = list(accounts or [])
        self.next_id = next_id
        self.calls: List[str] = []
        self.fail_on: dict[str, Exception] = {}
        self.count_override: Optional[int] = None

    def _record(self, name: str):
        self.calls.append(name)
        if name in self.fail_on:
            raise self.fail_on[name]

    async def count_by_document_number(self, document_number: str) -> int:
        self._record("count_by_document_number")
        if self.count_override is not None:
            return self.count_override
        return sum(1 for a in self.accounts if a.document_number == document_number)

    async def insert_account(self, document_number: str) -> int:
        self._record("insert_account")
        account = Account(id=self.next_id, document_number=document_number)
        self.accounts.append(account)
        self.next_id += 1
        return account.id

    async def get_by_id(self, account_id: int) -> Optional[Account]:
        self._record("get_by_id")
        for account in self.accounts:
            if account.id == account_id:
                return account
        return None

    async def get_all(self) -> List[Account]:
        self._record("get_all")
        return self.accounts

    def count(self, name: str) -> int:
        return self.calls.count(name)


class FakeTransactionRepository(TransactionRepository):

    def __init__(self, next_id: int = 1):
        self.next_id = next_id
        self.inserted: List[tuple[int, int, Decimal]] = []
        self.fail_with: Optional[Exception] = None

    async def insert_transaction(self, account_id: int, operation_type_id: int, amount: Decimal) -> int:
        if self.fail_with is not None:
            raise self.fail_with
        self.inserted.append((account_id, operation_type_id, amount))
        transaction_id = self.next_id
        self.next_id += 1
        return transaction_id
