"""
Ledger domain errors.

Every error raised by the ledger rules carries an ErrorKind. Callers (the API
layer, the CLI) branch on the kind or on the exception class, never on the
message text. Anything that is not a LedgerError is an infrastructure failure
and is propagated untouched.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of domain error kinds."""
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    DOMAIN_REJECTION = "DOMAIN_REJECTION"


class LedgerError(Exception):
    """Base class for ledger domain errors."""
    kind: ErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AccountExistsError(LedgerError):
    """An account already exists for the document number."""
    kind = ErrorKind.CONFLICT

    def __init__(self, document_number: str):
        self.document_number = document_number
        super().__init__(f"Account with document number '{document_number}' already exists")


class AccountNotFoundError(LedgerError):
    """No account with the given id."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, account_id: int):
        self.account_id = account_id
        super().__init__(f"Account {account_id} not found")


class AccountListIsEmptyError(LedgerError):
    """The account listing has no rows."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self):
        super().__init__("Account list is empty")


class TransactionTypeNotFoundError(LedgerError):
    """The operation type code is not in the registry."""
    kind = ErrorKind.DOMAIN_REJECTION

    def __init__(self, operation_type_id: int):
        self.operation_type_id = operation_type_id
        super().__init__(f"Operation type {operation_type_id} not found")
