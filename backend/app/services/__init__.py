"""
Services package.
Ledger business rules.

- AccountService: account creation with document-number uniqueness, lookups
- TransactionService: operation-type gate, account-existence gate, amount signing
- operation_types: immutable operation type registry
- errors: domain error kinds shared by services, repositories and the API

Modules are imported directly (e.g. `from backend.app.services.account_service
import AccountService`); the repository layer imports `errors` from here, so
this package does not eagerly import the services.
"""
