#!/usr/bin/env python3
"""
Ledger Management CLI

Command-line tool for working with accounts and transactions from the server
terminal, without going through the HTTP API. Uses the same services, rules
and input schemas as the API.

Usage:
    python ledger_cli.py create-account <document_number>
    python ledger_cli.py get-account <account_id>
    python ledger_cli.py list-accounts
    python ledger_cli.py create-transaction <account_id> <operation_type_id> <amount>
    python ledger_cli.py operation-types

Add --test before the command to run against TEST_DATABASE_URL.
"""
import argparse
import asyncio
import sys
from contextlib import asynccontextmanager
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import AsyncIterator

# Add project root to path (file is in root)
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from backend.app.config import set_test_mode

if "--test" in sys.argv:
    set_test_mode(True)
    sys.argv.remove("--test")

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db.session import get_async_engine
from backend.app.logging_config import configure_logging
from backend.app.repositories.account_repository import SQLAccountRepository
from backend.app.repositories.transaction_repository import SQLTransactionRepository
from backend.app.schemas.accounts import ACCreateItem
from backend.app.schemas.transactions import TXCreateItem
from backend.app.services.account_service import AccountService
from backend.app.services.errors import LedgerError
from backend.app.services.operation_types import build_default_registry
from backend.app.services.transaction_service import TransactionService


@asynccontextmanager
async def _session() -> AsyncIterator[AsyncSession]:
    """One engine and session per command; the engine is disposed on exit."""
    engine = get_async_engine()
    try:
        async with AsyncSession(engine, expire_on_commit=False) as session:
            yield session
    finally:
        await engine.dispose()


def _first_error(e: ValidationError) -> str:
    return e.errors()[0]['msg']


async def cmd_create_account(document_number: str) -> bool:
    """Create an account."""
    try:
        item = ACCreateItem(document_number=document_number)
    except ValidationError as e:
        print(f"❌ Invalid document number: {_first_error(e)}")
        return False

    async with _session() as session:
        service = AccountService(SQLAccountRepository(session))
        try:
            account_id = await service.create_account(item.document_number)
        except LedgerError as e:
            print(f"❌ {e.message}")
            return False
        await session.commit()

    print(f"✅ Account created with ID {account_id}")
    return True


async def cmd_get_account(account_id: int) -> bool:
    """Show one account."""
    async with _session() as session:
        service = AccountService(SQLAccountRepository(session))
        try:
            account = await service.get_account(account_id)
        except LedgerError as e:
            print(f"❌ {e.message}")
            return False

    print(f"ID: {account.id}")
    print(f"Document number: {account.document_number}")
    print(f"Created at: {account.created_at}")
    return True


async def cmd_list_accounts() -> bool:
    """List all accounts."""
    async with _session() as session:
        service = AccountService(SQLAccountRepository(session))
        try:
            accounts = await service.get_all_accounts()
        except LedgerError as e:
            print(e.message)
            return False

    print(f"\n{'ID':<8} {'Document number':<22} {'Created at':<30}")
    print("-" * 60)
    for account in accounts:
        print(f"{account.id:<8} {account.document_number:<22} {str(account.created_at):<30}")

    print(f"\nTotal: {len(accounts)} account(s)")
    return True


async def cmd_create_transaction(account_id: int, operation_type_id: int, amount: Decimal) -> bool:
    """Record a transaction."""
    try:
        item = TXCreateItem(account_id=account_id, operation_type_id=operation_type_id, amount=amount)
    except ValidationError as e:
        print(f"❌ Invalid transaction: {_first_error(e)}")
        return False

    async with _session() as session:
        service = TransactionService(
            accounts=SQLAccountRepository(session),
            transactions=SQLTransactionRepository(session),
            operation_types=build_default_registry(),
            )
        try:
            transaction_id = await service.create_transaction(item.account_id, item.operation_type_id, item.amount)
        except LedgerError as e:
            print(f"❌ {e.message}")
            return False
        await session.commit()

    print(f"✅ Transaction created with ID {transaction_id}")
    return True


def cmd_operation_types() -> bool:
    """Print the operation type registry."""
    registry = build_default_registry()

    print(f"\n{'Code':<6} {'Description':<20} {'Classification':<15}")
    print("-" * 45)
    for code in sorted(registry):
        operation_type = registry[code]
        print(f"{code:<6} {operation_type.description:<20} {operation_type.classification.value:<15}")
    return True


def _positive_decimal(value: str) -> Decimal:
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}")
    # NaN cannot be ordered, check finiteness first
    if not amount.is_finite():
        raise argparse.ArgumentTypeError(f"amount must be a finite number: {value!r}")
    if amount <= 0:
        raise argparse.ArgumentTypeError("amount must be greater than 0")
    return amount


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Ledger Management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python ledger_cli.py create-account 12345678900
  python ledger_cli.py list-accounts
  python ledger_cli.py create-transaction 1 4 123.45
  python ledger_cli.py --test operation-types
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    create_parser = subparsers.add_parser("create-account", help="Create an account")
    create_parser.add_argument("document_number", help="Document number (digits only)")

    get_parser = subparsers.add_parser("get-account", help="Show one account")
    get_parser.add_argument("account_id", type=int, help="Account ID")

    subparsers.add_parser("list-accounts", help="List all accounts")

    tx_parser = subparsers.add_parser("create-transaction", help="Record a transaction")
    tx_parser.add_argument("account_id", type=int, help="Account ID")
    tx_parser.add_argument("operation_type_id", type=int, help="Operation type code")
    tx_parser.add_argument("amount", type=_positive_decimal, help="Amount (sign comes from the operation type)")

    subparsers.add_parser("operation-types", help="List operation types")

    return parser


def main(argv=None) -> int:
    # Service INFO events would interleave with the tables printed here
    configure_logging("WARNING", enable_file_logging=False, json_logs=False)

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "create-account":
        ok = asyncio.run(cmd_create_account(args.document_number))
    elif args.command == "get-account":
        ok = asyncio.run(cmd_get_account(args.account_id))
    elif args.command == "list-accounts":
        ok = asyncio.run(cmd_list_accounts())
    elif args.command == "create-transaction":
        ok = asyncio.run(cmd_create_transaction(args.account_id, args.operation_type_id, args.amount))
    else:
        ok = cmd_operation_types()

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
