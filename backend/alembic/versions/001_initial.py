"""initial schema

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = '001_initial'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create accounts and transactions."""
    conn = op.get_bind()

    print("🔧 Starting migration 001_initial...")
    print("=" * 60)

    print("📦 Creating table: accounts...")
    conn.execute(sa.text("""CREATE TABLE accounts
                            (
                                id              INTEGER PRIMARY KEY,
                                document_number VARCHAR  NOT NULL,
                                created_at      DATETIME NOT NULL,
                                updated_at      DATETIME NOT NULL
                            )"""))
    print("  ✓ Table created")
    conn.execute(sa.text("CREATE UNIQUE INDEX ix_accounts_document_number ON accounts (document_number)"))
    print("  ✓ Index created")

    print("📦 Creating table: transactions...")
    conn.execute(sa.text("""CREATE TABLE transactions
                            (
                                id                INTEGER PRIMARY KEY,
                                account_id        INTEGER        NOT NULL,
                                operation_type_id INTEGER        NOT NULL,
                                amount            NUMERIC(18, 6) NOT NULL,
                                event_date        DATETIME       NOT NULL,
                                created_at        DATETIME       NOT NULL,
                                updated_at        DATETIME       NOT NULL,
                                FOREIGN KEY (account_id) REFERENCES accounts (id)
                            )"""))
    print("  ✓ Table created")
    conn.execute(sa.text("CREATE INDEX ix_transactions_account_id ON transactions (account_id)"))
    print("  ✓ Index created")

    print("=" * 60)
    print("✅ Migration 001_initial complete")


def downgrade() -> None:
    """Drop all tables."""
    conn = op.get_bind()
    for table in ['transactions', 'accounts']:
        conn.execute(sa.text(f"DROP TABLE IF EXISTS {table}"))
