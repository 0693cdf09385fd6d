"""
Test datetime utilities.
"""
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from backend.test_scripts.test_db_config import setup_test_database

setup_test_database()

from backend.app.db.models import Account, Transaction
from backend.app.utils.datetime_utils import utcnow


# ============================================================================
# TESTS: utcnow
# ============================================================================

def test_utcnow_is_aware_utc():
    result = utcnow()
    assert isinstance(result, datetime)
    assert result.tzinfo == timezone.utc
    assert result.utcoffset().total_seconds() == 0


def test_utcnow_is_current_and_monotonic():
    before = datetime.now(timezone.utc)
    first = utcnow()
    second = utcnow()
    after = datetime.now(timezone.utc)

    assert before <= first <= second <= after


# ============================================================================
# TESTS: model timestamp defaults
# ============================================================================

def test_account_timestamps_default_to_utc():
    account = Account(document_number="12345678900")
    assert account.created_at.tzinfo == timezone.utc
    assert account.updated_at.tzinfo == timezone.utc


def test_transaction_event_date_defaults_to_utc():
    tx = Transaction(account_id=1, operation_type_id=1, amount=Decimal("-4"))
    assert tx.event_date.tzinfo == timezone.utc
    assert tx.created_at.tzinfo == timezone.utc


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
