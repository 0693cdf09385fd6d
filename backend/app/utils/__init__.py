"""
Utility functions for the ledger backend.

This package contains:
- datetime_utils: timezone-aware UTC timestamps
"""
