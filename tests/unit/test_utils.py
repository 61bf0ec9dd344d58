"""
tests/unit/test_utils.py
Unit tests for src/common/utils.py — no external dependencies required.
"""

from src.common.utils import rows_fingerprint, sha256_hash, utc_now
from datetime import datetime, timezone


def test_sha256_hash_returns_hex_string():
    result = sha256_hash("p42")
    assert isinstance(result, str)
    assert len(result) == 64  # SHA-256 hex digest is always 64 chars


def test_sha256_hash_is_deterministic():
    value = "post-abc"
    assert sha256_hash(value) == sha256_hash(value)


def test_rows_fingerprint_ignores_row_order():
    rows = [("p1", "a", "hi", 1.0, 2.0), ("p2", "b", "yo", 3.0, 4.0)]
    assert rows_fingerprint(rows) == rows_fingerprint(list(reversed(rows)))


def test_rows_fingerprint_sees_value_and_multiplicity_changes():
    rows = [("p1", "a", "hi", 1.0, 2.0)]
    assert rows_fingerprint(rows) != rows_fingerprint([("p1", "a", "hi", 1.0, 2.5)])
    assert rows_fingerprint(rows) != rows_fingerprint(rows * 2)


def test_utc_now_returns_aware_datetime():
    result = utc_now()
    assert isinstance(result, datetime)
    assert result.tzinfo is not None
    assert result.tzinfo == timezone.utc
