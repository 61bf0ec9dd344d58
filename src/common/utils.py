"""
common/utils.py
Around Post Dump — Shared utility functions.

Provides:
  - sha256_hash: hex SHA-256 digest of a string
  - rows_fingerprint: order-independent digest of a table's contents
  - utc_now: timezone-aware UTC datetime helper
"""

import hashlib
import json
from datetime import datetime, timezone
from typing import Iterable, Sequence


def sha256_hash(value: str) -> str:
    """Return a hex SHA-256 digest of the input string."""
    return hashlib.sha256(value.encode()).hexdigest()


def rows_fingerprint(rows: Iterable[Sequence]) -> str:
    """
    Return a SHA-256 digest of a set of rows, independent of row order.
    Two loads of the same table compare equal iff they hold the same rows
    (with multiplicity) and the same values, float repr included.
    """
    canonical = sorted(json.dumps(list(row), ensure_ascii=False) for row in rows)
    return sha256_hash("\n".join(canonical))


def utc_now() -> datetime:
    """Return the current UTC datetime (timezone-aware)."""
    return datetime.now(timezone.utc)
