#!/usr/bin/env python3
"""
scripts/generate_test_data.py
Around Post Dump — Synthetic post writer for Bigtable.

Writes a configurable number of random posts to the Bigtable post table,
using the same cell layout as the serving service:
  post:user, post:message, location:lat, location:lon (shortest fixed-point text)

Useful for smoke-testing the dump against a dev instance or the emulator
(export BIGTABLE_EMULATOR_HOST=localhost:8086).

Usage:
  python scripts/generate_test_data.py [--count N] [--missing-location N]
"""

import argparse
import random
import uuid
from decimal import Decimal

from google.cloud import bigtable

from src.common.config import BIGTABLE_PROJECT_ID, BIGTABLE_INSTANCE_ID, BIGTABLE_TABLE_ID

USERS    = [f"user-{i:04d}" for i in range(1, 11)]
MESSAGES = ["hello", "coffee time", "sunset", "at the game", "new post", "héllo wörld"]


def make_post() -> dict:
    return {
        "id":      str(uuid.uuid4()),
        "user":    random.choice(USERS),
        "message": random.choice(MESSAGES),
        "lat":     round(random.uniform(-90.0, 90.0), 6),
        "lon":     round(random.uniform(-180.0, 180.0), 6),
    }


def format_coordinate(value: float) -> str:
    """Shortest round-trip digits in fixed-point notation, never an exponent."""
    return format(Decimal(repr(value)).normalize(), "f")


def make_row(table, post: dict, with_location: bool = True):
    row = table.direct_row(post["id"].encode("utf-8"))
    row.set_cell("post", b"user",    post["user"].encode("utf-8"))
    row.set_cell("post", b"message", post["message"].encode("utf-8"))
    if with_location:
        row.set_cell("location", b"lat", format_coordinate(post["lat"]).encode("utf-8"))
        row.set_cell("location", b"lon", format_coordinate(post["lon"]).encode("utf-8"))
    return row


def main():
    parser = argparse.ArgumentParser(description="Write synthetic posts to Bigtable")
    parser.add_argument("--count", type=int, default=20, help="Number of complete posts to write")
    parser.add_argument("--missing-location", type=int, default=0,
                        help="Number of extra posts written without a location family")
    args = parser.parse_args()

    client = bigtable.Client(project=BIGTABLE_PROJECT_ID, admin=False)
    table = client.instance(BIGTABLE_INSTANCE_ID).table(BIGTABLE_TABLE_ID)

    rows = [make_row(table, make_post()) for _ in range(args.count)]
    rows += [make_row(table, make_post(), with_location=False) for _ in range(args.missing_location)]

    print(f"Writing {len(rows)} posts to {BIGTABLE_PROJECT_ID}/{BIGTABLE_INSTANCE_ID}/{BIGTABLE_TABLE_ID}...")
    statuses = table.mutate_rows(rows)
    failed = [status for status in statuses if status.code != 0]
    for status in failed:
        print(f"  [FAIL] {status.message}")

    print(f"\nDone. {len(rows) - len(failed)}/{len(rows)} posts written.")


if __name__ == "__main__":
    main()
