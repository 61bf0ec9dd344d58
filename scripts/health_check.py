#!/usr/bin/env python3
"""
scripts/health_check.py
Around Post Dump — Pre-run connectivity check.

Checks the Google Cloud endpoints (or local emulators) the dump talks to
are reachable before a run is submitted.
Run with: python scripts/health_check.py
"""

import os
import socket
import sys


def check_tcp(host: str, port: int, label: str) -> bool:
    try:
        with socket.create_connection((host, port), timeout=3):
            print(f"  [OK]  {label} ({host}:{port})")
            return True
    except (ConnectionRefusedError, socket.timeout, OSError):
        print(f"  [FAIL] {label} ({host}:{port}) — not reachable")
        return False


def endpoint(env_var: str, default_host: str, default_port: int):
    """host:port from an emulator variable, else the public endpoint."""
    value = os.getenv(env_var)
    if not value:
        return default_host, default_port
    host, _, port = value.rpartition(":")
    return host, int(port)


def main():
    print("\nAround Post Dump Health Check\n" + "=" * 40)

    bigtable_host, bigtable_port = endpoint("BIGTABLE_EMULATOR_HOST", "bigtable.googleapis.com", 443)
    checks = [
        check_tcp(bigtable_host, bigtable_port, "Bigtable"),
        check_tcp("bigquery.googleapis.com", 443, "BigQuery"),
        check_tcp("bigquerystorage.googleapis.com", 443, "BigQuery Storage"),
        check_tcp("storage.googleapis.com", 443, "Cloud Storage (staging bucket)"),
    ]

    print()
    passed = sum(checks)
    total  = len(checks)
    print(f"Result: {passed}/{total} endpoints reachable")

    if passed < total:
        sys.exit(1)


if __name__ == "__main__":
    main()
