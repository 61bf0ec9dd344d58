"""
conftest.py
Around Post Dump — Shared pytest fixtures for all test tiers.

Provides:
  - spark: a local SparkSession with a throwaway warehouse directory
  - source_frame: builds a connector-shaped DataFrame from SourceRow values
  - java_error: a Py4JJavaError that renders without a live JVM
"""

import os
from pathlib import Path
from types import SimpleNamespace

import pytest
from py4j.protocol import Py4JJavaError

REPO_ROOT = Path(__file__).resolve().parent.parent

# Python workers are separate processes; they must be able to import src.*
os.environ["PYTHONPATH"] = os.pathsep.join(
    filter(None, [str(REPO_ROOT), os.environ.get("PYTHONPATH")])
)


@pytest.fixture(scope="session")
def spark(tmp_path_factory):
    """
    Provide a local SparkSession for tests.
    Uses the in-memory catalog — no external services required.
    """
    from pyspark.sql import SparkSession

    warehouse = tmp_path_factory.mktemp("spark-warehouse")
    spark = (
        SparkSession.builder
        .master("local[2]")
        .appName("around-post-dump-tests")
        .config("spark.sql.shuffle.partitions", "2")
        .config("spark.ui.enabled", "false")
        .config("spark.sql.warehouse.dir", str(warehouse))
        .getOrCreate()
    )
    spark.sparkContext.setLogLevel("ERROR")
    yield spark
    spark.stop()


@pytest.fixture
def source_frame(spark):
    """Return a function turning SourceRow values into a connector-shaped DataFrame."""
    from src.batch.schemas import SOURCE_COLUMNS, SOURCE_ROW_SCHEMA

    def build(rows):
        data = [
            tuple(
                [bytearray(row.row_key)]
                + [
                    bytearray(row.cells[cell]) if cell in row.cells else None
                    for cell in SOURCE_COLUMNS.values()
                ]
            )
            for row in rows
        ]
        return spark.createDataFrame(data, schema=SOURCE_ROW_SCHEMA)

    return build


class FakeJavaError(Py4JJavaError):
    """Py4JJavaError that does not need a live JVM to render itself."""

    def __init__(self, message="java.io.IOException: Permission denied"):
        super().__init__("An error occurred while calling o42", SimpleNamespace(_target_id="o42"))
        self.message = message

    def __str__(self):
        return self.message


@pytest.fixture
def java_error():
    """Return a function building a JVM-side error with the given message."""
    return FakeJavaError
