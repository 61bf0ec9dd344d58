"""
tests/unit/test_catalog_sink.py
Unit tests for src/batch/sinks/catalog_sink.py with a mocked SparkSession.
Full overwrite behaviour on a real table is covered in tests/integration.
"""

from unittest.mock import MagicMock

import pytest

from src.batch.config import CatalogDestination
from src.batch.schemas import POST_DUMP_SCHEMA
from src.batch.sinks.catalog_sink import table_namespace, write_posts_to_catalog
from src.common.errors import SinkError

DESTINATION = CatalogDestination("lake.post_analysis.daily_dump_1", "iceberg")


def mock_records(count=2):
    records_df = MagicMock(name="records_df")
    records_df.count.return_value = count
    spark = records_df.sparkSession
    spark.table.return_value.schema.fields = POST_DUMP_SCHEMA.fields
    writer = records_df.select.return_value.write
    return records_df, spark, writer


def test_table_namespace_strips_table_name():
    assert table_namespace("lake.post_analysis.daily_dump_1") == "lake.post_analysis"
    assert table_namespace("default.posts") == "default"
    assert table_namespace("posts") == ""


def test_namespace_is_created_before_table():
    records_df, spark, writer = mock_records()

    assert write_posts_to_catalog(records_df, DESTINATION) == 2

    statements = [call.args[0] for call in spark.sql.call_args_list]
    assert statements[0] == "CREATE NAMESPACE IF NOT EXISTS lake.post_analysis"
    assert "CREATE TABLE IF NOT EXISTS lake.post_analysis.daily_dump_1" in statements[1]
    writer.insertInto.assert_called_once_with("lake.post_analysis.daily_dump_1", overwrite=True)


def test_bare_table_name_skips_namespace():
    records_df, spark, _ = mock_records()

    write_posts_to_catalog(records_df, CatalogDestination("posts", "parquet"))

    statements = [call.args[0] for call in spark.sql.call_args_list]
    assert not any(s.startswith("CREATE NAMESPACE") for s in statements)


def test_overwrite_failure_is_reported_as_sink_error(java_error):
    records_df, _, writer = mock_records()
    writer.insertInto.side_effect = java_error("java.io.IOException: No space left on device")

    with pytest.raises(SinkError) as excinfo:
        write_posts_to_catalog(records_df, DESTINATION)

    assert "lake.post_analysis.daily_dump_1" in str(excinfo.value)
