"""
sinks/catalog_sink.py
Around Post Dump — Spark SQL catalog table writer (Iceberg in production).

Create-if-needed + write-truncate:
  1. CREATE NAMESPACE IF NOT EXISTS, then CREATE TABLE IF NOT EXISTS from POST_DUMP_SCHEMA
  2. reject an existing table whose columns differ from the schema
  3. static INSERT OVERWRITE of the whole (unpartitioned) table
"""

from py4j.protocol import Py4JJavaError
from pyspark.errors import AnalysisException
from pyspark.sql import DataFrame, SparkSession

from src.batch.config import CatalogDestination
from src.batch.schemas import POST_DUMP_COLUMNS, POST_DUMP_SCHEMA, catalog_table_ddl
from src.common.errors import SchemaMismatchError, SinkError
from src.common.logger import get_logger

log = get_logger(__name__)


def table_namespace(table: str) -> str:
    """Namespace part of a multi-part table name ("" for a bare table name)."""
    namespace, _, _ = table.rpartition(".")
    return namespace


def bootstrap_catalog_table(spark: SparkSession, destination: CatalogDestination) -> None:
    """Create the namespace + destination table if they don't exist yet and check its shape."""
    log.info("Bootstrapping %s table %s", destination.table_format, destination.table)
    namespace = table_namespace(destination.table)
    try:
        if namespace:
            spark.sql(f"CREATE NAMESPACE IF NOT EXISTS {namespace}")
        spark.sql(catalog_table_ddl(destination.table, destination.table_format))
        existing_fields = spark.table(destination.table).schema.fields
    except AnalysisException as exc:
        raise SinkError(f"cannot create table {destination.table}: {exc}") from exc

    existing = [(field.name, field.dataType.simpleString()) for field in existing_fields]
    expected = [(field.name, field.dataType.simpleString()) for field in POST_DUMP_SCHEMA.fields]
    if existing != expected:
        raise SchemaMismatchError(
            f"table {destination.table} has columns {existing}, expected {expected}"
        )


def write_posts_to_catalog(records_df: DataFrame, destination: CatalogDestination) -> int:
    """
    Replace the whole content of the catalog table with records_df.
    Returns the number of rows written.
    """
    spark = records_df.sparkSession
    bootstrap_catalog_table(spark, destination)

    count = records_df.count()
    # Static overwrite replaces every row, not only the partitions being written
    spark.conf.set("spark.sql.sources.partitionOverwriteMode", "static")
    try:
        records_df.select(*POST_DUMP_COLUMNS).write.insertInto(destination.table, overwrite=True)
    except (AnalysisException, Py4JJavaError) as exc:
        raise SinkError(f"overwrite of {destination.table} failed: {exc}") from exc

    log.info("Catalog table %s overwritten with %d rows", destination.table, count)
    return count
