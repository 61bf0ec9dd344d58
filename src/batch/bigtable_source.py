"""
bigtable_source.py
Around Post Dump — Bigtable source reader.

Scans the whole post table through the Spark Bigtable connector. The result
is a lazy, finite DataFrame with one binary column per mapped cell (see
schemas.bigtable_catalog); nothing is read until the first action runs.
A retried scan starts again from the beginning of the table.
"""

from py4j.protocol import Py4JJavaError
from pyspark.errors import AnalysisException
from pyspark.sql import DataFrame, SparkSession

from src.batch.config import BigtableSource
from src.batch.schemas import bigtable_catalog
from src.common.errors import ConnectivityError
from src.common.logger import get_logger

log = get_logger(__name__)


def read_post_rows(spark: SparkSession, source: BigtableSource) -> DataFrame:
    """Return every row of the Bigtable post table as a connector DataFrame."""
    log.info("Scanning Bigtable table %s", source.display_name)
    try:
        return (
            spark.read
            .format("bigtable")
            .option("catalog", bigtable_catalog(source.table_id))
            .option("spark.bigtable.project.id", source.project_id)
            .option("spark.bigtable.instance.id", source.instance_id)
            .load()
        )
    except (Py4JJavaError, AnalysisException) as exc:
        raise ConnectivityError(
            f"cannot open Bigtable table {source.display_name}: {exc}"
        ) from exc
