"""
sinks/bigquery_sink.py
Around Post Dump — BigQuery writer.

Loads the full record set through the Spark BigQuery connector with
CREATE_IF_NEEDED and save mode "overwrite", which the connector turns
into a WRITE_TRUNCATE load: the previous table content is replaced.
"""

from py4j.protocol import Py4JJavaError
from pyspark.sql import DataFrame

from src.batch.config import BigQueryDestination
from src.batch.schemas import POST_DUMP_COLUMNS
from src.common.errors import ConnectivityError
from src.common.logger import get_logger

log = get_logger(__name__)

CREATE_DISPOSITION = "CREATE_IF_NEEDED"
WRITE_MODE = "overwrite"  # WRITE_TRUNCATE


def write_posts_to_bigquery(records_df: DataFrame, destination: BigQueryDestination) -> int:
    """
    Replace the BigQuery table content with records_df.
    Returns the number of rows written.
    """
    count = records_df.count()

    writer = (
        records_df
        .select(*POST_DUMP_COLUMNS)
        .write
        .format("bigquery")
        .option("table", destination.table_spec)
        .option("parentProject", destination.project_id)
        .option("createDisposition", CREATE_DISPOSITION)
        .option("writeMethod", destination.write_method)
        .mode(WRITE_MODE)
    )
    if destination.write_method == "indirect":
        writer = writer.option("temporaryGcsBucket", destination.temporary_gcs_bucket)

    log.info(
        "Loading %d rows into BigQuery table %s (%s write)",
        count, destination.table_spec, destination.write_method,
    )
    try:
        writer.save()
    except Py4JJavaError as exc:
        raise ConnectivityError(
            f"BigQuery load into {destination.table_spec} failed: {exc}"
        ) from exc

    log.info("BigQuery table %s truncated and loaded with %d rows", destination.table_spec, count)
    return count
