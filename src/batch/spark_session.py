"""
spark_session.py
Around Post Dump — SparkSession factory.

Centralizes SparkSession construction with the Bigtable/BigQuery connector
packages and, when the destination is an Iceberg table, the Iceberg catalog.
Calling create_spark_session() is the only entry point for Spark
initialization in the batch job.
"""

from pyspark.sql import SparkSession

from src.batch.config import SparkSettings
from src.common.logger import get_logger

log = get_logger(__name__)


def create_spark_session(settings: SparkSettings) -> SparkSession:
    """Build SparkSession with connector packages + optional Iceberg catalog."""
    builder = SparkSession.builder.appName(settings.app_name)
    if settings.master:
        builder = builder.master(settings.master)
    if settings.jars_packages:
        builder = builder.config("spark.jars.packages", settings.jars_packages)

    if settings.iceberg_catalog:
        catalog = f"spark.sql.catalog.{settings.iceberg_catalog}"
        builder = (
            builder
            # Iceberg extensions
            .config("spark.sql.extensions",
                    "org.apache.iceberg.spark.extensions.IcebergSparkSessionExtensions")
            # Hadoop catalog rooted at the warehouse path
            .config(catalog, "org.apache.iceberg.spark.SparkCatalog")
            .config(f"{catalog}.type", "hadoop")
            .config(f"{catalog}.warehouse", settings.iceberg_warehouse)
        )

    spark = (
        builder
        # Small, single-pass job
        .config("spark.sql.shuffle.partitions", "4")
        .config("spark.sql.sources.partitionOverwriteMode", "static")
        .getOrCreate()
    )
    spark.sparkContext.setLogLevel("WARN")
    log.info(
        "SparkSession created — app: %s, iceberg catalog: %s",
        settings.app_name, settings.iceberg_catalog or "-",
    )
    return spark
