"""
common/config.py
Around Post Dump — Centralized configuration loader.

Reads configuration from environment variables with sensible defaults.
All application modules should import constants from here rather than
defining them inline.
"""

import os

# ---------------------------------------------------------------------------
# Google Cloud
# ---------------------------------------------------------------------------
GCP_PROJECT_ID = os.getenv("GCP_PROJECT_ID", "orbital-heaven-286400")

# ---------------------------------------------------------------------------
# Bigtable (source)
# ---------------------------------------------------------------------------
BIGTABLE_PROJECT_ID  = os.getenv("BIGTABLE_PROJECT_ID",  GCP_PROJECT_ID)
BIGTABLE_INSTANCE_ID = os.getenv("BIGTABLE_INSTANCE_ID", "around-post")
BIGTABLE_TABLE_ID    = os.getenv("BIGTABLE_TABLE_ID",    "post")

# ---------------------------------------------------------------------------
# Destination
# ---------------------------------------------------------------------------
DESTINATION_KIND = os.getenv("DESTINATION_KIND", "bigquery")  # bigquery | catalog

BIGQUERY_PROJECT_ID   = os.getenv("BIGQUERY_PROJECT_ID",   GCP_PROJECT_ID)
BIGQUERY_DATASET_ID   = os.getenv("BIGQUERY_DATASET_ID",   "post_analysis")
BIGQUERY_TABLE_ID     = os.getenv("BIGQUERY_TABLE_ID",     "daily_dump_1")
BIGQUERY_WRITE_METHOD = os.getenv("BIGQUERY_WRITE_METHOD", "indirect")  # indirect | direct
BIGQUERY_TEMP_BUCKET  = os.getenv("BIGQUERY_TEMP_BUCKET",  "dataflow-around-rg")

ICEBERG_CATALOG      = os.getenv("ICEBERG_CATALOG",      "around")
ICEBERG_WAREHOUSE    = os.getenv("ICEBERG_WAREHOUSE",    "gs://dataflow-around-rg/warehouse")
CATALOG_TABLE        = os.getenv("CATALOG_TABLE",        f"{ICEBERG_CATALOG}.post_analysis.daily_dump_1")
CATALOG_TABLE_FORMAT = os.getenv("CATALOG_TABLE_FORMAT", "iceberg")

# ---------------------------------------------------------------------------
# Spark
# ---------------------------------------------------------------------------
SPARK_APP_NAME      = os.getenv("SPARK_APP_NAME", "Around-PostDump")
SPARK_MASTER        = os.getenv("SPARK_MASTER")  # None: left to spark-submit
SPARK_JARS_PACKAGES = os.getenv(
    "SPARK_JARS_PACKAGES",
    "com.google.cloud.spark.bigtable:spark-bigtable_2.12:0.1.1,"
    "com.google.cloud.spark:spark-bigquery-with-dependencies_2.12:0.36.1",
)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
