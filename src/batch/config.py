"""
config.py
Around Post Dump — Injected run configuration.

Turns the environment-backed constants of src.common.config into frozen
dataclasses. The pipeline only ever sees a PostDumpConfig value; nothing
downstream reads the environment.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from src.common import config as env
from src.common.errors import ConfigError

DESTINATION_KINDS = ("bigquery", "catalog")
BIGQUERY_WRITE_METHODS = ("indirect", "direct")


def _require(value: Optional[str], name: str) -> None:
    if not value or not value.strip():
        raise ConfigError(f"{name} must be a non-empty string")


@dataclass(frozen=True)
class BigtableSource:
    project_id: str
    instance_id: str
    table_id: str

    def __post_init__(self) -> None:
        _require(self.project_id, "BIGTABLE_PROJECT_ID")
        _require(self.instance_id, "BIGTABLE_INSTANCE_ID")
        _require(self.table_id, "BIGTABLE_TABLE_ID")

    @property
    def display_name(self) -> str:
        return f"{self.project_id}/{self.instance_id}/{self.table_id}"


@dataclass(frozen=True)
class BigQueryDestination:
    project_id: str
    dataset_id: str
    table_id: str
    write_method: str = "indirect"
    temporary_gcs_bucket: Optional[str] = None

    def __post_init__(self) -> None:
        _require(self.project_id, "BIGQUERY_PROJECT_ID")
        _require(self.dataset_id, "BIGQUERY_DATASET_ID")
        _require(self.table_id, "BIGQUERY_TABLE_ID")
        if self.write_method not in BIGQUERY_WRITE_METHODS:
            raise ConfigError(
                f"BIGQUERY_WRITE_METHOD must be one of {BIGQUERY_WRITE_METHODS}, "
                f"got {self.write_method!r}"
            )
        if self.write_method == "indirect":
            _require(self.temporary_gcs_bucket, "BIGQUERY_TEMP_BUCKET")

    @property
    def table_spec(self) -> str:
        return f"{self.project_id}.{self.dataset_id}.{self.table_id}"


@dataclass(frozen=True)
class CatalogDestination:
    table: str
    table_format: str = "iceberg"

    def __post_init__(self) -> None:
        _require(self.table, "CATALOG_TABLE")
        _require(self.table_format, "CATALOG_TABLE_FORMAT")

    @property
    def table_spec(self) -> str:
        return self.table


Destination = Union[BigQueryDestination, CatalogDestination]


@dataclass(frozen=True)
class SparkSettings:
    app_name: str = "Around-PostDump"
    master: Optional[str] = None
    jars_packages: Optional[str] = None
    iceberg_catalog: Optional[str] = None
    iceberg_warehouse: Optional[str] = None


@dataclass(frozen=True)
class PostDumpConfig:
    source: BigtableSource
    destination: Destination
    spark: SparkSettings = field(default_factory=SparkSettings)

    @property
    def destination_kind(self) -> str:
        if isinstance(self.destination, BigQueryDestination):
            return "bigquery"
        return "catalog"


def load_config() -> PostDumpConfig:
    """Build the run configuration from the environment-backed constants."""
    source = BigtableSource(
        project_id=env.BIGTABLE_PROJECT_ID,
        instance_id=env.BIGTABLE_INSTANCE_ID,
        table_id=env.BIGTABLE_TABLE_ID,
    )

    kind = env.DESTINATION_KIND.strip().lower()
    if kind not in DESTINATION_KINDS:
        raise ConfigError(
            f"DESTINATION_KIND must be one of {DESTINATION_KINDS}, got {env.DESTINATION_KIND!r}"
        )

    destination: Destination
    iceberg_catalog = None
    if kind == "bigquery":
        destination = BigQueryDestination(
            project_id=env.BIGQUERY_PROJECT_ID,
            dataset_id=env.BIGQUERY_DATASET_ID,
            table_id=env.BIGQUERY_TABLE_ID,
            write_method=env.BIGQUERY_WRITE_METHOD,
            temporary_gcs_bucket=env.BIGQUERY_TEMP_BUCKET or None,
        )
    else:
        destination = CatalogDestination(
            table=env.CATALOG_TABLE,
            table_format=env.CATALOG_TABLE_FORMAT,
        )
        if destination.table_format == "iceberg":
            iceberg_catalog = env.ICEBERG_CATALOG

    spark = SparkSettings(
        app_name=env.SPARK_APP_NAME,
        master=env.SPARK_MASTER,
        jars_packages=env.SPARK_JARS_PACKAGES or None,
        iceberg_catalog=iceberg_catalog,
        iceberg_warehouse=env.ICEBERG_WAREHOUSE if iceberg_catalog else None,
    )
    return PostDumpConfig(source=source, destination=destination, spark=spark)
