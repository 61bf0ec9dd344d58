"""
pipeline.py
Around Post Dump — Pipeline definition.

A PostDumpPipeline is a plain value holding its three stages in order:
read (Bigtable scan), decode (pure per-row mapper), write (truncating load).
build_pipeline wires the stages from a PostDumpConfig; tests build one
directly with an in-memory reader and a local table writer.

Every row is decoded and checked before the write stage starts, so a bad
row fails the run without touching the destination table.
"""

from dataclasses import dataclass
from datetime import datetime
from functools import partial
from typing import Callable

from py4j.protocol import Py4JJavaError
from pyspark.sql import DataFrame, SparkSession

from src.batch.bigtable_source import read_post_rows
from src.batch.config import BigQueryDestination, PostDumpConfig
from src.batch.sinks.bigquery_sink import write_posts_to_bigquery
from src.batch.sinks.catalog_sink import write_posts_to_catalog
from src.batch.transforms.post_decoder import decode_post_result
from src.batch.transforms.post_records import (
    Decoder, decode_rows, first_failure, to_records_frame,
)
from src.common.errors import ConnectivityError
from src.common.logger import get_logger
from src.common.utils import utc_now

log = get_logger(__name__)

Reader = Callable[[SparkSession], DataFrame]
Writer = Callable[[DataFrame], int]


@dataclass(frozen=True)
class LoadSummary:
    source: str
    destination: str
    rows_written: int
    started_at: datetime
    finished_at: datetime

    @property
    def duration_s(self) -> float:
        return (self.finished_at - self.started_at).total_seconds()


@dataclass(frozen=True)
class PostDumpPipeline:
    read: Reader
    write: Writer
    decode: Decoder = decode_post_result
    source_name: str = "source"
    destination_name: str = "destination"

    def run(self, spark: SparkSession) -> LoadSummary:
        started_at = utc_now()
        log.info("Post dump started: %s → %s", self.source_name, self.destination_name)

        rows_df = self.read(spark)
        results = decode_rows(rows_df, self.decode).cache()
        try:
            try:
                failure = first_failure(results)
            except Py4JJavaError as exc:
                raise ConnectivityError(
                    f"source scan or decode stage failed for {self.source_name}: {exc}"
                ) from exc

            if failure is not None:
                log.error("Aborting post dump, row could not be decoded: %s", failure.error)
                raise failure.error

            rows_written = self.write(to_records_frame(spark, results))
        finally:
            results.unpersist()

        summary = LoadSummary(
            source=self.source_name,
            destination=self.destination_name,
            rows_written=rows_written,
            started_at=started_at,
            finished_at=utc_now(),
        )
        log.info(
            "Post dump finished: %d rows written to %s in %.1fs",
            summary.rows_written, summary.destination, summary.duration_s,
        )
        return summary


def build_pipeline(config: PostDumpConfig) -> PostDumpPipeline:
    """Wire the Bigtable reader and the configured sink into a pipeline."""
    destination = config.destination
    if isinstance(destination, BigQueryDestination):
        write = partial(write_posts_to_bigquery, destination=destination)
    else:
        write = partial(write_posts_to_catalog, destination=destination)

    return PostDumpPipeline(
        read=partial(read_post_rows, source=config.source),
        write=write,
        source_name=config.source.display_name,
        destination_name=destination.table_spec,
    )
