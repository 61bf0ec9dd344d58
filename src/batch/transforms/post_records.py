"""
transforms/post_records.py
Around Post Dump — Apply the post decoder to a whole source DataFrame.

decode_rows maps every connector row through SourceRow.from_spark_row and
the decoder. The caller caches the result, checks first_failure, and only
then builds the typed DataFrame with to_records_frame.
"""

from typing import Callable, Optional

from pyspark import RDD
from pyspark.sql import DataFrame, SparkSession

from src.batch.schemas import POST_DUMP_SCHEMA
from src.batch.source_rows import SourceRow
from src.batch.transforms.post_decoder import DecodeResult, decode_post_result

Decoder = Callable[[SourceRow], DecodeResult]


def _is_failure(result: DecodeResult) -> bool:
    return not result.ok


def _record_tuple(result: DecodeResult) -> tuple:
    return result.unwrap().as_tuple()


def decode_rows(rows_df: DataFrame, decode: Decoder = decode_post_result) -> RDD:
    """One DecodeResult per source row. Lazy; nothing runs until an action."""
    return rows_df.rdd.map(SourceRow.from_spark_row).map(decode)


def first_failure(results: RDD) -> Optional[DecodeResult]:
    """Return one failed DecodeResult if any row failed to decode, else None."""
    failures = results.filter(_is_failure).take(1)
    return failures[0] if failures else None


def to_records_frame(spark: SparkSession, results: RDD) -> DataFrame:
    """Typed output DataFrame in POST_DUMP_SCHEMA column order."""
    return spark.createDataFrame(results.map(_record_tuple), schema=POST_DUMP_SCHEMA)
