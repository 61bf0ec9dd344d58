"""
transforms/post_decoder.py
Around Post Dump — Decode one Bigtable post row into a typed record.

Pure functions — no Spark, no config, no side effects. Safe to run on any
number of rows in parallel, and testable with hand-built SourceRow values.

Field rules:
  postId         row key, UTF-8 (malformed bytes become U+FFFD, never fails)
  user, message  post:user / post:message, UTF-8; absent cell -> ""
  lat, lon       location:lat / location:lon, UTF-8 decimal text -> float;
                 no location family -> MissingLocationError,
                 missing cell -> DecodeError, bad text -> FormatError
"""

import math
import re
from dataclasses import astuple, dataclass
from typing import Optional

from src.batch.source_rows import SourceRow
from src.common.errors import DecodeError, FormatError, MissingLocationError

POST_FAMILY     = "post"
LOCATION_FAMILY = "location"

# Plain ASCII decimal literal, optional exponent. Rejects whitespace, NaN,
# Infinity, hex, digit separators and non-ASCII digits that float() would accept.
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class PostRecord:
    postId: str
    user: str
    message: str
    lat: float
    lon: float

    def as_tuple(self) -> tuple:
        """Field values in POST_DUMP_SCHEMA order."""
        return astuple(self)


@dataclass(frozen=True)
class DecodeResult:
    """Either a decoded record or the error that stopped the row, never both."""

    record: Optional[PostRecord] = None
    error: Optional[DecodeError] = None

    def __post_init__(self) -> None:
        if (self.record is None) == (self.error is None):
            raise ValueError("DecodeResult needs exactly one of record or error")

    @classmethod
    def success(cls, record: PostRecord) -> "DecodeResult":
        return cls(record=record)

    @classmethod
    def failure(cls, error: DecodeError) -> "DecodeResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> PostRecord:
        if self.error is not None:
            raise self.error
        return self.record


def _text(raw: Optional[bytes]) -> str:
    if raw is None:
        return ""
    return raw.decode("utf-8", errors="replace")


def parse_coordinate(text: str, row_key: str, column: str) -> float:
    """Strictly parse a coordinate cell's text as a 64-bit float."""
    if not _DECIMAL.fullmatch(text):
        raise FormatError(
            f"{column} is not a decimal number: {text!r}",
            row_key=row_key, column=column, value=text,
        )
    value = float(text)
    if math.isinf(value):
        raise FormatError(
            f"{column} overflows a 64-bit float: {text!r}",
            row_key=row_key, column=column, value=text,
        )
    return value


def _coordinate(row: SourceRow, row_key: str, qualifier: str) -> float:
    column = f"{LOCATION_FAMILY}:{qualifier}"
    raw = row.value(LOCATION_FAMILY, qualifier)
    if raw is None:
        raise DecodeError(f"missing {column}", row_key=row_key)
    return parse_coordinate(_text(raw), row_key, column)


def decode_post(row: SourceRow) -> PostRecord:
    """Map one SourceRow to exactly one PostRecord, or raise a DecodeError."""
    post_id = _text(row.row_key)

    if not row.has_family(LOCATION_FAMILY):
        raise MissingLocationError(
            f"row has no {LOCATION_FAMILY} column family", row_key=post_id
        )

    return PostRecord(
        postId=post_id,
        user=_text(row.value(POST_FAMILY, "user")),
        message=_text(row.value(POST_FAMILY, "message")),
        lat=_coordinate(row, post_id, "lat"),
        lon=_coordinate(row, post_id, "lon"),
    )


def decode_post_result(row: SourceRow) -> DecodeResult:
    """decode_post with the failure returned as a value instead of raised."""
    try:
        return DecodeResult.success(decode_post(row))
    except DecodeError as exc:
        return DecodeResult.failure(exc)
