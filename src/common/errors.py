"""
common/errors.py
Around Post Dump — Exception hierarchy.

Each stage raises a specific error type so that a failed run names the
stage (configuration, source, decoding, sink) that broke it.
"""

from typing import Optional


class PostDumpError(Exception):
    """Base exception for all post dump failures."""


class ConfigError(PostDumpError):
    """Raised for invalid runtime configuration."""


class ConnectivityError(PostDumpError):
    """Raised when the source or destination store is unreachable or unauthorized."""


class DecodeError(PostDumpError):
    """Raised when a source row is missing a column the output record requires."""

    def __init__(self, message: str, row_key: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.row_key = row_key

    def __reduce__(self):
        # Decode errors travel back from Spark executors, keep row_key when pickled.
        return (self.__class__, (self.message, self.row_key))

    def __str__(self) -> str:
        if self.row_key is None:
            return self.message
        return f"{self.message} (row key {self.row_key!r})"


class MissingLocationError(DecodeError):
    """Raised when a row has no location column family at all."""


class FormatError(DecodeError):
    """Raised when a coordinate cell holds text that is not a decimal number."""

    def __init__(
        self,
        message: str,
        row_key: Optional[str] = None,
        column: Optional[str] = None,
        value: Optional[str] = None,
    ):
        super().__init__(message, row_key)
        self.column = column
        self.value = value

    def __reduce__(self):
        return (self.__class__, (self.message, self.row_key, self.column, self.value))


class SinkError(PostDumpError):
    """Raised when the destination table cannot be written as requested."""


class SchemaMismatchError(SinkError):
    """Raised when an existing destination table does not match the output schema."""
