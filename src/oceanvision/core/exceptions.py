"""
Custom Exception Classes for the Species Catalog

These exceptions are raised and handled inside the catalog core. Callers of
the store never see them: a failing upstream source contributes no records
and a failing refresh falls back to the last good collection.
"""

from typing import Optional


class OceanVisionError(Exception):
    """Base class for all oceanvision errors."""

    def __init__(self, message: str = "An oceanvision error occurred.") -> None:
        super().__init__(message)
        self.message = message


class SourceFetchError(OceanVisionError):
    """
    Exception raised when a single upstream source cannot be read.

    Covers network failures, non-2xx responses and payloads that do not
    match the source's expected envelope.

    Attributes:
        source (str): Name of the upstream source
        cause (Exception): The underlying exception, if any
    """

    def __init__(self, source: str, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source
        self.cause = cause


class AggregationError(OceanVisionError):
    """Exception raised when a whole multi-source refresh produces nothing usable."""

    def __init__(self, message: str = "Species aggregation failed.") -> None:
        super().__init__(message)
