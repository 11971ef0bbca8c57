"""
Base class and utilities for all services.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    Outcome of a service operation.

    The CLI prints ``message`` and ``warnings`` on success and exits with
    ``error`` on failure.
    """

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def ok(
        cls, data: T = None, message: str = None, warnings: List[str] = None
    ) -> "ServiceResult[T]":
        return cls(success=True, data=data, message=message, warnings=warnings or [])

    @classmethod
    def fail(cls, error: str) -> "ServiceResult[T]":
        return cls(success=False, error=error)


class BaseService:
    """Base class for catalog services."""

    def _validate_output_path(self, path: str, allow_overwrite: bool = True) -> Optional[str]:
        """
        Check an output path and create its parent directories.

        Returns:
            None if the path can be written, otherwise an error message
        """
        p = Path(path)

        if not allow_overwrite and p.exists():
            return f"Output path already exists: {path}"

        p.parent.mkdir(parents=True, exist_ok=True)
        return None
