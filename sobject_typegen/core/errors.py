"""Exceptions raised by sobject-typegen.

Schema irregularities never raise; only infrastructure failures
(config parsing, describe calls) and caller mistakes do.
"""

from typing import Any


class TypegenError(Exception):
    """Base class for all sobject-typegen errors."""


class GenerationModeError(TypegenError):
    """Raised when neither or both of single/batch mode were requested."""


class ConfigError(TypegenError):
    """Exception raised when the batch config document cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.message = message
        self.path = path
        super().__init__(message)


class DescribeError(TypegenError):
    """Exception raised when an sObject describe call fails."""

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        status_code: int | None = None,
    ):
        self.message = message
        self.errors = errors or []
        self.status_code = status_code
        super().__init__(message)
