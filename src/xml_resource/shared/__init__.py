"""Shared utilities for XML resource editing.

This module provides the configuration objects, result and error types, and
logging helpers used by the buffer, cursor and editing layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    EditConfig,
    IOConfig,
    ResourceConfig,
)
from .errors import IOErrorKind, ResourceIOError
from .logging import CorrelationLogger, get_logger
from .result import DiagnosticEntry, DiagnosticSeverity, IOResult

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "EditConfig",
    "IOConfig",
    "ResourceConfig",
    "IOErrorKind",
    "ResourceIOError",
    "CorrelationLogger",
    "get_logger",
    "DiagnosticEntry",
    "DiagnosticSeverity",
    "IOResult",
]
