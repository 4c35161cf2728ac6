"""Result objects and diagnostic types for XML resource I/O.

Loading and saving return an ``IOResult`` instead of raising, so every call
site decides explicitly what a storage failure means for its run.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import IOErrorKind, ResourceIOError


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostic entries."""

    INFO = auto()   # Successful transfer details
    ERROR = auto()  # Load or save failure


@dataclass
class DiagnosticEntry:
    """Single diagnostic entry with context information."""

    severity: DiagnosticSeverity
    message: str
    component: str
    details: Optional[Dict[str, Any]] = None
    timestamp: float = field(default_factory=time.time)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate diagnostic entry."""
        if not self.message:
            raise ValueError("Diagnostic message cannot be empty")
        if not self.component:
            raise ValueError("Diagnostic component cannot be empty")


@dataclass
class IOResult:
    """Outcome of a single load or save.

    Attributes:
        operation: ``"load"`` or ``"save"``
        path: Storage location the operation targeted
        success: Whether the whole buffer was transferred
        error_kind: Failure reason, ``None`` on success
        message: Human readable summary
        characters: Number of characters transferred (0 on failure)
        processing_time_ms: Wall time spent in the operation
        diagnostics: Diagnostic entries collected along the way
        correlation_id: Session correlation id, if any
    """

    operation: str
    path: str
    success: bool = True
    error_kind: Optional[IOErrorKind] = None
    message: str = ""
    characters: int = 0
    processing_time_ms: float = 0.0
    diagnostics: List[DiagnosticEntry] = field(default_factory=list)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate that success and error kind agree."""
        if self.operation not in ("load", "save"):
            raise ValueError(f"operation must be 'load' or 'save', got {self.operation!r}")
        if self.success and self.error_kind is not None:
            raise ValueError("Successful result cannot carry an error kind")
        if not self.success and self.error_kind is None:
            raise ValueError("Failed result requires an error kind")
        if self.characters < 0:
            raise ValueError("characters must be >= 0")

    @classmethod
    def ok(
        cls,
        operation: str,
        path: Union[str, Path],
        characters: int,
        processing_time_ms: float = 0.0,
        correlation_id: Optional[str] = None,
    ) -> "IOResult":
        """Create a successful result."""
        verb = "Loaded" if operation == "load" else "Saved"
        return cls(
            operation=operation,
            path=str(path),
            message=f"{verb} {characters} characters",
            characters=characters,
            processing_time_ms=processing_time_ms,
            correlation_id=correlation_id,
        )

    @classmethod
    def failure(
        cls,
        operation: str,
        path: Union[str, Path],
        kind: IOErrorKind,
        message: str,
        processing_time_ms: float = 0.0,
        correlation_id: Optional[str] = None,
    ) -> "IOResult":
        """Create a failed result with a matching ERROR diagnostic."""
        result = cls(
            operation=operation,
            path=str(path),
            success=False,
            error_kind=kind,
            message=message,
            processing_time_ms=processing_time_ms,
            correlation_id=correlation_id,
        )
        result.add_diagnostic(
            DiagnosticSeverity.ERROR,
            message,
            "buffer",
            details={"path": str(path), "error_kind": kind.name},
        )
        return result

    def __bool__(self) -> bool:
        return self.success

    def add_diagnostic(
        self,
        severity: DiagnosticSeverity,
        message: str,
        component: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Append a diagnostic entry stamped with this result's correlation id."""
        self.diagnostics.append(
            DiagnosticEntry(
                severity=severity,
                message=message,
                component=component,
                details=details,
                correlation_id=self.correlation_id,
            )
        )

    def raise_for_error(self) -> "IOResult":
        """Raise ``ResourceIOError`` if the operation failed, else return self."""
        if not self.success:
            # error_kind is guaranteed by __post_init__
            raise ResourceIOError(self.error_kind, self.path, self.message)  # type: ignore[arg-type]
        return self
