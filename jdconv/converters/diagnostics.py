"""
Conversion diagnostics.

Every lossy or corrected decision made while converting a record is
recorded as a Diagnostic. Diagnostics never interrupt a conversion; they
are collected in order and returned next to the converted record.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Iterator, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Severity(Enum):
    """Diagnostic categories."""

    LOSSY = "lossy"  # value approximated or dropped
    OUT_OF_RANGE = "out_of_range"  # invalid index replaced by a safe default
    INFO = "info"


@dataclass(frozen=True)
class Diagnostic:
    """
    A single conversion diagnostic.

    Attributes:
        severity: Diagnostic category
        context: Where the decision was made ("patch", "tone A", "key 12", ...)
        parameter: Name of the source parameter involved
        message: Human readable description
        value: Offending source value, if any
    """

    severity: Severity
    context: str
    parameter: str
    message: str
    value: Optional[int] = None

    def __str__(self) -> str:
        text = f"{self.context}: {self.message}"
        if self.value is not None:
            text += f" ({self.parameter} = {self.value})"
        return text


class DiagnosticLog:
    """Ordered diagnostic collector used by the converters."""

    def __init__(self) -> None:
        self.diagnostics: List[Diagnostic] = []

    def add(
        self,
        severity: Severity,
        context: str,
        parameter: str,
        message: str,
        value: Optional[int] = None,
    ) -> Diagnostic:
        diagnostic = Diagnostic(severity, context, parameter, message, value)
        self.diagnostics.append(diagnostic)
        logger.debug("%s: %s", severity.value, diagnostic)
        return diagnostic

    def lossy(
        self, context: str, parameter: str, message: str, value: Optional[int] = None
    ) -> Diagnostic:
        return self.add(Severity.LOSSY, context, parameter, message, value)

    def out_of_range(
        self, context: str, parameter: str, message: str, value: Optional[int] = None
    ) -> Diagnostic:
        return self.add(Severity.OUT_OF_RANGE, context, parameter, message, value)

    def info(self, context: str, parameter: str, message: str) -> Diagnostic:
        return self.add(Severity.INFO, context, parameter, message)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)


@dataclass
class ConversionResult(Generic[T]):
    """A converted record and the diagnostics produced while converting it."""

    target: T
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def is_lossless(self) -> bool:
        """True if nothing had to be approximated or corrected."""
        return not any(d.severity != Severity.INFO for d in self.diagnostics)

    def by_severity(self, severity: Severity) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == severity]
