"""Parse diagnostics.

The parser reports malformed markup as a stream of Diagnostic values
instead of raising. Surfacing them (printing, failing a build) is the
caller's decision.

Thread Safety:
Diagnostic is frozen and safe to share across threads.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from markfmt.errors import ParseError
from markfmt.location import SourceLocation


class Severity(StrEnum):
    """How bad a diagnostic is. Neither level stops the parse."""

    WARNING = "warning"
    ERROR = "error"

    @property
    def log_level(self) -> int:
        """Matching standard library logging level."""
        return logging.ERROR if self is Severity.ERROR else logging.WARNING


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A non-fatal problem found while parsing.

    Attributes:
        severity: WARNING or ERROR
        message: Human-readable description
        location: Where the problem was detected
        related: Secondary position, e.g. where an unclosed tag was opened

    """

    severity: Severity
    message: str
    location: SourceLocation
    related: SourceLocation | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        return f"{self.location}: {self.severity}: {self.message}"

    def to_exception(self) -> ParseError:
        """Build the ParseError a strict caller would raise for this diagnostic."""
        return ParseError(
            self.message,
            lineno=self.location.lineno,
            col_offset=self.location.col_offset,
            source_file=self.location.source_file,
        )
