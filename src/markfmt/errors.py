"""Exception classes for markfmt.

The parser itself never raises for malformed markup; problems are reported
as diagnostics. These exceptions cover the cases where a caller asks for
a hard failure, invalid configuration, and misuse of the renderer.
"""

from __future__ import annotations


class MarkfmtError(Exception):
    """Base exception for all markfmt errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(MarkfmtError):
    """Malformed markup, raised on request.

    Raised by ``ParseResult.raise_for_errors()`` and ``format(..., strict=True)``
    when the parse produced at least one error-severity diagnostic.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class ConfigError(MarkfmtError):
    """Invalid formatting configuration.

    Raised when a FormatConfig is constructed with values the
    formatter cannot use (e.g. a non-string indent).
    """

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending option (e.g., "indent")
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")


class RenderError(MarkfmtError):
    """Error during formatting.

    Raised when the renderer encounters an object that is not a node.
    """

    pass
