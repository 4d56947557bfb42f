"""
Custom Exceptions for Graphics Extraction.

Exception Hierarchy:
    GraphicsExtractionError (base)
    ├── RelaxedJSONError
    └── LogSourceError
        └── LogSourceNotFoundError

RelaxedJSONError is raised by the relaxed parser and caught per span by the
extractor; it never escapes get_graphics_objects_from_log_string().
LogSourceError covers reading logs from disk (service and CLI only).

Usage:
    from graphics_extractor.exceptions import RelaxedJSONError

    try:
        value = parse_relaxed("{x: 1,, y: 2}")
    except RelaxedJSONError as e:
        print(f"Parse failed at offset {e.position}: {e.message}")
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# BASE EXCEPTION
# =============================================================================


class GraphicsExtractionError(Exception):
    """
    Base exception for all graphics extraction errors.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "A graphics extraction error occurred",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


# =============================================================================
# PARSER ERRORS
# =============================================================================


class RelaxedJSONError(GraphicsExtractionError):
    """
    Raised when a span cannot be parsed as relaxed JSON.

    Attributes:
        position: Offset into the parsed text where the problem was detected
        snippet: A short excerpt of the text around that offset
    """

    def __init__(
        self,
        message: str,
        position: int,
        text: Optional[str] = None,
    ):
        self.position = position
        self.snippet = None
        if text is not None:
            self.snippet = text[max(0, position - 20):position + 20]
        super().__init__(f"{message} at offset {position}", details=self.snippet)


# =============================================================================
# LOG SOURCE ERRORS
# =============================================================================


class LogSourceError(GraphicsExtractionError):
    """Base class for errors reading log input."""

    def __init__(
        self,
        message: str = "Log source error",
        path: Optional[str] = None,
        details: Optional[str] = None,
    ):
        self.path = path
        if path:
            message = f"{message} [{path}]"
        super().__init__(message, details)


class LogSourceNotFoundError(LogSourceError):
    """
    Raised when a log file cannot be found.

    Attributes:
        path: Path to the missing file
    """

    def __init__(self, path: str):
        super().__init__(
            message=f"Log file not found: {path}",
            path=path,
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def format_error_chain(error: Exception) -> str:
    """
    Format an exception and its chain for logging.

    Returns a multi-line string showing the error hierarchy.
    """
    lines = []
    current = error
    depth = 0

    while current is not None:
        prefix = "  " * depth + ("└─ " if depth > 0 else "")
        lines.append(f"{prefix}{type(current).__name__}: {current}")

        if current.__cause__:
            current = current.__cause__
            depth += 1
        else:
            break

    return "\n".join(lines)
