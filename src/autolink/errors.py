"""Exception classes for autolink.

Provides standardized exceptions for error handling throughout autolink.
"""

from __future__ import annotations


class AutolinkError(Exception):
    """Base exception for all autolink errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidInputError(AutolinkError, TypeError):
    """Caller passed something autolink cannot work with.

    Raised for non-string input text and for malformed options. Also a
    TypeError, so callers guarding against bad arguments generically still
    catch it.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize invalid input error.

        Args:
            message: Error description
            field: Name of the offending argument or option (optional)
        """
        self.message = message
        self.field = field

        prefix = f"{field}: " if field else ""
        super().__init__(f"{prefix}{message}")


class RenderError(AutolinkError):
    """Error while rendering a link.

    Raised when a render callback returns something that is neither
    a string nor None.
    """

    def __init__(self, url: str, message: str) -> None:
        """Initialize render error.

        Args:
            url: URL being rendered when the error occurred
            message: Description of the error
        """
        self.url = url
        super().__init__(f"Cannot render {url!r}: {message}")
