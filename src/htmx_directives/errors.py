"""
Error types for htmx-directives.
"""


class HtmxError(Exception):
    """Base exception for all htmx-directives errors."""

    def __init__(self, message: str, header: str | None = None):
        self.message = message
        self.header = header
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Prefix the message with the header it concerns, if known."""
        if self.header:
            return f"{self.header}: {self.message}"
        return self.message


class HeaderSerializationError(HtmxError):
    """
    Raised when a header value cannot be encoded.

    Examples:
    - Trigger detail that is not JSON serializable
    - HX-Location context values that are not JSON serializable
    """

    pass
