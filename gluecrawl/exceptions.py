"""Custom exceptions for gluecrawl."""


class ConfigurationError(Exception):
    """Raised when a required input is missing or cannot be parsed."""

    def __init__(self, input_name: str, reason: str = "is required"):
        self.input_name = input_name
        self.reason = reason
        super().__init__(f"Input '{input_name}' {reason}")


def remote_message(original: Exception) -> str:
    """Return the service's own error message, without botocore's "An error occurred" prefix."""
    response = getattr(original, "response", None) or {}
    message = (response.get("Error") or {}).get("Message")
    return message if message else str(original)


class GlueServiceError(Exception):
    """Raised when the Glue service rejects a call.

    The message is the remote error text, unmodified.
    """

    def __init__(self, operation: str, original: Exception):
        self.operation = operation
        self.original = original
        super().__init__(remote_message(original))


class CrawlerTimeoutError(Exception):
    """Raised when a crawler does not return to READY within the configured bound."""

    def __init__(self, crawler_name: str, timeout_minutes: int):
        self.crawler_name = crawler_name
        self.timeout_minutes = timeout_minutes
        super().__init__(f"Crawler did not complete within {timeout_minutes} minutes")
