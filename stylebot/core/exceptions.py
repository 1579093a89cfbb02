"""Custom exceptions for the application."""


class StylebotError(Exception):
    """Base exception for all Stylebot errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidPayloadError(StylebotError):
    """Webhook payload does not describe a pull request event."""

    def __init__(self, message: str = "Invalid pull request payload", details: dict | None = None) -> None:
        super().__init__(message, details)
