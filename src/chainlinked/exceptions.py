"""Centralized exception classes for the carousel engine.

The analysis, prompt and build functions never raise for well-typed input;
they report problems through sentinel values. These exceptions are used by
the generation orchestrator and the CLI, which sit on the caller side.
"""


class ChainLinkedError(Exception):
    """Base exception for all carousel engine errors."""

    def __init__(self, message: str, details: str | None = None):
        """Initialize the exception.

        Args:
            message: User-friendly error message.
            details: Additional technical details for debugging.
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class ConfigurationError(ChainLinkedError):
    """Raised when configuration is missing or invalid."""

    pass


class TemplateLoadError(ChainLinkedError, ValueError):
    """Raised when a template or content file cannot be loaded."""

    pass


class GenerationError(ChainLinkedError):
    """Base class for carousel generation failures."""

    pass


class NothingToGenerateError(GenerationError):
    """Raised when a template has no fillable slots."""

    pass


class ResponseParseError(GenerationError):
    """Raised when the model response contains no usable JSON object."""

    def __init__(self, message: str, details: str | None = None, attempts: int = 0):
        super().__init__(message, details)
        self.attempts = attempts
