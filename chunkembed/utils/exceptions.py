"""
Custom exception hierarchy for chunkembed.

Provides structured error types for better error handling and debugging.
All exceptions inherit from ChunkEmbedError for easy catching.
"""


class ChunkEmbedError(Exception):
    """
    Base exception for all chunkembed errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize chunkembed error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ValidationError(ChunkEmbedError):
    """
    Validation errors.
    Raised when input validation fails or data is invalid.
    """

    pass


class ConfigValidationError(ValidationError):
    """
    Field-level configuration validation error.
    Carries the name of the offending field.
    """

    def __init__(self, field: str, message: str, context: dict | None = None):
        super().__init__(message, {"field": field, **(context or {})})
        self.field = field


class MissingFieldError(ConfigValidationError):
    """A required configuration field is absent."""

    def __init__(self, field: str, context: dict | None = None):
        super().__init__(field, f"{field} is required", context)


class InvalidFieldError(ConfigValidationError):
    """A configuration field is present but fails its type or range check."""

    def __init__(self, field: str, context: dict | None = None):
        super().__init__(field, f"{field} is invalid", context)


class ImmutableFieldError(ConfigValidationError):
    """An update tried to change a field that is fixed after creation."""

    def __init__(self, field: str, context: dict | None = None):
        super().__init__(field, f"Updating {field} is not allowed", context)


class ConfigurationError(ChunkEmbedError):
    """
    Configuration errors.
    Raised when an embedding function is used before it has been configured.
    """

    pass


class EmbeddingError(ChunkEmbedError):
    """
    Embedding generation errors.
    Raised when embedding generation fails.
    """

    pass


class EmbeddingServiceError(EmbeddingError):
    """
    Remote embedding service errors.
    Raised when the service answers a batch with a non-success HTTP status.
    """

    def __init__(self, status_code: int, reason: str, context: dict | None = None):
        super().__init__(
            f"Embedding request failed: {status_code} {reason}",
            {"status_code": status_code, "reason": reason, **(context or {})},
        )
        self.status_code = status_code
        self.reason = reason
