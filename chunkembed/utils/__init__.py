"""Utility modules for chunkembed."""

from chunkembed.utils.exceptions import (
    ChunkEmbedError,
    ConfigurationError,
    ConfigValidationError,
    EmbeddingError,
    EmbeddingServiceError,
    ImmutableFieldError,
    InvalidFieldError,
    MissingFieldError,
    ValidationError,
)
from chunkembed.utils.logger import configure_logging, get_logger, setup_logging

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "setup_logging",
    # Exceptions
    "ChunkEmbedError",
    "ValidationError",
    "ConfigValidationError",
    "MissingFieldError",
    "InvalidFieldError",
    "ImmutableFieldError",
    "ConfigurationError",
    "EmbeddingError",
    "EmbeddingServiceError",
]
