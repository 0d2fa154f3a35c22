"""
Data models for chunkembed.

Core models:
- EmbeddingFunctionConfig: Validated configuration snapshot
- Splitter: Signature of chunk splitting functions
"""

from chunkembed.models.embedding_config import (
    PERSISTED_FIELDS,
    EmbeddingFunctionConfig,
    Splitter,
)

__all__ = [
    "EmbeddingFunctionConfig",
    "PERSISTED_FIELDS",
    "Splitter",
]
