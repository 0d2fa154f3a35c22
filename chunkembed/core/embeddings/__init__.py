"""
Embedding function abstraction layer.

Supported implementations:
- ChunkingEmbeddingFunction (OpenAI-compatible HTTP endpoint, pluggable splitter)
"""
from chunkembed.core.embeddings.base import EmbeddingFunction
from chunkembed.core.embeddings.chunking import ChunkingEmbeddingFunction
from chunkembed.core.embeddings.validation import validate_config, validate_config_update

__all__ = [
    "EmbeddingFunction",
    "ChunkingEmbeddingFunction",
    "validate_config",
    "validate_config_update",
]
