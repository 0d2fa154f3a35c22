"""
chunkembed: chunking text-embedding function for vector-database clients.

Splits texts with a pluggable splitter, embeds the chunks in batches through
an OpenAI-compatible HTTP endpoint, and validates its configuration with
field-level errors.
"""

from chunkembed.core.embeddings import ChunkingEmbeddingFunction, EmbeddingFunction
from chunkembed.core.factory import EmbedderFactory

__version__ = "0.1.0"

__all__ = [
    "ChunkingEmbeddingFunction",
    "EmbeddingFunction",
    "EmbedderFactory",
]
