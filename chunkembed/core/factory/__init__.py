"""
Factory modules for creating chunkembed components.
"""

from chunkembed.core.factory.embedder_factory import EmbedderFactory

__all__ = [
    "EmbedderFactory",
]
