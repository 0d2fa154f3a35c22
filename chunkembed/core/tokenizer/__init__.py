"""
Tokenizer module for token counting and token-window splitting.

Provides accurate tokenization using tiktoken with fast approximation fallback.
TokenSplitter plugs into ChunkingEmbeddingFunction as its splitter.
"""

from chunkembed.config import TokenizerConfig
from chunkembed.core.tokenizer.tokenizer import Tokenizer, TokenSplitter

__all__ = ["Tokenizer", "TokenizerConfig", "TokenSplitter"]
