"""
Token utilities and token-window splitting.

Uses tiktoken for accurate OpenAI-compatible tokenization with a
character-based approximation as fallback.
"""

import tiktoken

from chunkembed.config import TokenizerConfig
from chunkembed.utils.exceptions import ValidationError


class Tokenizer:
    """
    Token-window splitter.

    Usage:
        tokenizer = Tokenizer()
        chunks = tokenizer.split("Long text...", chunk_tokens=256, chunk_overlap=32)
    """

    def __init__(self, config: TokenizerConfig | None = None):
        """
        Initialize tokenizer with configuration.

        Args:
            config: Optional tokenizer configuration. Uses defaults if not provided.
        """
        self.config = config or TokenizerConfig()
        self._encoder: tiktoken.Encoding | None = None

    @property
    def encoder(self) -> tiktoken.Encoding:
        """
        Lazy-load tiktoken encoder.

        Returns:
            Tiktoken encoding instance
        """
        if self._encoder is None:
            self._encoder = tiktoken.get_encoding(self.config.model)
        return self._encoder

    @property
    def is_approximate(self) -> bool:
        return self.config.provider == "approximate"

    def tokenize(self, text: str) -> list[int]:
        """
        Get token IDs for text.

        Args:
            text: Text to tokenize

        Returns:
            List of token IDs
        """
        if not text:
            return []
        return self.encoder.encode(text)

    def detokenize(self, tokens: list[int]) -> str:
        """
        Convert token IDs back to text.

        Args:
            tokens: List of token IDs

        Returns:
            Decoded text
        """
        if not tokens:
            return ""
        return self.encoder.decode(tokens)

    def split(self, text: str, chunk_tokens: int, chunk_overlap: int = 0) -> list[str]:
        """
        Split text into windows of at most chunk_tokens tokens.

        Consecutive windows share chunk_overlap tokens. The approximate
        provider works on characters, scaled by chars_per_token.

        Args:
            text: Text to split
            chunk_tokens: Maximum tokens per chunk
            chunk_overlap: Tokens shared by adjacent chunks

        Returns:
            Chunks in text order (empty for empty text)

        Raises:
            ValidationError: If the window settings are inconsistent
        """
        _check_window(chunk_tokens, chunk_overlap)
        if not text:
            return []

        if self.is_approximate:
            size = max(1, int(chunk_tokens * self.config.chars_per_token))
            overlap = min(size - 1, int(chunk_overlap * self.config.chars_per_token))
            return [text[start : start + size] for start in _window_starts(len(text), size, overlap)]

        tokens = self.tokenize(text)
        return [
            self.detokenize(tokens[start : start + chunk_tokens])
            for start in _window_starts(len(tokens), chunk_tokens, chunk_overlap)
        ]


class TokenSplitter:
    """
    Splitter callable for ChunkingEmbeddingFunction.

    Wraps Tokenizer.split with fixed window settings so it can be stored
    as an embedding function's splitter.
    """

    def __init__(
        self,
        chunk_tokens: int = 512,
        chunk_overlap: int = 0,
        tokenizer: Tokenizer | None = None,
    ):
        _check_window(chunk_tokens, chunk_overlap)
        self.chunk_tokens = chunk_tokens
        self.chunk_overlap = chunk_overlap
        self.tokenizer = tokenizer or Tokenizer()

    def __call__(self, text: str) -> list[str]:
        return self.tokenizer.split(text, self.chunk_tokens, self.chunk_overlap)

    def __repr__(self) -> str:
        return (
            f"TokenSplitter(chunk_tokens={self.chunk_tokens}, "
            f"chunk_overlap={self.chunk_overlap})"
        )


def _check_window(chunk_tokens: int, chunk_overlap: int) -> None:
    if chunk_tokens <= 0:
        raise ValidationError("chunk_tokens must be positive", {"chunk_tokens": chunk_tokens})
    if chunk_overlap < 0 or chunk_overlap >= chunk_tokens:
        raise ValidationError(
            "chunk_overlap must be non-negative and smaller than chunk_tokens",
            {"chunk_tokens": chunk_tokens, "chunk_overlap": chunk_overlap},
        )


def _window_starts(length: int, size: int, overlap: int) -> range:
    step = size - overlap
    # Stop once a window reaches the end so the tail is not repeated
    last = max(length - overlap, 1)
    return range(0, last, step)
