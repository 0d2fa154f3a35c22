"""
Factory for creating embedding functions.
"""

import httpx

from chunkembed.config import Config, EmbedderConfig, TokenizerConfig
from chunkembed.core.embeddings.chunking import ChunkingEmbeddingFunction
from chunkembed.core.tokenizer import Tokenizer, TokenSplitter
from chunkembed.models.embedding_config import Splitter
from chunkembed.utils.logger import configure_logging


class EmbedderFactory:
    """Factory for creating embedding functions from configuration."""

    @staticmethod
    def create(
        config: EmbedderConfig,
        splitter: Splitter | None = None,
        http_client: httpx.AsyncClient | None = None,
        tokenizer_config: TokenizerConfig | None = None,
    ) -> ChunkingEmbeddingFunction:
        """
        Create embedding function from configuration.

        Args:
            config: Embedder configuration
            splitter: Optional splitter; overrides the configured chunk strategy
            http_client: Optional shared HTTP client
            tokenizer_config: Tokenizer settings for the "token" strategy

        Returns:
            Configured ChunkingEmbeddingFunction

        Raises:
            ValueError: If chunk strategy is not supported
            ValidationError: If the resulting configuration is invalid
        """
        raw = config.to_function_config()
        raw["splitter"] = splitter or EmbedderFactory.create_splitter(config, tokenizer_config)

        return ChunkingEmbeddingFunction(raw, http_client=http_client, timeout=config.timeout)

    @staticmethod
    def from_config(
        config: Config,
        splitter: Splitter | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> ChunkingEmbeddingFunction:
        """
        Configure logging and create embedding function from the full config.

        Args:
            config: Application configuration
            splitter: Optional splitter; overrides the configured chunk strategy
            http_client: Optional shared HTTP client

        Returns:
            Configured ChunkingEmbeddingFunction
        """
        configure_logging(config.logging)
        return EmbedderFactory.create(
            config.embedder,
            splitter=splitter,
            http_client=http_client,
            tokenizer_config=config.tokenizer,
        )

    @staticmethod
    def create_splitter(
        config: EmbedderConfig, tokenizer_config: TokenizerConfig | None = None
    ) -> Splitter | None:
        """
        Create the splitter for the configured chunk strategy.

        Args:
            config: Embedder configuration
            tokenizer_config: Tokenizer settings for the "token" strategy

        Returns:
            Splitter, or None when texts are embedded whole

        Raises:
            ValueError: If chunk strategy is not supported
        """
        strategy = config.chunk_strategy
        if strategy is None or strategy == "none":
            return None
        elif strategy == "token":
            return TokenSplitter(
                chunk_tokens=config.chunk_tokens,
                chunk_overlap=config.chunk_overlap or 0,
                tokenizer=Tokenizer(tokenizer_config),
            )
        else:
            raise ValueError(f"Unsupported chunk strategy: {strategy}")
