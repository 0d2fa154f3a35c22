"""
Abstract base class for embedding functions.
Describes the capability contract a vector-database client expects.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class EmbeddingFunction(ABC):
    """
    Abstract base for embedding functions plugged into a vector-database client.

    Responsibilities:
    - Build a configured instance from persisted configuration
    - Expose the persisted configuration
    - Validate full and partial configurations
    - Generate vector embeddings for documents and queries
    """

    name: str = "embedding-function"

    @abstractmethod
    def build_from_config(
        self, config: Mapping[str, Any], client: Any | None = None
    ) -> "EmbeddingFunction":
        """
        Build a new, independently configured instance.

        Args:
            config: Raw persisted configuration
            client: Optional host client handle

        Returns:
            New embedding function instance

        Raises:
            ValidationError: If config is invalid
        """
        pass

    @abstractmethod
    def get_config(self) -> dict[str, Any]:
        """
        Get the persisted configuration.

        Returns:
            Plain-data configuration suitable for storage
        """
        pass

    @abstractmethod
    def validate_config(self, config: Mapping[str, Any]) -> None:
        """
        Validate a configuration for construction.

        Raises:
            ValidationError: If config is invalid
        """
        pass

    @abstractmethod
    def validate_config_update(self, config: Mapping[str, Any]) -> None:
        """
        Validate a partial configuration update.

        Raises:
            ValidationError: If the update is not allowed
        """
        pass

    @abstractmethod
    async def generate(self, texts: list[str]) -> list[list[float]]:
        """
        Generate embedding vectors for texts.

        Args:
            texts: Texts to embed

        Returns:
            List of embedding vectors

        Raises:
            EmbeddingError: If embedding generation fails
        """
        pass

    async def generate_for_queries(self, texts: list[str]) -> list[list[float]]:
        """
        Generate embedding vectors for query texts.

        Default implementation embeds queries exactly like documents.
        Override for providers with a dedicated query mode.

        Args:
            texts: Query texts to embed

        Returns:
            List of embedding vectors
        """
        return await self.generate(texts)

    @abstractmethod
    async def close(self):
        """
        Close any open connections.
        """
        pass
