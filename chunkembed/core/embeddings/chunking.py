"""
Chunking embedding function backed by an OpenAI-compatible HTTP endpoint.
"""

from collections.abc import Mapping
from typing import Any

import httpx

from chunkembed.core.embeddings import validation
from chunkembed.core.embeddings.base import EmbeddingFunction
from chunkembed.models.embedding_config import EmbeddingFunctionConfig
from chunkembed.utils.exceptions import (
    ConfigurationError,
    EmbeddingError,
    EmbeddingServiceError,
)
from chunkembed.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ENCODING_FORMAT = "float"
UPDATABLE_FIELDS = ("chunk_size", "splitter")


class ChunkingEmbeddingFunction(EmbeddingFunction):
    """
    Embedding function that splits texts into chunks before embedding.

    Every text is passed through the configured splitter, the resulting chunks
    are grouped into batches of chunk_size, and each batch is posted to
    service_url. Batches are sent one at a time, in order, so the returned
    vectors follow chunk order: one vector per chunk, not per input text.

    An instance created without configuration is unconfigured; any operation
    needing the configuration raises ConfigurationError until it is built
    through build_from_config. Instances are not safe to mutate from
    concurrent callers.
    """

    name = "openai-embedding-with-chunking"

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 120.0,
    ):
        """
        Initialize chunking embedding function.

        Args:
            config: Optional raw configuration; validated before it is stored
            http_client: Optional shared HTTP client (not closed by close())
            timeout: Per-request timeout in seconds for the owned HTTP client,
                which is created on first request

        Raises:
            ValidationError: If config is invalid
        """
        self._config: EmbeddingFunctionConfig | None = None

        if config is not None:
            self.validate_config(config)
            self._config = EmbeddingFunctionConfig.model_validate(dict(config))

        self.timeout = timeout
        self._owns_client = http_client is None
        self._client = http_client

    @property
    def is_configured(self) -> bool:
        """Whether a validated configuration is stored."""
        return self._config is not None

    @property
    def config(self) -> EmbeddingFunctionConfig:
        """
        Get the current configuration snapshot.

        Raises:
            ConfigurationError: If the function has not been configured
        """
        if self._config is None:
            raise ConfigurationError(
                "Embedding function is not configured", {"name": self.name}
            )
        return self._config

    @property
    def client(self) -> httpx.AsyncClient:
        """
        Get the HTTP client, creating the owned client on first use.

        Returns:
            Shared client if one was injected, else this instance's own client
        """
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    def build_from_config(
        self, config: Mapping[str, Any], client: Any | None = None
    ) -> "ChunkingEmbeddingFunction":
        """
        Build a new instance from raw configuration.

        The calling instance is left untouched.

        Args:
            config: Raw persisted configuration
            client: Host client handle (unused)

        Returns:
            New configured ChunkingEmbeddingFunction

        Raises:
            ValidationError: If config is invalid
        """
        return type(self)(config, timeout=self.timeout)

    def get_config(self) -> dict[str, Any]:
        return self.config.to_persisted()

    def validate_config(self, config: Mapping[str, Any]) -> None:
        validation.validate_config(config)

    def validate_config_update(self, config: Mapping[str, Any]) -> None:
        validation.validate_config_update(config)

    def update_config(self, config: Mapping[str, Any]) -> None:
        """
        Validate and apply a partial configuration update.

        Only chunk_size and splitter can change; absent fields are left as is.

        Args:
            config: Raw partial configuration

        Raises:
            ConfigurationError: If the function has not been configured
            ValidationError: If the update is not allowed
        """
        current = self.config
        self.validate_config_update(config)

        changes = {
            field: config[field] for field in UPDATABLE_FIELDS if config.get(field) is not None
        }
        if not changes:
            return

        self._config = current.model_copy(update=changes)
        logger.bind(model=current.model, fields=sorted(changes)).info(
            "Applied embedding function configuration update"
        )

    async def generate(self, texts: list[str]) -> list[list[float]]:
        """
        Generate embeddings for every chunk of the given texts.

        Args:
            texts: Texts to split and embed

        Returns:
            One embedding vector per chunk, in chunk order

        Raises:
            ConfigurationError: If the function has not been configured
            EmbeddingServiceError: If the service rejects a batch
            EmbeddingError: If a request fails or a response is malformed
        """
        config = self.config
        chunks = self._split(config, texts)
        if not chunks:
            return []

        batch_size = config.batch_size or len(chunks)
        embeddings = []

        for batch_index, start in enumerate(range(0, len(chunks), batch_size)):
            batch = chunks[start : start + batch_size]
            embeddings.extend(await self._embed_batch(config, batch, batch_index))

        return embeddings

    async def close(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    @staticmethod
    def _split(config: EmbeddingFunctionConfig, texts: list[str]) -> list[str]:
        if config.splitter is None:
            return list(texts)

        chunks = []
        for text in texts:
            chunks.extend(config.splitter(text))
        return chunks

    async def _embed_batch(
        self, config: EmbeddingFunctionConfig, batch: list[str], batch_index: int
    ) -> list[list[float]]:
        payload = {
            "model": config.model,
            "input": batch,
            "encoding_format": config.encoding_format or DEFAULT_ENCODING_FORMAT,
        }
        log = logger.bind(model=config.model, batch_index=batch_index, batch_len=len(batch))
        log.debug("Sending embedding batch")

        try:
            response = await self.client.post(
                config.service_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            log.error(f"Embedding request error: {e}")
            raise EmbeddingError(
                f"Embedding request error: {e}",
                {"model": config.model, "batch_index": batch_index},
            ) from e

        if not response.is_success:
            log.bind(status_code=response.status_code).error(
                f"Embedding request failed: {response.status_code} {response.reason_phrase}"
            )
            raise EmbeddingServiceError(
                response.status_code,
                response.reason_phrase,
                {"model": config.model, "batch_index": batch_index},
            )

        try:
            vectors = [item["embedding"] for item in response.json()["data"]]
        except (ValueError, KeyError, TypeError) as e:
            raise EmbeddingError(
                "Embedding response is malformed",
                {"model": config.model, "batch_index": batch_index},
            ) from e

        if len(vectors) != len(batch):
            raise EmbeddingError(
                f"Embedding response size mismatch: expected {len(batch)}, got {len(vectors)}",
                {"model": config.model, "batch_index": batch_index},
            )

        return vectors
