"""
Configuration snapshot held by a chunking embedding function.

A snapshot is only ever built from a mapping that already passed
full validation, so the field types here describe the accepted shape
rather than enforce it.
"""

import math
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

Splitter = Callable[[str], list[str]]

PERSISTED_FIELDS = (
    "service_url",
    "model",
    "encoding_format",
    "chunk_size",
    "chunk_overlap",
    "chunk_strategy",
)


class EmbeddingFunctionConfig(BaseModel):
    """
    Validated configuration of a chunking embedding function.

    The splitter is part of the live snapshot but is excluded from
    serialization, since a function cannot be persisted as plain data.
    """

    model_config = ConfigDict(frozen=True)

    service_url: str = Field(..., description="Endpoint receiving embedding requests")
    model: str = Field(..., description="Embedding model identifier")
    encoding_format: str | None = Field(default=None, description="Vector encoding (e.g. float)")
    chunk_size: int | float | None = Field(
        default=None, description="Number of chunks sent per request"
    )
    chunk_overlap: int | float | None = Field(
        default=None, description="Overlap between adjacent chunks, used by splitters"
    )
    chunk_strategy: str | None = Field(default=None, description="Name of the chunking strategy")
    splitter: Splitter | None = Field(
        default=None, exclude=True, description="Function splitting a text into chunks"
    )

    def to_persisted(self) -> dict[str, Any]:
        """
        Get the persisted fields as plain data.

        Returns:
            Dict with exactly the persisted fields (never the splitter)
        """
        return self.model_dump(include=set(PERSISTED_FIELDS))

    @property
    def batch_size(self) -> int | None:
        """
        Get chunk_size as a usable batch size.

        Fractional sizes are truncated, never below one chunk. An infinite
        size sends every chunk in one request.

        Returns:
            Batch size, or None when every chunk goes in one request
        """
        if self.chunk_size is None or not math.isfinite(self.chunk_size):
            return None
        return max(1, int(self.chunk_size))
