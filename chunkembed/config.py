"""
Configuration for chunkembed.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class EmbedderConfig(BaseModel):
    """Embedding function configuration."""

    service_url: str = "http://localhost:11434/v1/embeddings"
    model: str = "nomic-embed-text"
    encoding_format: str | None = "float"
    chunk_size: int | None = 64
    chunk_overlap: int | None = 0
    chunk_strategy: str | None = None  # None, "none", "token"
    # Token window used by the "token" chunk strategy
    chunk_tokens: int = 512
    timeout: float = 120.0

    def to_function_config(self) -> dict[str, Any]:
        """
        Get the raw embedding function configuration.

        Returns:
            Mapping of the persisted embedding function fields, unset values omitted
        """
        fields = {
            "service_url": self.service_url,
            "model": self.model,
            "encoding_format": self.encoding_format,
            "chunk_size": self.chunk_size,
            "chunk_overlap": self.chunk_overlap,
            "chunk_strategy": self.chunk_strategy,
        }
        return {key: value for key, value in fields.items() if value is not None}


class TokenizerConfig(BaseModel):
    """Tokenizer configuration."""

    provider: str = "tiktoken"  # tiktoken, approximate
    model: str = "cl100k_base"
    chars_per_token: float = 4.0


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class Config(BaseModel):
    """Main configuration."""

    embedder: EmbedderConfig = Field(default_factory=EmbedderConfig)
    tokenizer: TokenizerConfig = Field(default_factory=TokenizerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in project root)

        Returns:
            Config instance

        Environment variables:
            CHUNKEMBED_SERVICE_URL: Embedding endpoint URL
            CHUNKEMBED_MODEL: Embedding model name
            CHUNKEMBED_ENCODING_FORMAT: Vector encoding format
            CHUNKEMBED_CHUNK_SIZE: Chunks per request
            CHUNKEMBED_CHUNK_OVERLAP: Overlap between chunks (token strategy)
            CHUNKEMBED_CHUNK_STRATEGY: Chunk strategy (none, token)
            CHUNKEMBED_CHUNK_TOKENS: Tokens per chunk (token strategy)
            CHUNKEMBED_TIMEOUT: Request timeout in seconds
            CHUNKEMBED_TOKENIZER_PROVIDER: Tokenizer provider (tiktoken, approximate)
            CHUNKEMBED_TOKENIZER_MODEL: tiktoken encoding name
            CHUNKEMBED_LOG_LEVEL: Log level
        """
        # Load .env file if provided or exists
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None:
                return default
            # If value is empty string, return default
            if value == "":
                return default
            # Convert boolean strings
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            # Convert numeric strings
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            return value

        return cls(
            embedder=EmbedderConfig(
                service_url=get_env(
                    "CHUNKEMBED_SERVICE_URL", "http://localhost:11434/v1/embeddings"
                ),
                model=get_env("CHUNKEMBED_MODEL", "nomic-embed-text"),
                encoding_format=get_env("CHUNKEMBED_ENCODING_FORMAT", "float"),
                chunk_size=get_env("CHUNKEMBED_CHUNK_SIZE", 64),
                chunk_overlap=get_env("CHUNKEMBED_CHUNK_OVERLAP", 0),
                chunk_strategy=get_env("CHUNKEMBED_CHUNK_STRATEGY"),
                chunk_tokens=get_env("CHUNKEMBED_CHUNK_TOKENS", 512),
                timeout=get_env("CHUNKEMBED_TIMEOUT", 120.0),
            ),
            tokenizer=TokenizerConfig(
                provider=get_env("CHUNKEMBED_TOKENIZER_PROVIDER", "tiktoken"),
                model=get_env("CHUNKEMBED_TOKENIZER_MODEL", "cl100k_base"),
                chars_per_token=get_env("CHUNKEMBED_TOKENIZER_CHARS_PER_TOKEN", 4.0),
            ),
            logging=LoggingConfig(
                level=get_env("CHUNKEMBED_LOG_LEVEL", "INFO"),
                log_to_file=get_env("CHUNKEMBED_LOG_TO_FILE", False),
                log_dir=get_env("CHUNKEMBED_LOG_DIR", "logs"),
                file_rotation=get_env("CHUNKEMBED_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("CHUNKEMBED_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("CHUNKEMBED_LOG_COMPRESSION", "zip"),
                serialize=get_env("CHUNKEMBED_LOG_SERIALIZE", True),
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        return cls(**(data or {}))

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        # Start with YAML if provided
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        # Apply env overrides (non-default values)
        default = cls()
        final_dict = {**config_dict}
        if env_config.embedder != default.embedder:
            final_dict["embedder"] = env_config.embedder.model_dump()
        if env_config.tokenizer != default.tokenizer:
            final_dict["tokenizer"] = env_config.tokenizer.model_dump()
        if env_config.logging != default.logging:
            final_dict["logging"] = env_config.logging.model_dump()

        return cls(**final_dict) if final_dict else env_config


# Default config instance
default_config = Config()
