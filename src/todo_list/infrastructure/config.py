"""Configuration management for the todo list service."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageConfig(BaseModel):
    """Storage configuration."""

    backend: Literal["json", "memory"] = Field(default="json", description="Storage adapter")
    path: Path = Field(default=Path("todos.json"), description="JSON storage file path")
    key: str = Field(default="TODOS", min_length=1, description="Storage key for the collection")
    fsync: bool = Field(default=True, description="fsync the storage file on every save")


class CollectionConfig(BaseModel):
    """Collection configuration."""

    seed_placeholder: bool = Field(
        default=True, description="Seed empty storage with a single placeholder item"
    )


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    metrics_enabled: bool = Field(default=False, description="Expose Prometheus metrics")
    metrics_port: int = Field(default=8001, ge=1, le=65535, description="Prometheus metrics port")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="todo_list", description="Service name for tracing")
    otel_console_export: bool = Field(
        default=False, description="Also print finished spans to stdout"
    )


class Config(BaseSettings):
    """Main configuration for the todo list service."""

    model_config = SettingsConfigDict(
        env_prefix="TODO_LIST_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    storage: StorageConfig = Field(default_factory=StorageConfig)
    collection: CollectionConfig = Field(default_factory=CollectionConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
