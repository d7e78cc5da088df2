"""Configuration management for the item store."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageConfig(BaseModel):
    """Persistence configuration."""

    data_file: Path = Field(default=Path("items.json"), description="JSON file mirroring the collection")
    persist: bool = Field(default=True, description="Mirror the collection to data_file")
    fsync: bool = Field(default=False, description="fsync the data file after each save")


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8080, ge=1, le=65535, description="Server port")


class ApiConfig(BaseModel):
    """HTTP API surface configuration."""

    title: str = Field(default="Item Store API", description="OpenAPI title")
    enable_docs: bool = Field(default=True, description="Serve OpenAPI document and Swagger UI")
    docs_url: str = Field(default="/swagger-ui", description="Swagger UI path")
    openapi_url: str = Field(default="/api-docs/openapi.json", description="OpenAPI document path")
    enable_system_info: bool = Field(default=True, description="Expose GET /system_info")


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    access_log: bool = Field(default=True, description="Log one line per HTTP request")
    environment: str = Field(default="development", description="Deployment environment tag")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="item_store", description="Service name for tracing")
    console_traces: bool = Field(default=False, description="Also export spans to stdout")
    metrics_enabled: bool = Field(default=False, description="Start the Prometheus scrape server")
    metrics_port: int = Field(default=9108, ge=1, le=65535, description="Prometheus metrics port")


class Config(BaseSettings):
    """Main configuration for the item store."""

    model_config = SettingsConfigDict(
        env_prefix="ITEM_STORE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    storage: StorageConfig = Field(default_factory=StorageConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
