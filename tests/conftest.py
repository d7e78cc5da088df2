"""Pytest configuration and fixtures for item_store tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from item_store.adapters.outbound import InMemoryItemRepository, JsonFileItemRepository
from item_store.application import ItemService
from item_store.domain.services import ItemStore
from item_store.infrastructure.config import Config, StorageConfig
from item_store.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def data_file(temp_dir: Path) -> Path:
    """Path of a not-yet-existing items file."""
    return temp_dir / "items.json"


@pytest.fixture
def test_config(data_file: Path) -> Config:
    """Provide a test configuration persisting to a temporary file."""
    return Config(storage=StorageConfig(data_file=data_file))


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def memory_repository() -> InMemoryItemRepository:
    """Provide an empty in-memory repository."""
    return InMemoryItemRepository()


@pytest.fixture
def file_repository(data_file: Path) -> JsonFileItemRepository:
    """Provide a JSON file repository on a temporary path."""
    return JsonFileItemRepository(data_file)


@pytest.fixture
def store(memory_repository: InMemoryItemRepository) -> ItemStore:
    """Provide an empty store saving to memory."""
    return ItemStore.open(memory_repository)


@pytest.fixture
def service(
    file_repository: JsonFileItemRepository,
    metrics_registry: MetricsRegistry,
) -> ItemService:
    """Provide an item service persisting to a temporary file."""
    return ItemService.open(file_repository, metrics=metrics_registry)


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
