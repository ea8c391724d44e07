"""Shared pytest fixtures and configuration for all tests."""

import os

# Keep test runs from writing log files into the working directory
os.environ.setdefault("LOG_FILE_PATH", "")

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import menu_catalog.core.logging_config  # noqa: F401  registers Logger.trace
from menu_catalog.db.seeder import build_seed_document
from menu_catalog.db.store import MenuStore
from menu_catalog.main import create_app
from menu_catalog.models.document import MenuDocument


@pytest.fixture
def menu_path(tmp_path: Path) -> Path:
    """Fixture providing a not-yet-existing menu data file path."""
    return tmp_path / "menu-data.json"


@pytest.fixture
def store(menu_path: Path) -> MenuStore:
    """Fixture providing a store backed by a temporary file."""
    return MenuStore(menu_path)


@pytest.fixture
def seeded_document() -> MenuDocument:
    """Fixture providing a fresh in-memory copy of the seed menu."""
    return build_seed_document()


@pytest.fixture
def client(store: MenuStore) -> TestClient:
    """Fixture providing a test client for an app using the temporary store."""
    return TestClient(create_app(store=store))
