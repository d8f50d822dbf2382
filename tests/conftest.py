"""
Shared test fixtures and configuration for flatdoc tests.
"""
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from flatdoc import create_app
from flatdoc.config import TestConfig
from flatdoc.storage.collection import Collection
from flatdoc.storage.json_store import Store


@pytest.fixture
def temp_data_dir(tmp_path: Path) -> Path:
    """Create a temporary data directory for Store tests."""
    data_dir = tmp_path / "database"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def store(temp_data_dir: Path) -> Store:
    """A Store bound to the temporary directory and connected."""
    s = Store()
    s.set_base_dir(temp_data_dir)
    s.connect()
    return s


@pytest.fixture
def users(store: Store) -> Collection:
    """A registered, empty ``users`` collection."""
    return Collection(store, "users", {"name": "", "email": "", "password": ""})


@pytest.fixture
def app(temp_data_dir: Path) -> Flask:
    """Create a Flask application whose store points at the temp directory."""

    class _Config(TestConfig):
        DATA_DIR = temp_data_dir

    app = create_app(_Config)
    yield app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client."""
    return app.test_client()


