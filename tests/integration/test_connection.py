"""
Test suite for connection helpers.

MongoClient is patched so no server is needed.

System role: Verification of client lifecycle and collection factory
"""

from unittest.mock import MagicMock, patch

import pytest

from sparkbase.application.adapters.registry import AdapterRegistry
from sparkbase.boundary.db import connection
from sparkbase.boundary.db.collection import SparkCollection
from sparkbase.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def reset_client():
    """Forget the cached client around each test."""
    connection.get_client.cache_clear()
    yield
    connection.get_client.cache_clear()


@pytest.fixture
def mock_client_cls():
    """Patch MongoClient in the connection module."""
    with patch("sparkbase.boundary.db.connection.MongoClient") as client_cls:
        yield client_cls


class TestGetClient:
    """Tests for get_client()."""

    def test_builds_client_from_settings(self, mock_client_cls: MagicMock, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings are passed to the driver."""
        monkeypatch.setenv("MONGO_URI", "mongodb://db:27017")
        monkeypatch.setenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "1500")
        monkeypatch.setenv("MONGO_APP_NAME", "tests")

        client = connection.get_client()

        assert client is mock_client_cls.return_value
        mock_client_cls.assert_called_once_with(
            "mongodb://db:27017",
            serverSelectionTimeoutMS=1500,
            appname="tests",
            tz_aware=False,
        )

    def test_client_is_shared(self, mock_client_cls: MagicMock) -> None:
        """One client per process until closed."""
        assert connection.get_client() is connection.get_client()
        mock_client_cls.assert_called_once()

    def test_empty_uri_rejected(self, mock_client_cls: MagicMock, monkeypatch: pytest.MonkeyPatch) -> None:
        """A blank URI is a configuration error."""
        monkeypatch.setenv("MONGO_URI", "  ")

        with pytest.raises(ConfigurationError) as exc_info:
            connection.get_client()
        assert exc_info.value.details == {"setting": "uri"}
        mock_client_cls.assert_not_called()


class TestCollectionFactory:
    """Tests for get_database() and get_collection()."""

    def test_get_database_defaults_to_configured_name(
        self, mock_client_cls: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Configured database is used when none is named."""
        monkeypatch.setenv("MONGO_DATABASE", "appdb")

        connection.get_database()

        mock_client_cls.return_value.__getitem__.assert_called_once_with("appdb")

    def test_get_collection_wraps_raw_handle(self, mock_client_cls: MagicMock) -> None:
        """Facade wraps the named collection and the given registry."""
        registry = AdapterRegistry()
        database = mock_client_cls.return_value.__getitem__.return_value

        facade = connection.get_collection("users", registry=registry, database="other")

        assert isinstance(facade, SparkCollection)
        assert facade.raw is database.__getitem__.return_value
        assert facade.registry is registry
        mock_client_cls.return_value.__getitem__.assert_called_once_with("other")
        database.__getitem__.assert_called_once_with("users")

    def test_close_client(self, mock_client_cls: MagicMock) -> None:
        """Closing releases the cached client."""
        client = connection.get_client()

        connection.close_client()

        client.close.assert_called_once()
        assert connection.get_client.cache_info().currsize == 0

    def test_close_client_without_client_is_noop(self, mock_client_cls: MagicMock) -> None:
        """Nothing is created just to be closed."""
        connection.close_client()

        mock_client_cls.assert_not_called()
