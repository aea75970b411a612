"""
Database connection management.

Provides the shared MongoClient and helpers returning databases and
collection facades.

Dependencies: pymongo, sparkbase.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache

from pymongo import MongoClient
from pymongo.database import Database

from sparkbase.application.adapters.registry import AdapterRegistry
from sparkbase.boundary.db.collection import SparkCollection
from sparkbase.configs import get_settings
from sparkbase.core.exceptions import ConfigurationError
from sparkbase.observability.logger import get_logger

logger = get_logger(__name__)


@lru_cache
def get_client() -> MongoClient:
    """
    Create the process-wide MongoClient.

    The client is thread-safe and pools connections internally, so one
    instance is shared by every collection facade. Connecting is lazy;
    server errors surface on the first operation.

    Returns:
        MongoClient: Configured client

    Raises:
        ConfigurationError: If the MongoDB URI is empty

    Usage:
        client = get_client()
        client.admin.command("ping")  # Test connection
    """
    mongo = get_settings().mongo
    uri = (mongo.uri or "").strip()
    if not uri:
        raise ConfigurationError("MONGO_URI must be configured to connect", setting="uri")

    logger.info("Creating MongoDB client: database=%s app_name=%s", mongo.database, mongo.app_name)
    return MongoClient(
        uri,
        serverSelectionTimeoutMS=mongo.server_selection_timeout_ms,
        appname=mongo.app_name,
        tz_aware=mongo.tz_aware,
    )


def get_database(name: str | None = None) -> Database:
    """
    Get a database handle.

    Args:
        name: Database name (defaults to the configured database)

    Returns:
        Database: pymongo database handle
    """
    return get_client()[name or get_settings().mongo.database]


def get_collection(
    name: str,
    registry: AdapterRegistry | None = None,
    database: str | None = None,
) -> SparkCollection:
    """
    Get a collection facade.

    Args:
        name: Collection name
        registry: Adapter registry (defaults to the process-wide one)
        database: Database name (defaults to the configured database)

    Returns:
        SparkCollection: Facade over the named collection

    Usage:
        users = get_collection("users")
        users.push(user, User).execute()
    """
    return SparkCollection(get_database(database)[name], registry=registry)


def close_client() -> None:
    """Close the shared client, if one was created, and forget it."""
    if get_client.cache_info().currsize:
        get_client().close()
        logger.info("MongoDB client closed")
    get_client.cache_clear()
