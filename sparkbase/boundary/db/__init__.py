"""
Database boundary layer: collection facade and connection management.

Exports:
  - SparkCollection: Deferred CRUD facade over one collection
  - get_client(), get_database(), get_collection(), close_client(): Connection management

Dependencies: pymongo, sparkbase.configs
System role: Document store adapter providing deferred CRUD over MongoDB collections.
"""

from sparkbase.boundary.db.collection import SparkCollection
from sparkbase.boundary.db.connection import (
    close_client,
    get_client,
    get_collection,
    get_database,
)

__all__ = [
    "SparkCollection",
    "get_client",
    "get_database",
    "get_collection",
    "close_client",
]
