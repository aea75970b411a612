"""
Concurrency tests documenting the facade's weak consistency.

push_or_replace scans client-side and takes no locks, so two concurrent
replaces with the same filter can both see the same pre-existing record,
both delete it, and both insert. These tests force that interleaving and
assert the duplicate outcome instead of assuming atomicity.

System role: Verification of the non-atomic replace contract
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterator

from sparkbase.application.adapters.registry import AdapterRegistry
from sparkbase.boundary.db.collection import SparkCollection
from tests.fakes import Counter, InMemoryCollection, stored_names


class BarrierCollection(InMemoryCollection):
    """In-memory collection whose find() waits until every scanner has its snapshot."""

    def __init__(self, parties: int) -> None:
        super().__init__()
        self.barrier = threading.Barrier(parties, timeout=5)

    def find(self, query: dict[str, Any] | None = None) -> Iterator[dict[str, Any]]:
        snapshot = super().find(query)
        self.barrier.wait()
        return snapshot


class TestConcurrentPushOrReplace:
    """Concurrent replaces with identical filters."""

    def test_overlapping_replaces_leave_duplicates(self, registry: AdapterRegistry) -> None:
        """Test both writers insert after deleting the same original."""
        # Arrange
        raw = BarrierCollection(parties=2)
        raw.insert_one({"name": "visits", "count": 0, "tags": []})
        collection = SparkCollection(raw, registry=registry)
        action = collection.push_or_replace(Counter(name="visits", count=1), Counter, lambda c: c.name == "visits")

        # Act
        with ThreadPoolExecutor(max_workers=2) as executor:
            futures = [action.submit(executor) for _ in range(2)]
            for future in futures:
                future.result(timeout=10)

        # Assert
        assert stored_names(raw) == ["visits", "visits"]
        assert [doc["count"] for doc in raw.documents] == [1, 1]

    def test_sequential_replaces_leave_single_record(self, registry: AdapterRegistry) -> None:
        """Test the same replaces run one after another converge."""
        raw = InMemoryCollection()
        raw.insert_one({"name": "visits", "count": 0, "tags": []})
        collection = SparkCollection(raw, registry=registry)
        action = collection.push_or_replace(Counter(name="visits", count=1), Counter, lambda c: c.name == "visits")

        action.execute()
        action.execute()

        assert stored_names(raw) == ["visits"]
