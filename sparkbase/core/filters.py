"""
Scan filters for the collection facade.

A filter decides whether one scanned document matches. DocumentFilter tests
the raw document, InstanceFilter tests the deserialized instance. Plain
callables passed to the facade are wrapped with the operation's historical
target (instances for pull/push_or_replace, documents for drop).

Each filter may also carry a MongoDB query mapping that the facade forwards
to find(), so the server narrows the scan before client-side testing.

Dependencies: functools, sparkbase.application.adapters.base_adapter
System role: Predicate evaluation during collection scans
"""

from abc import ABC, abstractmethod
from functools import cached_property
from typing import TYPE_CHECKING, Any, Callable, Generic, Mapping, TypeVar, Union

from sparkbase.models.document import Document

if TYPE_CHECKING:
    from sparkbase.application.adapters.base_adapter import DataAdapter

T = TypeVar("T")


class Candidate(Generic[T]):
    """
    One scanned document with a lazily deserialized instance.

    The adapter runs at most once per candidate, no matter how many times
    the instance is read.
    """

    def __init__(self, document: Document, adapter: "DataAdapter[T]") -> None:
        self.document = document
        self.adapter = adapter

    @cached_property
    def instance(self) -> T:
        return self.adapter.deserialize(self.document)


class ScanFilter(ABC):
    """Base class for filters with an optional server-side query."""

    target = ""

    def __init__(
        self,
        predicate: Callable[[Any], bool],
        query: Mapping[str, Any] | None = None,
    ) -> None:
        self.predicate = predicate
        self.query = dict(query) if query else {}

    @abstractmethod
    def test(self, candidate: Candidate) -> bool:
        """Whether the scanned candidate matches."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(predicate={self.predicate!r}, query={self.query!r})"


class DocumentFilter(ScanFilter):
    """Filter evaluated against the raw stored document."""

    target = "document"

    def test(self, candidate: Candidate) -> bool:
        return bool(self.predicate(candidate.document))


class InstanceFilter(ScanFilter):
    """Filter evaluated against the deserialized instance."""

    target = "instance"

    def test(self, candidate: Candidate) -> bool:
        return bool(self.predicate(candidate.instance))


FilterLike = Union[ScanFilter, Callable[[Any], bool]]


def by_document(
    predicate: Callable[[Document], bool],
    query: Mapping[str, Any] | None = None,
) -> DocumentFilter:
    """
    Build a filter that tests raw documents.

    Args:
        predicate: Boolean test over the stored document
        query: Optional MongoDB filter applied by the server first

    Returns:
        DocumentFilter: Filter accepted by every facade operation
    """
    return DocumentFilter(predicate, query)


def by_instance(
    predicate: Callable[[Any], bool],
    query: Mapping[str, Any] | None = None,
) -> InstanceFilter:
    """
    Build a filter that tests deserialized instances.

    Args:
        predicate: Boolean test over the adapter's output
        query: Optional MongoDB filter applied by the server first

    Returns:
        InstanceFilter: Filter accepted by every facade operation
    """
    return InstanceFilter(predicate, query)


def by_query(query: Mapping[str, Any]) -> DocumentFilter:
    """
    Build a filter that matches every document the server returns for query.

    Args:
        query: MongoDB filter mapping

    Returns:
        DocumentFilter: Filter whose client-side test always passes
    """
    return DocumentFilter(lambda document: True, query)


def as_filter(filter: FilterLike, default_target: str) -> ScanFilter:
    """
    Normalize a facade filter argument.

    Args:
        filter: ScanFilter or plain predicate
        default_target: "instance" or "document", used for plain predicates

    Returns:
        ScanFilter: The filter itself, or the predicate wrapped for its target

    Raises:
        TypeError: If filter is neither a ScanFilter nor callable
        ValueError: If default_target is unknown
    """
    if isinstance(filter, ScanFilter):
        return filter
    if not callable(filter):
        raise TypeError(f"filter must be callable or a ScanFilter, got {type(filter).__name__}")
    if default_target == "instance":
        return InstanceFilter(filter)
    if default_target == "document":
        return DocumentFilter(filter)
    raise ValueError(f"Unknown filter target: {default_target}")
