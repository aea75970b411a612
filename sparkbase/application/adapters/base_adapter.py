"""
Adapter contract.

An adapter owns the bidirectional mapping between one application type and
its document representation. Adapters are registered once and shared
read-only by every collection operation.

Dependencies: abc, typing
System role: Per-type serialization strategy
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from sparkbase.models.document import Document

T = TypeVar("T")


class DataAdapter(ABC, Generic[T]):
    """
    Generic base class for object/document adapters.

    Implementations must satisfy the round-trip law:
    ``deserialize(serialize(instance)) == instance`` for well-formed
    instances. Handling of malformed documents is up to each adapter.

    Type Parameters:
        T: Application type handled by the adapter
    """

    @abstractmethod
    def serialize(self, instance: T) -> Document:
        """
        Convert an instance to a new document.

        Args:
            instance: Application object

        Returns:
            Document: Fresh mapping safe for the driver to mutate
        """

    @abstractmethod
    def deserialize(self, document: Document) -> T:
        """
        Rebuild an instance from a stored document.

        Args:
            document: Mapping fetched from the store (may carry ``_id``)

        Returns:
            T: Reconstructed application object
        """


@runtime_checkable
class Documented(Protocol):
    """Protocol for classes that serialize themselves."""

    def to_document(self) -> Document:
        ...

    @classmethod
    def from_document(cls, document: Document) -> Any:
        ...


class DocumentedAdapter(DataAdapter[T]):
    """Adapter delegating to a class's own to_document/from_document."""

    def __init__(self, cls: type[T]) -> None:
        if not (isinstance(cls, type) and issubclass(cls, Documented)):
            raise TypeError(f"{cls.__name__} must define to_document() and from_document()")
        self.cls = cls

    def serialize(self, instance: T) -> Document:
        return dict(instance.to_document())

    def deserialize(self, document: Document) -> T:
        return self.cls.from_document(document)
