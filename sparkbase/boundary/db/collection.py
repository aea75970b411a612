"""
Collection facade.

Exposes deferred CRUD operations over one MongoDB collection. Each operation
returns an Action; nothing touches the store until execute() runs, at which
point the adapter is resolved from the registry, documents are scanned or
inserted through the driver, and the result is returned.

Consistency: scans are client-side and no locks or transactions are used.
push_or_replace, drop and if_present_or_else are not atomic. Two concurrent
replaces with overlapping filters can both delete the same matches and both
insert, leaving duplicates. Narrow scans with a server-side query (see
sparkbase.core.filters) where possible.

Dependencies: pymongo, sparkbase.application.adapters, sparkbase.core
System role: Adapter lookup and CRUD orchestration for one collection
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, TypeVar

from pymongo.errors import PyMongoError

from sparkbase.application.adapters.base_adapter import DataAdapter
from sparkbase.application.adapters.registry import AdapterRegistry, get_adapter_registry
from sparkbase.core.actions import Action, VoidAction
from sparkbase.core.filters import Candidate, FilterLike, ScanFilter, as_filter
from sparkbase.models.document import Document, ReplaceMode, TypeKey, type_display_name
from sparkbase.observability.log_utils import log_exception_with_context, log_with_context
from sparkbase.observability.logger import get_logger

T = TypeVar("T")

ID_FIELD = "_id"

logger = get_logger(__name__)


class SparkCollection:
    """
    Deferred CRUD facade over a single collection handle.

    Plain predicate filters test deserialized instances in pull,
    push_or_replace and if_present_or_else, and raw documents in drop.
    Wrap predicates with by_document()/by_instance() to choose explicitly.

    Attributes:
        raw: Driver collection (insert_one, find, find_one_and_delete)
        registry: Adapter registry used to resolve types at execution time

    Example:
        >>> users = SparkCollection(db["users"])
        >>> users.push(User(name="ada"), User).execute()
        >>> users.pull(User, lambda u: u.name == "ada").execute()
        User(name='ada')
    """

    def __init__(self, raw: Any, registry: AdapterRegistry | None = None) -> None:
        """
        Initialize facade with a collection handle.

        Args:
            raw: pymongo Collection or any object with the same CRUD surface
            registry: Adapter registry (defaults to the process-wide one)
        """
        self.raw = raw
        self.registry = registry if registry is not None else get_adapter_registry()

    @property
    def name(self) -> str:
        return getattr(self.raw, "name", type(self.raw).__name__)

    # -------------------------- writes --------------------------
    def push(self, instance: T, type_: TypeKey) -> VoidAction:
        """
        Insert an instance as a new document.

        No uniqueness check is made; pushing twice stores two records.

        Args:
            instance: Application object
            type_: Type key the adapter is registered under

        Returns:
            VoidAction: Performs the insert when executed

        Raises (on execute):
            UnregisteredTypeError: If type_ has no adapter (nothing is written)
            PyMongoError: Propagated from the driver
        """

        def run() -> None:
            adapter = self._resolve(type_, "push")
            document = adapter.serialize(instance)
            with self._driver_errors("push", type_):
                self.raw.insert_one(document)
            log_with_context(logger, logging.DEBUG, "Pushed document", collection=self.name, type=type_)

        return VoidAction(run)

    def push_or_replace(
        self,
        instance: T,
        type_: TypeKey,
        filter: FilterLike,
        mode: ReplaceMode = ReplaceMode.ALL,
    ) -> VoidAction:
        """
        Delete stored records matching filter, then insert instance.

        The instance is serialized once. With ReplaceMode.ALL every matching
        record is deleted; with ReplaceMode.ONE only the first in scan order.
        Exactly one document is inserted regardless of how many were removed.
        Deletes interleave with the scan and the sequence is not atomic.

        Args:
            instance: Application object to store
            type_: Type key the adapter is registered under
            filter: Predicate over instances, or an explicit ScanFilter
            mode: Replace the first match or every match

        Returns:
            VoidAction: Performs the replace when executed

        Raises (on execute):
            UnregisteredTypeError: If type_ has no adapter
            PyMongoError: Propagated from the driver
        """
        scan_filter = as_filter(filter, "instance")
        mode = ReplaceMode(mode)

        def run() -> None:
            adapter = self._resolve(type_, "push_or_replace")
            document = adapter.serialize(instance)
            with self._driver_errors("push_or_replace", type_):
                removed = 0
                for candidate in self._scan(adapter, scan_filter):
                    if scan_filter.test(candidate):
                        self.raw.find_one_and_delete(self._criterion(candidate.document))
                        removed += 1
                        if mode is ReplaceMode.ONE:
                            break
                self.raw.insert_one(document)
            log_with_context(
                logger,
                logging.DEBUG,
                "Replaced documents",
                collection=self.name,
                type=type_,
                mode=mode.value,
                removed=removed,
            )

        return VoidAction(run)

    def replace_one(self, instance: T, type_: TypeKey, filter: FilterLike) -> VoidAction:
        """push_or_replace removing only the first matching record."""
        return self.push_or_replace(instance, type_, filter, ReplaceMode.ONE)

    def replace_all(self, instance: T, type_: TypeKey, filter: FilterLike) -> VoidAction:
        """push_or_replace removing every matching record."""
        return self.push_or_replace(instance, type_, filter, ReplaceMode.ALL)

    # -------------------------- reads --------------------------
    def pull(self, type_: type[T] | str, filter: FilterLike) -> Action[T | None]:
        """
        Retrieve the first stored instance matching filter.

        Stops at the first match in the store's scan order.

        Args:
            type_: Type key the adapter is registered under
            filter: Predicate over instances, or an explicit ScanFilter

        Returns:
            Action: Resolves to the instance, or None when nothing matches

        Raises (on execute):
            UnregisteredTypeError: If type_ has no adapter
            PyMongoError: Propagated from the driver
        """
        scan_filter = as_filter(filter, "instance")

        def run() -> T | None:
            adapter = self._resolve(type_, "pull")
            with self._driver_errors("pull", type_):
                for candidate in self._scan(adapter, scan_filter):
                    if scan_filter.test(candidate):
                        return candidate.instance
            return None

        return Action(run)

    # -------------------------- deletes --------------------------
    def drop(self, filter: FilterLike, type_: TypeKey) -> Action[bool]:
        """
        Delete the first stored document matching filter.

        Plain predicates receive the raw document, not a deserialized
        instance. The adapter is still required so unregistered types fail.

        Args:
            filter: Predicate over documents, or an explicit ScanFilter
            type_: Type key the adapter is registered under

        Returns:
            Action[bool]: True if a document was deleted, False otherwise

        Raises (on execute):
            UnregisteredTypeError: If type_ has no adapter
            PyMongoError: Propagated from the driver
        """
        scan_filter = as_filter(filter, "document")

        def run() -> bool:
            adapter = self._resolve(type_, "drop")
            with self._driver_errors("drop", type_):
                for candidate in self._scan(adapter, scan_filter):
                    if scan_filter.test(candidate):
                        self.raw.find_one_and_delete(self._criterion(candidate.document))
                        log_with_context(logger, logging.DEBUG, "Dropped document", collection=self.name, type=type_)
                        return True
            return False

        return Action(run)

    # -------------------------- composite --------------------------
    def if_present_or_else(
        self,
        type_: type[T] | str,
        filter: FilterLike,
        on_found: Callable[[T], Any],
        on_not_found: Callable[[], Any],
    ) -> Action[bool]:
        """
        Update a stored instance in place, or run a fallback.

        Pulls the first match; if found, applies on_found to mutate the
        instance in place and writes it back with push_or_replace using the
        same filter, so every record matching filter is replaced. The return
        value of on_found is ignored. Scans twice and is not atomic.

        Args:
            type_: Type key the adapter is registered under
            filter: Predicate over instances, or an explicit ScanFilter
            on_found: Called with the pulled instance; its result is discarded
            on_not_found: Called when nothing matches

        Returns:
            Action[bool]: True if on_found ran, False if on_not_found ran
        """

        def run() -> bool:
            present = self.pull(type_, filter).execute()
            if present is None:
                on_not_found()
                return False
            on_found(present)
            self.push_or_replace(present, type_, filter, ReplaceMode.ALL).execute()
            return True

        return Action(run)

    # -------------------------- helpers --------------------------
    def _resolve(self, type_: TypeKey, operation: str) -> DataAdapter:
        return self.registry.require(type_, operation)

    def _scan(self, adapter: DataAdapter[T], scan_filter: ScanFilter) -> Iterator[Candidate[T]]:
        for document in self.raw.find(scan_filter.query):
            yield Candidate(document, adapter)

    @staticmethod
    def _criterion(document: Document) -> Document:
        if ID_FIELD in document:
            return {ID_FIELD: document[ID_FIELD]}
        return dict(document)

    @contextmanager
    def _driver_errors(self, operation: str, type_: TypeKey) -> Iterator[None]:
        try:
            yield
        except PyMongoError as exc:
            log_exception_with_context(
                logger,
                "Driver error during collection operation",
                exc,
                collection=self.name,
                operation=operation,
                type=type_display_name(type_),
            )
            raise

    def __repr__(self) -> str:
        return f"SparkCollection(name={self.name!r})"

