"""
Deferred action wrappers.

An Action captures a zero-argument computation at construction time and runs
it only when execute() is called. Nothing is scheduled implicitly: callers
choose where the work runs (inline, an executor, or a worker thread from an
event loop).

Dependencies: asyncio, concurrent.futures
System role: Uniform deferred-execution contract for collection operations
"""

import asyncio
from concurrent.futures import Executor, Future
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Action(Generic[T]):
    """
    Deferred computation producing a value of type T.

    Results are not memoized: every execute() re-runs the wrapped callable.
    Exceptions raised by the computation propagate unmodified.

    Example:
        >>> action = Action(lambda: 21 * 2)
        >>> action.execute()
        42
    """

    def __init__(self, computation: Callable[[], T]) -> None:
        """
        Capture the computation without running it.

        Args:
            computation: Zero-argument callable run by execute()
        """
        self._computation = computation

    def execute(self) -> T:
        """
        Run the computation on the calling thread.

        Returns:
            T: Whatever the computation returns
        """
        return self._computation()

    async def execute_async(self) -> T:
        """
        Run the computation in a worker thread and await its result.

        Returns:
            T: Whatever the computation returns
        """
        return await asyncio.to_thread(self.execute)

    def submit(self, executor: Executor) -> "Future[T]":
        """
        Schedule execute() on a caller-provided executor.

        Args:
            executor: Thread or process pool owned by the caller

        Returns:
            Future[T]: Future resolved with the computation result
        """
        return executor.submit(self.execute)

    def map(self, fn: Callable[[T], U]) -> "Action[U]":
        """
        Compose a post-processing step, still deferred.

        Args:
            fn: Function applied to this action's result

        Returns:
            Action[U]: New action running this one and then fn
        """
        return Action(lambda: fn(self.execute()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._computation!r})"


class VoidAction(Action[None]):
    """Deferred computation executed for its side effects only."""

    def execute(self) -> None:
        """Run the computation and discard its return value."""
        self._computation()
