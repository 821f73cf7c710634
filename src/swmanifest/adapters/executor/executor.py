"""Executor adapters implementing ExecutorPort."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Callable

    from swmanifest.core.ports import ExecutorPort


class SynchronousExecutor:
    """Runs each submitted task immediately in the calling thread.

    Behaves like a pool with one worker and no background threads, which
    keeps generation deterministic in tests.
    """

    def submit(
        self,
        fn: Callable[..., object],
        *args: object,
        **kwargs: object,
    ) -> Future[object]:
        """Run fn now and return an already completed future.

        Exceptions raised by fn are stored on the future rather than
        propagated, matching ThreadPoolExecutor.
        """
        future: Future[object] = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future

    def __enter__(self) -> SynchronousExecutor:
        return self

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        return None


class ThreadPoolExecutorAdapter:
    """ExecutorPort backed by a ThreadPoolExecutor.

    A fresh pool is started each time the context is entered and shut down
    when it exits, so one adapter can serve any number of generation runs.
    """

    def __init__(self, max_workers: int | None = None) -> None:
        """Initialize the adapter.

        Args:
            max_workers: Maximum number of worker threads. None uses the
                concurrent.futures default.
        """
        self._max_workers = max_workers
        self._executor: ThreadPoolExecutor | None = None

    def submit(
        self,
        fn: Callable[..., object],
        *args: object,
        **kwargs: object,
    ) -> Future[object]:
        """Schedule fn on the pool.

        Raises:
            RuntimeError: If called outside the context manager.
        """
        if self._executor is None:
            raise RuntimeError("ThreadPoolExecutorAdapter used outside its context")
        return self._executor.submit(fn, *args, **kwargs)

    def __enter__(self) -> ThreadPoolExecutorAdapter:
        self._executor = ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="swmanifest"
        )
        return self

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)
        return None


def create_executor(workers: int) -> ExecutorPort | None:
    """Return an executor for the requested worker count.

    One worker (or fewer) means sequential listing, for which no executor
    is needed.
    """
    if workers <= 1:
        return None
    return ThreadPoolExecutorAdapter(max_workers=workers)
