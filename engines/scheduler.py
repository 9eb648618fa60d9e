"""Bounded worker pool shared by the coders for fan-out/fan-in phases."""

import atexit
import logging
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Iterable, List, Optional, TypeVar

import psutil

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


def default_worker_count() -> int:
    """Logical CPU count, at least 1."""
    return max(1, psutil.cpu_count(logical=True) or 1)


class ReconstructionScheduler:
    """
    Fixed-size thread pool that runs one phase of independent work units.

    Each call to `run_all` is a barrier: it returns only after every unit of
    the phase has finished. Units must not submit nested work to the same
    scheduler, since a full pool would then wait on itself.
    """

    def __init__(self, max_workers: Optional[int] = None):
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self.max_workers = max_workers or default_worker_count()
        self._executor = ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix='reconstruct',
        )
        self._closed = False
        self._lock = threading.Lock()
        logger.debug("Started scheduler with %d workers", self.max_workers)

    @property
    def closed(self) -> bool:
        return self._closed

    def run_all(self, fn: Callable[[T], R], work_items: Iterable[T]) -> List[R]:
        """
        Run `fn` on every item and return results in submission order.

        If any unit raises, the remaining units still run to completion and
        the first failure (in submission order) is re-raised.
        """
        with self._lock:
            if self._closed:
                raise RuntimeError("Scheduler has been shut down")
            futures = [self._executor.submit(fn, item) for item in work_items]

        wait(futures)
        for future in futures:
            error = future.exception()
            if error is not None:
                raise error
        return [future.result() for future in futures]

    def shutdown(self, wait_for_pending: bool = True) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._executor.shutdown(wait=wait_for_pending)
        logger.debug("Scheduler shut down")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()
        return False


_default_scheduler: Optional[ReconstructionScheduler] = None
_default_lock = threading.Lock()
_exit_hook_registered = False


def get_default_scheduler() -> ReconstructionScheduler:
    """Process-wide scheduler, created on first use and closed at exit."""
    global _default_scheduler, _exit_hook_registered
    with _default_lock:
        if _default_scheduler is None or _default_scheduler.closed:
            _default_scheduler = ReconstructionScheduler()
            if not _exit_hook_registered:
                atexit.register(shutdown_default_scheduler)
                _exit_hook_registered = True
        return _default_scheduler


def shutdown_default_scheduler() -> None:
    global _default_scheduler
    with _default_lock:
        scheduler, _default_scheduler = _default_scheduler, None
    if scheduler is not None:
        scheduler.shutdown()
