"""Worker pool for spelling and style analysis."""

import asyncio
import functools
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AnalysisPool:
    """
    Runs CPU-bound text analysis off the event loop.

    Threads are started on first use and released by ``shutdown``; a
    pool that was shut down starts again on the next ``run``, so a
    closed Proofreader stays usable.

    Example:
        pool = AnalysisPool(max_workers=4)
        spelling, style = await asyncio.gather(
            pool.run(check_spelling, text),
            pool.run(check_style, text),
        )
        pool.shutdown()
    """

    def __init__(self, max_workers: int = 4) -> None:
        """
        Initialize the pool.

        Args:
            max_workers: Number of worker threads

        Raises:
            ValueError: If ``max_workers`` is less than 1
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.max_workers = max_workers
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def running(self) -> bool:
        return self._executor is not None

    def _ensure_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.max_workers,
                thread_name_prefix="proofreader-analysis",
            )
            logger.debug(f"Started analysis pool with {self.max_workers} workers")
        return self._executor

    async def run(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run ``func(*args, **kwargs)`` on a worker thread and await the result."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._ensure_executor(), functools.partial(func, *args, **kwargs))

    def shutdown(self, wait: bool = True) -> None:
        """
        Stop the worker threads.

        Args:
            wait: Wait for queued work to finish; if False it is cancelled
        """
        if self._executor is None:
            return
        self._executor.shutdown(wait=wait, cancel_futures=not wait)
        self._executor = None
        logger.debug("Analysis pool stopped")
