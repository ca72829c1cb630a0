"""Periodic peak-memory sampling for a single benchmark iteration."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import psutil

from crawlbench.models.constants import MB

MemoryReader = Callable[[], float]


def process_memory_mb(include_children: bool = True) -> float:
    """Return the resident memory of this process in MB (2 decimals).

    Args:
        include_children: Add the RSS of every descendant process, such as
            the Chromium instance started by Playwright.
    """
    process = psutil.Process()
    rss = process.memory_info().rss
    if include_children:
        for child in process.children(recursive=True):
            try:
                rss += child.memory_info().rss
            except (psutil.NoSuchProcess, psutil.AccessDenied):
                continue
    return round(rss / MB, 2)


class MemorySampler:
    """Tracks the highest memory reading seen since the last ``reset``.

    Sampling runs as an asyncio task on the caller's event loop, so readings
    only happen between await points of the monitored coroutine; the
    interval is a lower bound on the spacing between samples. The peak is
    only written by ``sample()`` and only read once the task is stopped.

    Example:
        >>> sampler = MemorySampler(interval_seconds=0.1)
        >>> baseline = sampler.read()
        >>> sampler.reset(baseline)
        >>> sampler.start()
        >>> try:
        ...     await crawl()
        ... finally:
        ...     await sampler.stop()
        >>> sampler.sample()
        >>> sampler.delta(baseline)
    """

    def __init__(
        self,
        interval_seconds: float = 0.1,
        reader: MemoryReader | None = None,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be greater than zero")

        self.interval_seconds = interval_seconds
        self._reader: MemoryReader = reader or process_memory_mb
        self._peak = 0.0
        self._task: asyncio.Task[None] | None = None

    @property
    def peak(self) -> float:
        """Highest reading since the last reset."""
        return self._peak

    @property
    def running(self) -> bool:
        """True while the periodic task is scheduled."""
        return self._task is not None and not self._task.done()

    def read(self) -> float:
        """Take a reading without touching the peak."""
        return self._reader()

    def reset(self, baseline: float) -> None:
        """Start a new measurement with ``baseline`` as the running peak."""
        self._peak = baseline

    def sample(self) -> float:
        """Take a reading and raise the peak if it is higher."""
        current = self._reader()
        if current > self._peak:
            self._peak = current
        return current

    def delta(self, baseline: float) -> float:
        """Additional memory over ``baseline``, floored at zero."""
        return round(max(0.0, self._peak - baseline), 2)

    def start(self) -> None:
        """Schedule periodic sampling on the running event loop."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def stop(self) -> None:
        """Cancel periodic sampling and wait until the task has finished.

        Raises:
            asyncio.CancelledError: If the calling task itself is cancelled
                while waiting.
        """
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            self.sample()
