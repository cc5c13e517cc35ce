"""
Scheduler backed by asyncio tasks on the running event loop.
"""

import asyncio
import logging
from typing import Set

from ..interfaces.scheduler import IScheduler, Job

logger = logging.getLogger(__name__)


class AsyncioScheduler(IScheduler):
    """
    Runs jobs as background tasks on the current event loop.

    Must be used from inside a running loop (e.g. the FastAPI lifespan).
    Each periodic tick starts the job as its own task, so a slow run never
    delays the next tick.
    """

    def __init__(self):
        self.__tasks: Set[asyncio.Task] = set()

    def run_now(self, job: Job) -> None:
        self._spawn(self._run_job(job))

    def run_every(self, interval_seconds: float, job: Job) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._spawn(self._tick(interval_seconds, job))

    async def shutdown(self) -> None:
        tasks = list(self.__tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self.__tasks.clear()

    @property
    def pending(self) -> int:
        """Number of live timers and running jobs"""
        return len(self.__tasks)

    def _spawn(self, coro) -> asyncio.Task:
        task = asyncio.create_task(coro)
        # The loop only keeps weak references to tasks
        self.__tasks.add(task)
        task.add_done_callback(self.__tasks.discard)
        return task

    async def _tick(self, interval_seconds: float, job: Job) -> None:
        while True:
            await asyncio.sleep(interval_seconds)
            self._spawn(self._run_job(job))

    @staticmethod
    async def _run_job(job: Job) -> None:
        try:
            await job()
        except Exception:
            logger.exception(f"Scheduled job {getattr(job, '__qualname__', job)!r} failed")
