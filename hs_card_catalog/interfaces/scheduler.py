"""
Scheduler interface - how the application runs catalog refreshes.

Keeping this behind an interface lets tests trigger jobs deterministically
instead of waiting on real timers.
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

Job = Callable[[], Awaitable[Any]]


class IScheduler(ABC):

    @abstractmethod
    def run_now(self, job: Job) -> None:
        """
        Start a job immediately without waiting for it.

        Args:
            job: Coroutine function taking no arguments
        """
        pass

    @abstractmethod
    def run_every(self, interval_seconds: float, job: Job) -> None:
        """
        Start a job every interval, for as long as the scheduler runs.

        The first run happens one interval from now. Runs are started on
        schedule whether or not earlier runs succeeded.

        Args:
            interval_seconds: Time between starts
            job: Coroutine function taking no arguments
        """
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Stop all timers and pending jobs."""
        pass
