"""Courtesy delay between consecutive paginated API calls."""

import time
from typing import Callable

from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_PAGE_DELAY = 0.5


class CourtesyDelay:
    """
    Fixed pause between consecutive page requests.

    This is not an adaptive rate limiter: every call to :meth:`wait` sleeps
    for the same amount of time, no matter how fast the API answered.
    """

    def __init__(self, delay: float = DEFAULT_PAGE_DELAY, sleep: Callable[[float], None] = time.sleep):
        """
        Initialize courtesy delay.

        Args:
            delay: Seconds to pause per call to wait()
            sleep: Blocking sleep function
        """
        if delay < 0:
            raise ValueError("delay must not be negative")
        self.delay = delay
        self._sleep = sleep
        self.waits = 0

    def wait(self) -> None:
        """Block for the configured delay."""
        self.waits += 1
        if self.delay:
            logger.debug(f"Sleeping {self.delay:.2f}s before next page")
            self._sleep(self.delay)


class NoDelay(CourtesyDelay):
    """Courtesy delay that never sleeps, for tests and scripted use."""

    def __init__(self):
        super().__init__(delay=0)
