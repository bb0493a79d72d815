"""
Fixed-rate driver
"""

from typing import Callable, Optional

from space_game.constants import TICK_MS
from space_game.utils import logger

Task = Callable[[], None]


class FixedRateDriver:
    """
    Runs at most one armed task once per period

    The host paces the calls to :meth:`step`; the driver only decides what,
    if anything, runs on each of them.
    """

    def __init__(self, period_ms: int = TICK_MS):
        """
        :param period_ms: Milliseconds between two steps
        :type period_ms: int
        """
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        self.period_ms = period_ms
        self.ticks = 0
        self._task: Optional[Task] = None

    @property
    def rate(self) -> float:
        """Steps per second"""
        return 1000 / self.period_ms

    @property
    def armed(self) -> bool:
        return self._task is not None

    def start(self, task: Task) -> None:
        """
        Arm the driver with a task

        :param task: Callable run on every step
        :type task: Callable

        :raise RuntimeError: If a task is already armed
        """
        if self._task is not None:
            raise RuntimeError("driver already armed; stop it first")
        logger.debug(f"Arming driver with {getattr(task, '__name__', task)}")
        self._task = task

    def stop(self) -> None:
        """Disarm the driver; stopping an idle driver does nothing"""
        self._task = None

    def step(self) -> bool:
        """
        Run the armed task once

        :return: True if a task ran
        :rtype: bool
        """
        if self._task is None:
            return False
        self.ticks += 1
        self._task()
        return True
