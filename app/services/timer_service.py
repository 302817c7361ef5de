"""
Timer Service - Countdown timer logic.

Architecture Decision: Poll-driven state
The timer does not own a QTimer or thread. Remaining time is a pure function
of (start_time, duration, now); the window asks for it once per frame and
calls stop() when it reaches zero. Nothing fires behind the caller's back, so
there is nothing to cancel.
"""

import logging
import math
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)

PLACEHOLDER = "--:--"


class CountdownTimer:
    """
    Two-state countdown: Idle or Running.

    Invariant: running implies start_time and duration_seconds are set.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock
        self.start_time: Optional[float] = None
        self.duration_seconds: Optional[int] = None
        self.running = False

    def _now(self, now: Optional[float]) -> float:
        return self.clock() if now is None else now

    def start(self, minutes: int, now: Optional[float] = None):
        """
        Start counting down from the given number of minutes.

        Starting while already running restarts the countdown.
        """
        if minutes <= 0:
            raise ValueError(f"Timer duration must be positive, got {minutes} minutes")
        if self.running:
            logger.debug("Restarting running timer")
        self.start_time = self._now(now)
        self.duration_seconds = int(minutes) * 60
        self.running = True
        logger.info("Timer started for %d minutes", minutes)

    def stop(self):
        """Return to Idle. Safe to call in either state."""
        if self.running:
            logger.info("Timer stopped")
        self.start_time = None
        self.duration_seconds = None
        self.running = False

    def remaining(self, now: Optional[float] = None) -> Optional[float]:
        """Seconds left, None when idle. May be zero or negative once expired."""
        if not self.running:
            return None
        elapsed = self._now(now) - self.start_time
        return self.duration_seconds - elapsed

    def is_expired(self, now: Optional[float] = None) -> bool:
        remaining = self.remaining(now)
        return remaining is not None and remaining <= 0


def format_countdown(remaining: Optional[float]) -> str:
    """Format remaining seconds as M:SS, or a placeholder when idle"""
    if remaining is None:
        return PLACEHOLDER
    # Round up so a fresh 30 minute run reads 30:00 for its first second
    total = max(math.ceil(remaining), 0)
    minutes, seconds = divmod(total, 60)
    return f"{minutes}:{seconds:02d}"
