"""
Level score manager - pausable round stopwatch and score formula
"""

import time
from typing import Callable, Optional

from gameplay_system.interfaces import IScoreManager


# Points per target of a level
POINTS_PER_TARGET = 100

# Deducted per wrong selection
MISTAKE_PENALTY = 25

# Deducted per full second on the clock
SECOND_PENALTY = 2

# Seconds per target a three-star player is allowed
THREE_STAR_SECONDS_PER_TARGET = 2


class LevelScoreManager(IScoreManager):
    """
    Times a round and turns level, mistakes and time into points.

    The stopwatch only runs between start_timer() and stop_timer() and can be
    paused while the sequence is replayed.

    Example:
        manager = LevelScoreManager()
        manager.start_timer()
        ...
        manager.stop_timer()
        manager.score(level=3, lost_lives=1)   # 300 - 25 - 2 * seconds
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Initialize score manager.

        Args:
            clock: Monotonic time source in seconds
        """
        self.clock = clock
        self._accumulated = 0.0
        self._running_since: Optional[float] = None
        self._paused = False

    @property
    def is_running(self) -> bool:
        return self._running_since is not None

    def start_timer(self) -> None:
        """Reset and start the stopwatch"""
        self._accumulated = 0.0
        self._paused = False
        self._running_since = self.clock()

    def pause_timer(self) -> None:
        """Pause a running stopwatch"""
        if self._running_since is None:
            return
        self._accumulated += self.clock() - self._running_since
        self._running_since = None
        self._paused = True

    def resume_timer(self) -> None:
        """Resume a paused stopwatch (a stopped one stays stopped)"""
        if not self._paused:
            return
        self._paused = False
        self._running_since = self.clock()

    def stop_timer(self) -> None:
        """Stop the stopwatch and keep the elapsed time"""
        if self._running_since is not None:
            self._accumulated += self.clock() - self._running_since
        self._running_since = None
        self._paused = False

    def elapsed(self) -> float:
        """Seconds on the stopwatch so far"""
        if self._running_since is None:
            return self._accumulated
        return self._accumulated + self.clock() - self._running_since

    def score(self, level: int, lost_lives: int) -> int:
        """
        Score of the current round, never below zero.

        Args:
            level: Level that was played
            lost_lives: Wrong selections during the round
        """
        points = (
            level * POINTS_PER_TARGET
            - lost_lives * MISTAKE_PENALTY
            - int(self.elapsed()) * SECOND_PENALTY
        )
        return max(0, points)

    def three_star_score(self, level: int) -> int:
        """Score of a flawless round played at three-star pace"""
        allowed_seconds = level * THREE_STAR_SECONDS_PER_TARGET
        return max(0, level * POINTS_PER_TARGET - allowed_seconds * SECOND_PENALTY)
