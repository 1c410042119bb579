"""
Mock Cue Controller - No-op cue player for testing and muted play
"""

from typing import List

from gameplay_system.interfaces import GameCue, ICuePlayer


class MockCueController(ICuePlayer):
    """
    Mock implementation of CueSoundController that performs no audio operations.

    Records every cue in `played` so tests can assert on the cue order.
    """

    def __init__(self, logger):
        """
        Initialize mock cue controller.

        Args:
            logger: ClassLogger instance for logging
        """
        self.logger = logger
        self.played: List[GameCue] = []

        self.logger.info("🔇 MockCueController initialized (audio disabled)")

    def play(self, cue: GameCue) -> None:
        """Mock: Record the cue instead of playing it"""
        self.played.append(cue)
        self.logger.debug(f"Mock: Playing cue {cue.value}")

    def cleanup(self) -> None:
        """Mock: Nothing to release"""
        pass
