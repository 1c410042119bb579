"""
Abstract interfaces for the collaborators a gameplay session depends on
"""

import enum
from abc import ABC, abstractmethod

from .targets import Target


class GameCue(enum.Enum):
    """One-way audio notifications emitted by the session"""
    CORRECT_SELECTION = "correct_selection"
    WRONG_SELECTION = "wrong_selection"
    LEVEL_COMPLETED = "level_completed"
    COUNTDOWN = "countdown"
    ROUND_STARTED = "round_started"


class IPresenter(ABC):
    """
    Abstract interface for showing the session to the player.

    Implementations can render to a console, a GUI, LEDs, a web view, etc.
    The session only ever calls these by target identifier.
    """

    @abstractmethod
    async def highlight(self, target: Target) -> None:
        """
        Highlight a single target.

        Must not return until the visual/audio cue for the target has finished,
        so that sequential presentation keeps its pacing.

        Args:
            target: Target to highlight
        """
        pass

    @abstractmethod
    def show_countdown(self, text: str) -> None:
        """
        Display a countdown step.

        Args:
            text: Step to display, or an empty string to clear the display
        """
        pass

    @abstractmethod
    def set_subtitle(self, text: str) -> None:
        """Replace the subtitle text (empty string clears it)"""
        pass

    @abstractmethod
    def show_tap_feedback(self, is_correct: bool) -> None:
        """Show correct/incorrect feedback for the last selection"""
        pass


class ILabelProvider(ABC):
    """Provides the accessible label of a rendered target"""

    @abstractmethod
    def label_for(self, target: Target) -> str:
        """
        Get the accessible label for a target.

        Args:
            target: Target to look up

        Returns:
            Label text, or an empty string if the target has no label
        """
        pass


class ICuePlayer(ABC):
    """Fire-and-forget audio cue playback"""

    @abstractmethod
    def play(self, cue: GameCue) -> None:
        """Start playing a cue and return immediately"""
        pass


class IScoreManager(ABC):
    """
    Abstract interface for the per-round timer and score formula.

    The session drives the timer and asks for scores; it never does the
    arithmetic itself.
    """

    @abstractmethod
    def start_timer(self) -> None:
        """Start timing a fresh round"""
        pass

    @abstractmethod
    def pause_timer(self) -> None:
        """Pause the round timer"""
        pass

    @abstractmethod
    def resume_timer(self) -> None:
        """Resume a paused round timer"""
        pass

    @abstractmethod
    def stop_timer(self) -> None:
        """Stop the round timer"""
        pass

    @abstractmethod
    def elapsed(self) -> float:
        """Seconds the player needed for the current round"""
        pass

    @abstractmethod
    def score(self, level: int, lost_lives: int) -> int:
        """
        Score of the current round.

        Args:
            level: Level that was played
            lost_lives: Wrong selections during the round
        """
        pass

    @abstractmethod
    def three_star_score(self, level: int) -> int:
        """Score needed at the given level to earn all three stars"""
        pass
