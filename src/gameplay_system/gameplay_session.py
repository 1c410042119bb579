"""
Gameplay session - composition of state, generator, orchestrator and validator
"""

import random
from typing import TYPE_CHECKING, Optional, Tuple

from .config import AccessibilityConfig, TimingConfig
from .input_validator import InputValidator
from .round_orchestrator import RoundOrchestrator
from .sequence_generator import SequenceGenerator
from .session_state import SessionSnapshot, SessionState, StateListener

if TYPE_CHECKING:
    from utils import ClassLogger
    from .interfaces import ICuePlayer, ILabelProvider, IPresenter, IScoreManager
    from .targets import Target


class GameplaySession:
    """
    One player's memory game session.

    This is the object a view layer gets handed by the composition root.
    It owns the SessionState exclusively; consumers read derived values
    through the properties below or subscribe with add_listener().

    Usage:
        session = GameplaySession(presenter, labels, cues, scores, logger)
        await session.start_round(reset=True)
        session.submit_selection(Target.TOP_LEFT)
        if session.is_level_completed:
            await session.start_round()
    """

    def __init__(self,
                 presenter: 'IPresenter',
                 label_provider: 'ILabelProvider',
                 cue_player: 'ICuePlayer',
                 score_manager: 'IScoreManager',
                 logger: 'ClassLogger',
                 accessibility: Optional[AccessibilityConfig] = None,
                 timing: Optional[TimingConfig] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the session and wire its components.

        Args:
            presenter: Shows highlights, countdown, subtitles and tap feedback
            label_provider: Accessible labels used by tips
            cue_player: Fire-and-forget audio cues
            score_manager: Round timer and score formula
            logger: ClassLogger instance; components get their own class loggers from it
            accessibility: Difficulty settings (defaults to AccessibilityConfig())
            timing: Pacing constants (defaults to TimingConfig())
            rng: Random source for sequence generation

        Raises:
            ValueError: If a configuration is invalid
        """
        self.accessibility = accessibility if accessibility is not None else AccessibilityConfig()
        self.timing = timing if timing is not None else TimingConfig()
        self.accessibility.validate()
        self.timing.validate()

        self.logger = logger
        self.score_manager = score_manager
        self._state = SessionState(lives=self.accessibility.max_lives)

        self.generator = SequenceGenerator(
            logger=logger.create_class_logger("SequenceGenerator"),
            rng=rng
        )
        self.orchestrator = RoundOrchestrator(
            state=self._state,
            generator=self.generator,
            presenter=presenter,
            cue_player=cue_player,
            score_manager=score_manager,
            accessibility=self._get_accessibility,
            timing=self.timing,
            logger=logger.create_class_logger("RoundOrchestrator")
        )
        self.validator = InputValidator(
            state=self._state,
            presenter=presenter,
            label_provider=label_provider,
            cue_player=cue_player,
            score_manager=score_manager,
            accessibility=self._get_accessibility,
            logger=logger.create_class_logger("InputValidator")
        )

        self.logger.info(
            f"GameplaySession initialized: {self.accessibility.max_lives} lives, "
            f"{self.accessibility.tip_allowance} tips, {self.accessibility.countdown_steps}s countdown"
        )

    def _get_accessibility(self) -> AccessibilityConfig:
        return self.accessibility

    # Round control

    async def start_round(self, reset: bool = False) -> None:
        """
        Start the next round (see RoundOrchestrator.start_round).

        Precondition: no other start_round() is running. Callers that may
        overlap should check is_round_in_flight first; a violation raises
        RoundInProgressError.
        """
        await self.orchestrator.start_round(reset)

    async def replay_round(self) -> None:
        """Present the current sequence again (no-op before the level started)"""
        await self.orchestrator.replay_round()

    def submit_selection(self, target: 'Target') -> bool:
        """Validate a player selection, True if it was correct"""
        return self.validator.submit_selection(target)

    def request_tip(self) -> Tuple[str, ...]:
        """(label, hint) for the next expected target, or () if none is pending"""
        return self.validator.request_tip()

    # Settings

    def set_extreme_mode(self, enabled: bool) -> None:
        """Toggle extreme mode; takes effect at the next round start"""
        self._state.update(is_extreme_mode=enabled)
        self.logger.info(f"Extreme mode {'enabled' if enabled else 'disabled'}")

    def update_accessibility(self, accessibility: AccessibilityConfig) -> None:
        """
        Replace the accessibility settings.

        A phase that is already running keeps the values it read at its start.

        Raises:
            ValueError: If the new settings are invalid
        """
        accessibility.validate()
        self.accessibility = accessibility
        self.logger.info(f"Accessibility settings updated: {accessibility}")

    def update_player_lives(self, max_lives: int) -> None:
        """
        Recalculate remaining lives after the lives setting changed mid-game.

        Args:
            max_lives: New max-lives setting
        """
        new_lives = max_lives - self._state.lost_lives_total
        self._state.update(lives=new_lives if new_lives >= 0 else 0)

    # Observation

    def add_listener(self, listener: StateListener) -> None:
        """Subscribe to field changes: listener(field_name, state)"""
        self._state.add_listener(listener)

    def remove_listener(self, listener: StateListener) -> None:
        self._state.remove_listener(listener)

    def snapshot(self) -> SessionSnapshot:
        return self._state.snapshot()

    # Derived values

    @property
    def level(self) -> int:
        return self._state.level

    @property
    def lives(self) -> int:
        return self._state.lives

    @property
    def total_score(self) -> int:
        return self._state.total_score

    @property
    def taken_tips(self) -> int:
        return self._state.taken_tips

    @property
    def lost_lives_this_level(self) -> int:
        return self._state.lost_lives_this_level

    @property
    def remaining_tips(self) -> int:
        """Tips left under the current allowance, never negative"""
        return max(0, self.accessibility.tip_allowance - self._state.taken_tips)

    @property
    def attempts(self) -> int:
        return self._state.attempts

    @property
    def is_game_over(self) -> bool:
        return self._state.is_game_over

    @property
    def is_level_completed(self) -> bool:
        return self._state.is_level_completed

    @property
    def is_playing_sequence(self) -> bool:
        return self._state.is_playing_sequence

    @property
    def is_counting_down(self) -> bool:
        return self._state.is_counting_down

    @property
    def is_level_started(self) -> bool:
        return self._state.is_level_started

    @property
    def is_round_in_flight(self) -> bool:
        """True while a start_round() call has not returned"""
        return self.orchestrator.is_round_in_flight

    @property
    def is_extreme_mode(self) -> bool:
        return self._state.is_extreme_mode

    @property
    def round_score(self) -> int:
        """Score of the current round, as computed by the score manager"""
        return self.score_manager.score(self._state.level, self._state.lost_lives_this_level)

    @property
    def three_star_threshold(self) -> int:
        return self.score_manager.three_star_score(self._state.level)

    @property
    def elapsed_round_time(self) -> float:
        """Seconds the player has spent on the current round"""
        return self.score_manager.elapsed()
