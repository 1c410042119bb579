"""
Round orchestrator - drives one round from reset to awaiting input
"""

import asyncio
from typing import TYPE_CHECKING, Callable

from .errors import GameOverError, RoundInProgressError
from .interfaces import GameCue
from .session_state import RoundPhase

if TYPE_CHECKING:
    from utils import ClassLogger
    from .config import AccessibilityConfig, TimingConfig
    from .interfaces import ICuePlayer, IPresenter, IScoreManager
    from .sequence_generator import SequenceGenerator
    from .session_state import SessionState


class RoundOrchestrator:
    """
    Runs the round lifecycle on a single cooperative task.

    Phases:
        IDLE → SETTLING → COUNTING_DOWN → PRESENTING → AWAITING_INPUT
        AWAITING_INPUT → PRESENTING → AWAITING_INPUT   (replay_round)

    Nothing here is cancellable: once the countdown or a presentation has
    begun it runs to completion. Accessibility settings are read once at the
    start of start_round().
    """

    def __init__(self,
                 state: 'SessionState',
                 generator: 'SequenceGenerator',
                 presenter: 'IPresenter',
                 cue_player: 'ICuePlayer',
                 score_manager: 'IScoreManager',
                 accessibility: Callable[[], 'AccessibilityConfig'],
                 timing: 'TimingConfig',
                 logger: 'ClassLogger'):
        """
        Initialize the orchestrator.

        Args:
            state: Session state to drive
            generator: Sequence generator for new rounds
            presenter: Shows countdown steps, highlights and subtitles
            cue_player: Fire-and-forget audio cues
            score_manager: Round timer and score formula
            accessibility: Returns the current accessibility settings
            timing: Pacing constants
            logger: ClassLogger instance for logging
        """
        self.state = state
        self.generator = generator
        self.presenter = presenter
        self.cue_player = cue_player
        self.score_manager = score_manager
        self.accessibility = accessibility
        self.timing = timing
        self.logger = logger

        self._round_in_flight = False

    @property
    def is_round_in_flight(self) -> bool:
        """True while start_round() has not finished"""
        return self._round_in_flight

    async def start_round(self, reset: bool = False) -> None:
        """
        Start the next round, or a brand new game if reset is set.

        Score accrual runs one round behind: the round that just finished is
        added to the total here, not when it was completed.

        Args:
            reset: Reinitialize lives, level, tips and score first

        Raises:
            RoundInProgressError: If a round start is already running
            GameOverError: If all lives are lost and reset is not set
        """
        if self._round_in_flight:
            raise RoundInProgressError("start_round() called while a round start is in flight")
        if not reset and self.state.is_game_over:
            raise GameOverError("No lives left - start a new game with reset=True")

        self._round_in_flight = True
        try:
            await self._run_round(reset)
        finally:
            self._round_in_flight = False

    async def _run_round(self, reset: bool) -> None:
        state = self.state
        config = self.accessibility()

        if reset:
            self.logger.info(f"New game: {config.max_lives} lives, {config.tip_allowance} tips")
            state.update(
                lives=config.max_lives,
                level=0,
                taken_tips=0,
                lost_lives_total=0,
                total_score=0,
                random_sequence=[]
            )

        if state.is_level_started and not reset:
            round_score = self.score_manager.score(state.level, state.lost_lives_this_level)
            state.update(total_score=state.total_score + round_score)
            self.logger.info(f"Level {state.level} scored {round_score} (total {state.total_score})")

        state.update(
            lost_lives_this_level=0,
            is_counting_down=True,
            is_level_started=False,
            clicked_sequence=[]
        )
        if state.is_extreme_mode:
            self.generator.clear(state)
        state.update(is_playing_sequence=True, ref_index=0, phase=RoundPhase.SETTLING)

        await self._wait(self.timing.settle_delay_ms)
        await self._count_down(config.countdown_steps)

        state.update(level=state.level + 1)
        self.generator.generate(state)
        self.logger.info(f"Level {state.level} started ({len(state.random_sequence)} targets)")

        state.update(phase=RoundPhase.PRESENTING)
        await self._present_sequence()

        state.update(
            is_level_started=True,
            is_playing_sequence=False,
            phase=RoundPhase.AWAITING_INPUT
        )
        self.score_manager.start_timer()
        self.presenter.set_subtitle("")

    async def replay_round(self) -> None:
        """
        Present the current sequence again without touching the player's progress.

        Does nothing before the level has started. Overlapping replays are not
        guarded against.
        """
        state = self.state
        if not state.is_level_started:
            return

        self.logger.debug(f"Replaying level {state.level} sequence")
        resume_phase = state.phase
        self.score_manager.pause_timer()
        state.update(is_playing_sequence=True, phase=RoundPhase.PRESENTING)

        await self._wait(self.timing.replay_delay_ms)
        await self._present_sequence()

        # A selection made during the replay may have finished the round
        if state.phase == RoundPhase.PRESENTING:
            state.update(phase=resume_phase)
        state.update(is_playing_sequence=False)
        self.score_manager.resume_timer()

    async def _count_down(self, steps: int) -> None:
        """
        Show the countdown from steps down to 1, then announce the round.

        Args:
            steps: Number to count down from
        """
        self.state.update(is_counting_down=True, phase=RoundPhase.COUNTING_DOWN)

        for counter in range(steps, 0, -1):
            self.presenter.show_countdown(f"{counter}")
            self.cue_player.play(GameCue.COUNTDOWN)
            await self._wait(self.timing.countdown_tick_ms)

        self.cue_player.play(GameCue.ROUND_STARTED)
        self.presenter.show_countdown("")
        await self._wait(self.timing.countdown_tail_ms)
        self.state.update(is_counting_down=False)

    async def _present_sequence(self) -> None:
        """Highlight every target of the sequence, one after the other"""
        # Iterate a copy: the sequence must not change while it is on screen
        for target in tuple(self.state.random_sequence):
            await self.presenter.highlight(target)

    async def _wait(self, delay_ms: int) -> None:
        await asyncio.sleep(delay_ms / 1000.0)
