"""
Input validator - checks player selections against the round's sequence
"""

from typing import TYPE_CHECKING, Callable, Tuple

from .interfaces import GameCue
from .session_state import RoundPhase
from .targets import TARGET_HINTS, Target

if TYPE_CHECKING:
    from utils import ClassLogger
    from .config import AccessibilityConfig
    from .interfaces import ICuePlayer, ILabelProvider, IPresenter, IScoreManager
    from .session_state import SessionState


class InputValidator:
    """
    Consumes player selections and tip requests.

    Synchronous and lock-free: call it from the same event loop that runs the
    orchestrator, between its suspensions.
    """

    def __init__(self,
                 state: 'SessionState',
                 presenter: 'IPresenter',
                 label_provider: 'ILabelProvider',
                 cue_player: 'ICuePlayer',
                 score_manager: 'IScoreManager',
                 accessibility: Callable[[], 'AccessibilityConfig'],
                 logger: 'ClassLogger'):
        """
        Initialize the validator.

        Args:
            state: Session state to validate against
            presenter: Receives tap feedback
            label_provider: Accessible labels for tips
            cue_player: Fire-and-forget audio cues
            score_manager: Round timer, stopped when the level completes
            accessibility: Returns the current accessibility settings
            logger: ClassLogger instance for logging
        """
        self.state = state
        self.presenter = presenter
        self.label_provider = label_provider
        self.cue_player = cue_player
        self.score_manager = score_manager
        self.accessibility = accessibility
        self.logger = logger

    def submit_selection(self, target: Target) -> bool:
        """
        Check a selected target against the next expected one.

        Selections arriving after the level is complete are accepted as
        no-ops and reported as correct.

        Args:
            target: Target the player selected

        Returns:
            True if the selection was correct, False otherwise
        """
        state = self.state
        if state.is_level_completed:
            return True
        was_game_over = state.is_game_over

        state.update(clicked_sequence=state.clicked_sequence + [target])
        expected = state.expected_target
        is_correct = expected == target

        self.presenter.show_tap_feedback(is_correct)
        if is_correct:
            state.update(ref_index=state.ref_index + 1)
            self.logger.debug(f"Correct: {target.value} ({state.ref_index}/{len(state.random_sequence)})")
        else:
            self._apply_life_penalty()
            expected_name = expected.value if expected else "nothing"
            self.logger.info(f"Wrong: {target.value}, expected {expected_name} - {state.lives} lives left")

        self.cue_player.play(GameCue.CORRECT_SELECTION if is_correct else GameCue.WRONG_SELECTION)

        if state.is_level_completed:
            self.score_manager.stop_timer()
            self.cue_player.play(GameCue.LEVEL_COMPLETED)
            state.update(phase=RoundPhase.LEVEL_COMPLETED)
            self.logger.info(
                f"Level {state.level} completed in {state.attempts} attempts "
                f"({state.lost_lives_this_level} mistakes)"
            )
        elif state.is_game_over and not was_game_over:
            state.update(phase=RoundPhase.GAME_OVER)
            self.logger.info(f"Game over at level {state.level} - total score {state.total_score}")

        return is_correct

    def request_tip(self) -> Tuple[str, ...]:
        """
        Reveal where the next expected target is.

        Returns:
            (accessible label, directional hint), or an empty tuple if the
            sequence is empty or already fully selected
        """
        state = self.state
        next_target = state.expected_target
        if not state.random_sequence or next_target is None:
            return ()

        config = self.accessibility()
        if not config.has_unlimited_tips and state.taken_tips < config.tip_allowance:
            state.update(taken_tips=state.taken_tips + 1)

        self.logger.debug(f"Tip taken for {next_target.value} ({state.taken_tips} used)")
        return (self.label_provider.label_for(next_target), TARGET_HINTS[next_target])

    def _apply_life_penalty(self) -> None:
        """Deduct a life unless lives are infinite; the round's mistake count always grows"""
        state = self.state
        if not self.accessibility().has_infinite_lives:
            # Lives clamp at zero, but every mistake still counts as lost
            state.update(
                lives=max(0, state.lives - 1),
                lost_lives_total=state.lost_lives_total + 1
            )
        state.update(lost_lives_this_level=state.lost_lives_this_level + 1)
