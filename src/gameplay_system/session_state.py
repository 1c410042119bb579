"""
Session state - single source of truth for a running memory game

Owns every mutable game field. The round orchestrator and the input validator
are the only writers; view layers either poll snapshot() or register a
listener and get told which field changed.
"""

import enum
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .targets import Target


class RoundPhase(enum.Enum):
    """Where the current round is in its lifecycle"""
    IDLE = "idle"
    SETTLING = "settling"
    COUNTING_DOWN = "counting_down"
    PRESENTING = "presenting"
    AWAITING_INPUT = "awaiting_input"
    LEVEL_COMPLETED = "level_completed"
    GAME_OVER = "game_over"


StateListener = Callable[[str, 'SessionState'], None]


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable copy of the observable session values"""
    phase: RoundPhase
    level: int
    lives: int
    total_score: int
    taken_tips: int
    attempts: int
    random_sequence: Tuple[Target, ...]
    clicked_sequence: Tuple[Target, ...]
    ref_index: int
    is_playing_sequence: bool
    is_counting_down: bool
    is_level_started: bool
    is_extreme_mode: bool
    is_level_completed: bool
    is_game_over: bool


class SessionState:
    """
    Mutable fields of one gameplay session.

    Invariants kept by the writers:
    - ref_index only grows, by one per correct selection, up to len(random_sequence)
    - lives stays between 0 and the configured maximum
    - random_sequence is replaced only when a new round is generated
    """

    def __init__(self, lives: int = 5):
        """
        Initialize a fresh session.

        Args:
            lives: Starting number of lives
        """
        self.phase = RoundPhase.IDLE
        self.level = 0
        self.lives = lives
        self.lost_lives_total = 0
        self.lost_lives_this_level = 0
        self.taken_tips = 0
        self.total_score = 0

        self.random_sequence: List[Target] = []
        self.clicked_sequence: List[Target] = []
        self.ref_index = 0

        # The first round shows its countdown before anything else
        self.is_playing_sequence = True
        self.is_counting_down = True
        self.is_level_started = False
        self.is_extreme_mode = False

        self._listeners: List[StateListener] = []

    # Derived values

    @property
    def attempts(self) -> int:
        """Number of selections made this round, wrong ones included"""
        return len(self.clicked_sequence)

    @property
    def is_game_over(self) -> bool:
        return self.lives <= 0

    @property
    def is_level_completed(self) -> bool:
        return self.is_level_started and self.ref_index == len(self.random_sequence)

    @property
    def expected_target(self) -> Optional[Target]:
        """Next target the player has to select, None if nothing is pending"""
        if self.ref_index >= len(self.random_sequence):
            return None
        return self.random_sequence[self.ref_index]

    # Mutation and change notification

    def update(self, **changes) -> None:
        """
        Assign fields and notify listeners for every field that changed.

        Args:
            **changes: Field name → new value

        Raises:
            AttributeError: If a field does not exist on the session
        """
        changed = []
        for name, value in changes.items():
            if name.startswith("_") or not hasattr(self, name):
                raise AttributeError(f"SessionState has no field '{name}'")
            if getattr(self, name) != value:
                setattr(self, name, value)
                changed.append(name)

        for name in changed:
            self.notify(name)

    def notify(self, field_name: str) -> None:
        """Tell every listener that a field changed (used after in-place list edits)"""
        for listener in list(self._listeners):
            listener(field_name, self)

    def add_listener(self, listener: StateListener) -> None:
        """
        Add a listener for field changes.

        Args:
            listener: Callback function(field_name, state)
        """
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        """Remove a field change listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def snapshot(self) -> SessionSnapshot:
        """Copy the observable values into an immutable snapshot"""
        return SessionSnapshot(
            phase=self.phase,
            level=self.level,
            lives=self.lives,
            total_score=self.total_score,
            taken_tips=self.taken_tips,
            attempts=self.attempts,
            random_sequence=tuple(self.random_sequence),
            clicked_sequence=tuple(self.clicked_sequence),
            ref_index=self.ref_index,
            is_playing_sequence=self.is_playing_sequence,
            is_counting_down=self.is_counting_down,
            is_level_started=self.is_level_started,
            is_extreme_mode=self.is_extreme_mode,
            is_level_completed=self.is_level_completed,
            is_game_over=self.is_game_over
        )

    def __str__(self) -> str:
        """Human-readable representation"""
        return (
            f"SessionState("
            f"phase={self.phase.value}, "
            f"level={self.level}, "
            f"lives={self.lives}, "
            f"progress={self.ref_index}/{len(self.random_sequence)}, "
            f"score={self.total_score}"
            f")"
        )
