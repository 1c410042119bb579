"""
Random target sequence generation for normal and extreme mode
"""

import random
from typing import TYPE_CHECKING, List, Optional

from .targets import Target

if TYPE_CHECKING:
    from utils import ClassLogger
    from .session_state import SessionState


class SequenceGenerator:
    """
    Produces the round's ground-truth sequence.

    Normal mode: the sequence persists across rounds and grows by one fresh
    random target per round, so the player replays the whole history.
    Extreme mode: the sequence is thrown away and re-rolled every round with
    as many independent picks as the current level (repeats allowed).

    Example:
        generator = SequenceGenerator(logger, rng=random.Random(42))
        generator.generate(state)   # level 1 → [TOP_RIGHT]
        generator.generate(state)   # level 2 → [TOP_RIGHT, BOTTOM_LEFT]
    """

    def __init__(self, logger: 'ClassLogger', rng: Optional[random.Random] = None):
        """
        Initialize generator.

        Args:
            logger: ClassLogger instance for logging
            rng: Random source (seed one for reproducible games)
        """
        self.logger = logger
        self.rng = rng if rng is not None else random.Random()

        # Every declared target, in declaration order
        self._targets: List[Target] = list(Target)

    def pick_random(self) -> Target:
        """Uniformly pick one target out of all declared targets"""
        return self.rng.choice(self._targets)

    def clear(self, state: 'SessionState') -> None:
        """Empty the sequence ahead of an extreme-mode refill"""
        state.update(random_sequence=[])

    def generate(self, state: 'SessionState') -> None:
        """
        Generate the sequence for the round that was just advanced to.

        Must be called after the level counter was incremented.

        Args:
            state: Session whose sequence is extended or replaced
        """
        if state.is_extreme_mode:
            sequence = [self.pick_random() for _ in range(state.level)]
        else:
            sequence = state.random_sequence + [self.pick_random()]

        state.update(random_sequence=sequence, ref_index=0)
        self.logger.debug(
            f"Level {state.level} sequence ({'extreme' if state.is_extreme_mode else 'normal'}): "
            f"{' '.join(target.value for target in sequence)}"
        )
