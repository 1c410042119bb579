"""
Gameplay configuration - accessibility settings and pacing constants
"""

from dataclasses import dataclass

# Max-lives setting that disables life loss entirely
INFINITE_LIVES = 7

# Tip allowance setting that disables tip counting
UNLIMITED_TIPS = 7


@dataclass
class AccessibilityConfig:
    """
    Read-only difficulty parameters supplied by the accessibility settings.

    The session reads these at phase start; a phase already running keeps
    the values it started with.
    """
    max_lives: int = 5
    tip_allowance: int = 3
    countdown_steps: int = 3

    @property
    def has_infinite_lives(self) -> bool:
        """True if wrong selections never cost a life"""
        return self.max_lives == INFINITE_LIVES

    @property
    def has_unlimited_tips(self) -> bool:
        """True if taking a tip never counts against the allowance"""
        # An allowance of 0 also leaves the counter untouched
        return self.tip_allowance in (0, UNLIMITED_TIPS)

    def validate(self) -> None:
        """Basic validation of configuration"""
        if self.max_lives < 0:
            raise ValueError(f"max_lives must be non-negative, got {self.max_lives}")

        if self.tip_allowance < 0:
            raise ValueError(f"tip_allowance must be non-negative, got {self.tip_allowance}")

        if self.countdown_steps < 0:
            raise ValueError(f"countdown_steps must be non-negative, got {self.countdown_steps}")


@dataclass
class TimingConfig:
    """Round pacing constants in milliseconds"""

    # Pause before the countdown begins
    settle_delay_ms: int = 250

    # Interval between countdown steps
    countdown_tick_ms: int = 1200

    # Pause after the "round started" cue
    countdown_tail_ms: int = 1400

    # Pause before a replay re-presents the sequence
    replay_delay_ms: int = 125

    # How long a presenter keeps a single target highlighted
    highlight_ms: int = 600

    @classmethod
    def instant(cls) -> 'TimingConfig':
        """Zero-delay timing (tests and headless simulations)"""
        return cls(
            settle_delay_ms=0,
            countdown_tick_ms=0,
            countdown_tail_ms=0,
            replay_delay_ms=0,
            highlight_ms=0
        )

    def validate(self) -> None:
        """Reject negative delays"""
        for name in ("settle_delay_ms", "countdown_tick_ms", "countdown_tail_ms",
                     "replay_delay_ms", "highlight_ms"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
