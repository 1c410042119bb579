"""
Gameplay System - Session logic for a sequence-memorization game

Generates a random sequence of on-screen targets, presents it through an
injected presenter, validates the player's replay and keeps track of lives,
score, tips and level progression.
"""

from .targets import Target, TARGET_HINTS
from .config import AccessibilityConfig, TimingConfig, INFINITE_LIVES, UNLIMITED_TIPS
from .errors import RoundInProgressError, GameOverError
from .interfaces import GameCue, IPresenter, ILabelProvider, ICuePlayer, IScoreManager
from .session_state import SessionState, SessionSnapshot, RoundPhase
from .sequence_generator import SequenceGenerator
from .round_orchestrator import RoundOrchestrator
from .input_validator import InputValidator
from .gameplay_session import GameplaySession

__all__ = [
    # Targets
    "Target",
    "TARGET_HINTS",
    # Configuration
    "AccessibilityConfig",
    "TimingConfig",
    "INFINITE_LIVES",
    "UNLIMITED_TIPS",
    # Errors
    "RoundInProgressError",
    "GameOverError",
    # Collaborator interfaces
    "GameCue",
    "IPresenter",
    "ILabelProvider",
    "ICuePlayer",
    "IScoreManager",
    # Core
    "SessionState",
    "SessionSnapshot",
    "RoundPhase",
    "SequenceGenerator",
    "RoundOrchestrator",
    "InputValidator",
    "GameplaySession"
]
