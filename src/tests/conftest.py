"""
Test configuration: put src/ on sys.path and provide fake collaborators
so the gameplay session runs without a screen, speakers or real time.
"""
import logging
import os
import random
import sys

import pytest

# Add src directory so that `import gameplay_system`, `import utils`, etc. work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from gameplay_system import (
    AccessibilityConfig,
    GameplaySession,
    ILabelProvider,
    IPresenter,
    IScoreManager,
    TimingConfig,
)
from audio_system import MockCueController
from utils import ClassLogger


class FakePresenter(IPresenter):
    """Records everything the session asks it to show"""

    def __init__(self):
        self.events = []
        self.highlighted = []

    async def highlight(self, target):
        self.highlighted.append(target)
        self.events.append(("highlight", target))

    def show_countdown(self, text):
        self.events.append(("countdown", text))

    def set_subtitle(self, text):
        self.events.append(("subtitle", text))

    def show_tap_feedback(self, is_correct):
        self.events.append(("feedback", is_correct))


class FakeLabelProvider(ILabelProvider):
    def label_for(self, target):
        return f"label:{target.value}"


class FakeScoreManager(IScoreManager):
    """Counts timer calls; score is level * 100 - lost * 10"""

    def __init__(self):
        self.calls = []

    def start_timer(self):
        self.calls.append("start")

    def pause_timer(self):
        self.calls.append("pause")

    def resume_timer(self):
        self.calls.append("resume")

    def stop_timer(self):
        self.calls.append("stop")

    def elapsed(self):
        return 1.5

    def score(self, level, lost_lives):
        return level * 100 - lost_lives * 10

    def three_star_score(self, level):
        return level * 100


@pytest.fixture
def logger():
    test_logger = logging.getLogger("memory_game_tests")
    return ClassLogger(test_logger, "Test", logging.DEBUG)


@pytest.fixture
def presenter():
    return FakePresenter()


@pytest.fixture
def label_provider():
    return FakeLabelProvider()


@pytest.fixture
def cue_player(logger):
    return MockCueController(logger)


@pytest.fixture
def score_manager():
    return FakeScoreManager()


@pytest.fixture
def make_session(presenter, label_provider, cue_player, score_manager, logger):
    """Factory for sessions with instant timing and a seeded random source"""

    def _make(max_lives=5, tip_allowance=3, countdown_steps=3, extreme=False, seed=1234):
        session = GameplaySession(
            presenter=presenter,
            label_provider=label_provider,
            cue_player=cue_player,
            score_manager=score_manager,
            logger=logger,
            accessibility=AccessibilityConfig(
                max_lives=max_lives,
                tip_allowance=tip_allowance,
                countdown_steps=countdown_steps
            ),
            timing=TimingConfig.instant(),
            rng=random.Random(seed)
        )
        session.set_extreme_mode(extreme)
        return session

    return _make

