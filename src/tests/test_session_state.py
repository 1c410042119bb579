"""
Unit tests for session_state.py - derived values and change notification.
"""
import dataclasses

import pytest

from gameplay_system import RoundPhase, SessionState, Target


class TestDerivedValues:
    def test_fresh_session(self):
        state = SessionState(lives=5)
        assert state.level == 0
        assert state.lives == 5
        assert state.phase == RoundPhase.IDLE
        assert state.attempts == 0
        assert state.is_game_over is False
        assert state.is_level_completed is False
        assert state.expected_target is None

    def test_game_over_when_no_lives(self):
        state = SessionState(lives=0)
        assert state.is_game_over is True

    def test_level_completed_needs_started_level(self):
        state = SessionState()
        state.update(random_sequence=[Target.TOP_LEFT], ref_index=1)
        assert state.is_level_completed is False

        state.update(is_level_started=True)
        assert state.is_level_completed is True

    def test_expected_target_follows_ref_index(self):
        state = SessionState()
        state.update(random_sequence=[Target.TOP_LEFT, Target.BOTTOM_RIGHT], ref_index=1)
        assert state.expected_target == Target.BOTTOM_RIGHT

    def test_attempts_counts_wrong_selections_too(self):
        state = SessionState()
        state.update(clicked_sequence=[Target.TOP_LEFT, Target.TOP_LEFT, Target.TOP_RIGHT])
        assert state.attempts == 3


class TestChangeNotification:
    def test_listener_gets_changed_fields_only(self):
        state = SessionState(lives=5)
        seen = []
        state.add_listener(lambda field, s: seen.append((field, s.lives)))

        state.update(lives=4, level=0)

        assert seen == [("lives", 4)]

    def test_listener_added_once(self):
        state = SessionState()
        seen = []
        listener = lambda field, s: seen.append(field)
        state.add_listener(listener)
        state.add_listener(listener)

        state.update(level=1)

        assert seen == ["level"]

    def test_removed_listener_not_called(self):
        state = SessionState()
        seen = []
        listener = lambda field, s: seen.append(field)
        state.add_listener(listener)
        state.remove_listener(listener)

        state.update(level=3)

        assert seen == []

    def test_unknown_field_rejected(self):
        state = SessionState()
        with pytest.raises(AttributeError):
            state.update(hearts=3)

    def test_private_field_rejected(self):
        state = SessionState()
        with pytest.raises(AttributeError):
            state.update(_listeners=[])


class TestSnapshot:
    def test_snapshot_copies_values(self):
        state = SessionState(lives=3)
        state.update(random_sequence=[Target.TOP_LEFT], level=1)

        snapshot = state.snapshot()
        state.update(random_sequence=[Target.TOP_RIGHT, Target.TOP_LEFT], level=2)

        assert snapshot.level == 1
        assert snapshot.random_sequence == (Target.TOP_LEFT,)
        assert snapshot.lives == 3

    def test_snapshot_is_frozen(self):
        snapshot = SessionState().snapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.level = 5

    def test_str_shows_progress(self):
        state = SessionState(lives=2)
        state.update(random_sequence=[Target.TOP_LEFT, Target.TOP_RIGHT], ref_index=1, level=2)
        assert "progress=1/2" in str(state)
