"""
Unit tests for audio_system - cue recording and sound file validation.

The pygame mixer is mocked so no audio device is required.
"""
from unittest.mock import MagicMock, patch

import pytest

from audio_system import CUE_SOUND_FILES, CueSoundController, MockCueController, get_cue_path
from audio_system import sound_controller
from gameplay_system import GameCue


class TestMockCueController:
    def test_records_cues_in_order(self, logger):
        controller = MockCueController(logger)
        controller.play(GameCue.COUNTDOWN)
        controller.play(GameCue.ROUND_STARTED)
        assert controller.played == [GameCue.COUNTDOWN, GameCue.ROUND_STARTED]


class TestCueSoundController:
    def test_every_cue_has_a_sound_file(self):
        assert set(CUE_SOUND_FILES) == set(GameCue)

    def test_missing_files_fail_fast(self, logger, tmp_path):
        with patch.object(sound_controller, "pygame", MagicMock()):
            with pytest.raises(FileNotFoundError):
                CueSoundController(logger, sounds_folder=str(tmp_path))

    def test_plays_loaded_sound(self, logger, tmp_path):
        for cue in GameCue:
            (tmp_path / CUE_SOUND_FILES[cue]).write_bytes(b"")

        fake_pygame = MagicMock()
        with patch.object(sound_controller, "pygame", fake_pygame):
            controller = CueSoundController(logger, sounds_folder=str(tmp_path))
            controller.play(GameCue.LEVEL_COMPLETED)

        fake_pygame.mixer.Sound.assert_any_call(get_cue_path(GameCue.LEVEL_COMPLETED, str(tmp_path)))
        fake_pygame.mixer.Sound.return_value.play.assert_called_once()
