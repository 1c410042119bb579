"""
Audio System Module

Plays the gameplay cues of the memory game through pygame, or records them
when audio is disabled.
"""

from .sound_controller import CueSoundController, CUE_SOUND_FILES, SOUNDS_FOLDER, get_cue_path
from .mock_sound_controller import MockCueController

__all__ = [
    'CueSoundController',
    'CUE_SOUND_FILES',
    'SOUNDS_FOLDER',
    'get_cue_path',
    'MockCueController'
]
