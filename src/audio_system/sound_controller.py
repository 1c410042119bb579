"""
Cue Sound Controller - Plays gameplay cues through the pygame mixer
"""

import os
from typing import Dict, TYPE_CHECKING

import pygame

from gameplay_system.interfaces import GameCue, ICuePlayer

if TYPE_CHECKING:
    from utils import ClassLogger


# Constants
SOUNDS_FOLDER = "sounds/"

# Sound file per gameplay cue
CUE_SOUND_FILES: Dict[GameCue, str] = {
    GameCue.CORRECT_SELECTION: "correct.mp3",
    GameCue.WRONG_SELECTION: "wrong.mp3",
    GameCue.LEVEL_COMPLETED: "level_completed.mp3",
    GameCue.COUNTDOWN: "countdown.mp3",
    GameCue.ROUND_STARTED: "round_started.mp3",
}


def get_cue_path(cue: GameCue, sounds_folder: str = SOUNDS_FOLDER) -> str:
    """Get the full path to the sound file of a cue"""
    return os.path.join(sounds_folder, CUE_SOUND_FILES[cue])


class CueSoundController(ICuePlayer):
    """
    Plays gameplay cues as pygame sound effects.

    Sounds are fire-and-forget: play() starts the effect on a free mixer
    channel and returns immediately.
    """

    def __init__(self, logger: 'ClassLogger', sounds_folder: str = SOUNDS_FOLDER, volume: float = 1.0):
        """
        Initialize the pygame mixer and load every cue sound.

        Args:
            logger: ClassLogger instance for logging
            sounds_folder: Folder holding the cue sound files
            volume: Effect volume (0.0 to 1.0)

        Raises:
            FileNotFoundError: If any cue sound file is missing
            pygame.error: If a sound file fails to load
        """
        self.logger = logger
        self.sounds_folder = sounds_folder
        self.volume = volume

        self.mixer = pygame.mixer
        self.mixer.init()

        self._sound_objects: Dict[GameCue, pygame.mixer.Sound] = {}
        self._load_and_validate_sounds()

        self.logger.info(f"🔊 CueSoundController initialized ({len(self._sound_objects)} cues from {sounds_folder})")

    def _load_and_validate_sounds(self) -> None:
        """
        Validate that every cue file exists, then load the pygame Sound objects.

        Raises:
            FileNotFoundError: If any cue sound file is missing
            pygame.error: If a sound file fails to load
        """
        missing_files = [
            get_cue_path(cue, self.sounds_folder)
            for cue in GameCue
            if not os.path.exists(get_cue_path(cue, self.sounds_folder))
        ]

        # Fail fast if any files are missing
        if missing_files:
            raise FileNotFoundError(f"Required sound files not found: {missing_files}")

        for cue in GameCue:
            sound_path = get_cue_path(cue, self.sounds_folder)
            try:
                sound = pygame.mixer.Sound(sound_path)
            except pygame.error as e:
                raise pygame.error(f"Failed to load sound {cue.name} from {sound_path}: {e}")
            sound.set_volume(self.volume)
            self._sound_objects[cue] = sound

    def play(self, cue: GameCue) -> None:
        """
        Start playing a cue and return immediately.

        Args:
            cue: GameCue to play
        """
        self.logger.debug(f"Playing cue {cue.value}")
        self._sound_objects[cue].play()

    def cleanup(self) -> None:
        """Stop all sounds and release the audio device"""
        if self.mixer.get_init():
            self.mixer.stop()
            self.mixer.quit()
        self.logger.info("CueSoundController closed")
