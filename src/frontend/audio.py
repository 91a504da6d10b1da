"""
Sound Board
===========

Maps the core's AudioCue events onto pygame.mixer playback.

Assets (looked up in Config.ASSETS_DIR):
    laser.wav       - SHOOT
    explosion.wav   - EXPLOSION
    epic_music.mp3  - looping background music (MUSIC_START / MUSIC_STOP)

A missing file or an unavailable audio device is logged once and that cue
plays silently; the game never stops for audio.
"""

from pathlib import Path
from typing import Dict, Iterable, Optional

import pygame
import sys
sys.path.append('..')
from config import Config

from src.game.state import AudioCue
from src.utils.logger import get_logger

logger = get_logger(__name__)

SOUND_FILES = {
    AudioCue.SHOOT: 'laser.wav',
    AudioCue.EXPLOSION: 'explosion.wav',
}
MUSIC_FILE = 'epic_music.mp3'


class SoundBoard:
    """Plays sound effects and background music for audio cues."""

    def __init__(self, config: Config, enabled: Optional[bool] = None):
        self.config = config
        self.enabled = config.AUDIO_ENABLED if enabled is None else enabled
        self.assets_dir = Path(config.ASSETS_DIR)
        self.sounds: Dict[AudioCue, pygame.mixer.Sound] = {}
        self.music_loaded = False

        if not self.enabled:
            return

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as e:
            logger.warning(f"Audio disabled, mixer unavailable: {e}")
            self.enabled = False
            return

        for cue, filename in SOUND_FILES.items():
            sound = self._load_sound(filename)
            if sound is not None:
                sound.set_volume(config.SFX_VOLUME)
                self.sounds[cue] = sound
        self.music_loaded = self._load_music(MUSIC_FILE)

    def _load_sound(self, filename: str) -> Optional[pygame.mixer.Sound]:
        path = self.assets_dir / filename
        if not path.exists():
            logger.warning(f"Sound not found: {path}")
            return None
        try:
            return pygame.mixer.Sound(str(path))
        except pygame.error as e:
            logger.warning(f"Could not load sound {path}: {e}")
            return None

    def _load_music(self, filename: str) -> bool:
        path = self.assets_dir / filename
        if not path.exists():
            logger.warning(f"Music not found: {path}")
            return False
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.set_volume(self.config.MUSIC_VOLUME)
        except pygame.error as e:
            logger.warning(f"Could not load music {path}: {e}")
            return False
        return True

    def play(self, cue: AudioCue) -> None:
        """Trigger one cue. Fire-and-forget."""
        if not self.enabled:
            return

        if cue is AudioCue.MUSIC_START:
            if self.music_loaded:
                pygame.mixer.music.play(loops=-1)
        elif cue is AudioCue.MUSIC_STOP:
            if self.music_loaded:
                pygame.mixer.music.stop()
        else:
            sound = self.sounds.get(cue)
            if sound is not None:
                sound.play()

    def play_all(self, cues: Iterable[AudioCue]) -> None:
        for cue in cues:
            self.play(cue)

    def close(self) -> None:
        if self.enabled and pygame.mixer.get_init():
            pygame.mixer.music.stop()
            pygame.mixer.quit()
