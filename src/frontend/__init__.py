"""
Frontend Module
===============

The pygame host around the simulation core: keyboard input, drawing and
sound. The core never imports anything from here.

Classes:
    KeyboardControls - pygame key events -> InputState
    Renderer         - Snapshot -> pixels
    SoundBoard       - AudioCue -> pygame.mixer playback
"""

from .controls import KeyboardControls
from .renderer import Renderer
from .audio import SoundBoard

__all__ = ['KeyboardControls', 'Renderer', 'SoundBoard']
