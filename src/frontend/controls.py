"""
Keyboard Controls
=================

Turns pygame keyboard events into the InputState the core samples each tick.

    LEFT / RIGHT  - held movement flags
    SPACE         - held fire flag while playing; one-shot start/restart otherwise
"""

import pygame
import sys
sys.path.append('..')

from src.game.state import InputState, GamePhase


class KeyboardControls:
    """Tracks held keys between ticks and produces one InputState per tick."""

    def __init__(self):
        self.left = False
        self.right = False
        self.fire = False
        self._action_pressed = False  # Space pressed on a start/game-over screen

    def handle_event(self, event: pygame.event.Event, phase: GamePhase) -> None:
        """Record a single keyboard event."""
        if event.type == pygame.KEYDOWN:
            if phase is not GamePhase.PLAYING:
                if event.key == pygame.K_SPACE:
                    self._action_pressed = True
                return
            if event.key == pygame.K_RIGHT:
                self.right = True
            elif event.key == pygame.K_LEFT:
                self.left = True
            elif event.key == pygame.K_SPACE:
                self.fire = True
        elif event.type == pygame.KEYUP:
            if event.key == pygame.K_RIGHT:
                self.right = False
            elif event.key == pygame.K_LEFT:
                self.left = False
            elif event.key == pygame.K_SPACE:
                self.fire = False

    def sample(self, phase: GamePhase) -> InputState:
        """
        Build the inputs for this tick.

        A pending space press becomes `start` on the start screen or
        `restart` on the game-over screen, and is consumed. Held flags are
        cleared whenever a new session begins.
        """
        action = self._action_pressed
        self._action_pressed = False

        if action and phase is not GamePhase.PLAYING:
            self.left = self.right = self.fire = False
            return InputState(
                start=phase is GamePhase.START,
                restart=phase is GamePhase.GAME_OVER,
            )

        return InputState(move_left=self.left, move_right=self.right, fire=self.fire)
