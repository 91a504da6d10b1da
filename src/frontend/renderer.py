"""
Renderer
========

Draws a Snapshot with pygame. Nothing here feeds back into the simulation.

Layers (back to front):
    - Two-layer scrolling starfield driven by the snapshot's background offset
    - Particles
    - Aliens (8x8 pixel art per tier, pulsing with their phase)
    - Bullets
    - Player ship with a gentle hover bob
    - HUD, start screen or game-over screen
"""

import math
import random
from typing import List, Tuple

import pygame
import sys
sys.path.append('..')
from config import Config

from src.game.snapshot import Snapshot, AlienView, PlayerView
from src.game.state import GamePhase


# Pixel art per alien tier (two animation frames each)
ALIEN_PATTERNS = {
    0: [  # Fast zigzagger
        [
            "   XX   ",
            "  XXXX  ",
            " XXXXXX ",
            "XX XX XX",
            "XXXXXXXX",
            "  X  X  ",
            " X XX X ",
            "X X  X X",
        ],
        [
            "   XX   ",
            "  XXXX  ",
            " XXXXXX ",
            "XX XX XX",
            "XXXXXXXX",
            " X XX X ",
            "X      X",
            " X    X ",
        ]
    ],
    1: [  # Slow tank
        [
            "  XXXX  ",
            " XXXXXX ",
            "XXXXXXXX",
            "XX XX XX",
            "XXXXXXXX",
            " XX  XX ",
            "XX XX XX",
            "X      X",
        ],
        [
            "  XXXX  ",
            " XXXXXX ",
            "XXXXXXXX",
            "XX XX XX",
            "XXXXXXXX",
            " XX  XX ",
            "X  XX  X",
            " X    X ",
        ]
    ],
}

STAR_LAYERS = (
    # (count, scroll factor, brightness)
    (60, 1, 90),
    (25, 2, 200),
)


class Renderer:
    """Draws game snapshots onto a pygame surface."""

    def __init__(self, config: Config, screen: pygame.Surface, seed: int = 0):
        self.config = config
        self.screen = screen
        self.width = config.SCREEN_WIDTH
        self.height = config.SCREEN_HEIGHT

        if not pygame.font.get_init():
            pygame.font.init()
        self.title_font = pygame.font.Font(None, 56)
        self.font = pygame.font.Font(None, 28)

        # Starfield is cosmetic, so it gets its own generator
        star_rng = random.Random(seed)
        self.stars: List[List[Tuple[int, int]]] = [
            [(star_rng.randrange(self.width), star_rng.randrange(self.height)) for _ in range(count)]
            for count, _, _ in STAR_LAYERS
        ]

    def draw(self, snapshot: Snapshot, time_ms: int = 0) -> None:
        """Draw a whole frame for the snapshot's phase."""
        if snapshot.phase is GamePhase.START:
            self.draw_background(0)
            self._draw_start_screen()
        elif snapshot.phase is GamePhase.PLAYING:
            self.draw_playfield(snapshot, time_ms)
        else:
            self.draw_background(0)
            self._draw_game_over_screen(snapshot)

    def draw_background(self, offset: int) -> None:
        self.screen.fill(self.config.COLOR_BACKGROUND)
        for stars, (_, factor, brightness) in zip(self.stars, STAR_LAYERS):
            color = (brightness, brightness, min(255, brightness + 30))
            for x, y in stars:
                sy = (y + offset * factor) % self.height
                pygame.draw.circle(self.screen, color, (x, sy), factor)

    def draw_playfield(self, snapshot: Snapshot, time_ms: int = 0) -> None:
        self.draw_background(snapshot.background_offset)

        for particle in snapshot.particles:
            pygame.draw.circle(
                self.screen, particle.color,
                (int(particle.x), int(particle.y)),
                max(1, int(particle.radius))
            )

        frame = (time_ms // 500) % 2
        for alien in snapshot.aliens:
            self._draw_alien(alien, frame)

        for bullet in snapshot.bullets:
            rect = pygame.Rect(int(bullet.x), int(bullet.y), bullet.width, bullet.height)
            pygame.draw.rect(self.screen, self.config.COLOR_BULLET, rect, border_radius=1)

        hover = math.sin(time_ms * 0.005) * 2
        self._draw_ship(snapshot.player, hover)

        hud = self.font.render(f"Score: {snapshot.score} | Wave: {snapshot.wave}", True,
                               self.config.COLOR_TEXT)
        self.screen.blit(hud, (10, 10))

    def _draw_alien(self, alien: AlienView, frame: int) -> None:
        patterns = ALIEN_PATTERNS.get(alien.tier, ALIEN_PATTERNS[0])
        pattern = patterns[frame]
        tiers = self.config.COLOR_ALIEN_TIERS
        color = tiers[alien.tier % len(tiers)]

        scale = alien.scale
        pixel_w = max(1, int(alien.width * scale) // 8)
        pixel_h = max(1, int(alien.height * scale) // 8)
        for row_idx, row in enumerate(pattern):
            for col_idx, char in enumerate(row):
                if char == 'X':
                    px = int(alien.x) + col_idx * pixel_w
                    py = int(alien.y) + row_idx * pixel_h
                    pygame.draw.rect(self.screen, color, (px, py, pixel_w, pixel_h))

    def _draw_ship(self, player: PlayerView, hover: float) -> None:
        rect = pygame.Rect(int(player.x), int(player.y + hover), player.width, player.height)
        color = self.config.COLOR_SHIP

        # Engine glow
        glow_rect = pygame.Rect(rect.centerx - 4, rect.bottom - 4, 8, 10)
        pygame.draw.ellipse(self.screen, (50, 200, 255), glow_rect)

        hull_points = [
            (rect.centerx, rect.top),
            (rect.left + 3, rect.bottom - 8),
            (rect.left, rect.bottom - 3),
            (rect.left + 8, rect.bottom),
            (rect.right - 8, rect.bottom),
            (rect.right, rect.bottom - 3),
            (rect.right - 3, rect.bottom - 8),
        ]
        pygame.draw.polygon(self.screen, color, hull_points)

        cockpit = [
            (rect.centerx, rect.top + 6),
            (rect.centerx - 5, rect.top + 18),
            (rect.centerx + 5, rect.top + 18),
        ]
        pygame.draw.polygon(self.screen, (150, 255, 220), cockpit)

    def _blit_centered(self, text: str, font: pygame.font.Font,
                       color: Tuple[int, int, int], y: int) -> None:
        surf = font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=(self.width // 2, y)))

    def _draw_start_screen(self) -> None:
        mid = self.height // 2
        text = self.config.COLOR_TEXT
        self._blit_centered(self.config.WINDOW_TITLE, self.title_font, text, mid - 60)
        self._blit_centered("Use arrow keys to move, space to shoot", self.font, text, mid)
        self._blit_centered("Press Space to Start", self.font, text, mid + 60)

    def _draw_game_over_screen(self, snapshot: Snapshot) -> None:
        mid = self.height // 2
        text = self.config.COLOR_TEXT
        self._blit_centered("Game Over", self.title_font, self.config.COLOR_GAME_OVER, mid - 60)
        self._blit_centered(f"Final Score: {snapshot.score} | Wave: {snapshot.wave}",
                            self.font, text, mid)
        self._blit_centered("Press Space to Restart", self.font, text, mid + 60)
