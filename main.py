#!/usr/bin/env python3
"""
Alien Invasion: Earth Defense - Main Entry Point
================================================

Usage:
    # Play in a window (default)
    python main.py

    # Classic single-type rules
    python main.py --ruleset simple

    # Headless autopilot run (no window, no audio)
    python main.py --headless --ticks 10000 --seed 42

Press:
    - LEFT/RIGHT: Move
    - SPACE: Shoot / Start / Restart
    - ESC or Q: Quit
"""

# Suppress pygame's pkg_resources deprecation warning (pygame issue #4557)
import warnings
warnings.filterwarnings("ignore", category=UserWarning, module="pygame.pkgdata")

import argparse
import os
import sys
from typing import Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import Config
from src.game import AlienInvasion, Autopilot, GamePhase
from src.utils.logger import setup_logging, get_logger, get_log_path, LogLevel, log_session_summary


class GameApp:
    """
    Runs the game in a pygame window.

    This class manages:
        - Pygame window and frame clock
        - Keyboard input
        - Rendering and audio for each tick
    """

    def __init__(self, config: Config, seed: Optional[int] = None):
        import pygame
        from src.frontend import KeyboardControls, Renderer, SoundBoard

        self.pygame = pygame
        self.config = config
        self.logger = get_logger('app')

        pygame.init()
        self.screen = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
        pygame.display.set_caption(config.WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        self.game = AlienInvasion(config, seed=seed)
        self.controls = KeyboardControls()
        self.renderer = Renderer(config, self.screen, seed=seed or 0)
        self.sound = SoundBoard(config)
        self.running = True

    def _handle_events(self) -> None:
        pygame = self.pygame
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                self.running = False
            else:
                self.controls.handle_event(event, self.game.phase)

    def run(self) -> None:
        self.logger.info(f"Window mode ({self.config.RULESET} ruleset)")
        try:
            while self.running:
                self._handle_events()
                inputs = self.controls.sample(self.game.phase)
                snapshot, events = self.game.step(inputs)
                self.sound.play_all(events.cues)
                self.renderer.draw(snapshot, self.pygame.time.get_ticks())
                self.pygame.display.flip()
                self.clock.tick(self.config.FPS)
        finally:
            self.sound.close()
            self.pygame.quit()


def run_headless(config: Config, ticks: int, seed: Optional[int] = None,
                 restart: bool = True) -> AlienInvasion:
    """
    Let the autopilot play for a fixed number of ticks without a window.

    Args:
        config: Game configuration
        ticks: Number of ticks to simulate
        seed: Random seed for a reproducible run
        restart: Restart automatically after each game over

    Returns:
        The game, for inspection of its final state
    """
    logger = get_logger('headless')
    game = AlienInvasion(config, seed=seed)
    pilot = Autopilot(config)
    game.start()

    sessions = 1
    for _ in range(ticks):
        if game.phase is GamePhase.GAME_OVER:
            if not restart:
                break
            game.restart()
            sessions += 1
            continue
        game.step(pilot.act(game.get_state()))

    if game.phase is GamePhase.PLAYING:
        log_session_summary(
            score=game.score,
            wave=game.wave,
            ticks=game.state.ticks,
            kills=game.state.total_kills,
            escapes=game.state.total_escapes,
        )
    logger.info(f"Headless run finished: {ticks} ticks, {sessions} session(s)")
    return game


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Alien Invasion: Earth Defense - a small arcade shooter",
    )
    parser.add_argument(
        '--headless', action='store_true',
        help='Run the autopilot without a window or audio'
    )
    parser.add_argument(
        '--ticks', type=int, default=10_000,
        help='Ticks to simulate in headless mode (default: 10000)'
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Random seed for a reproducible game'
    )
    parser.add_argument(
        '--ruleset', type=str, default='advanced', choices=['advanced', 'simple'],
        help='Game rules: wave-scaled "advanced" or single-type "simple"'
    )
    parser.add_argument(
        '--fps', type=int, default=None,
        help='Frame rate in window mode (default: from config)'
    )
    parser.add_argument(
        '--no-audio', action='store_true',
        help='Disable sound effects and music'
    )
    parser.add_argument(
        '--assets', type=str, default=None,
        help='Directory containing laser.wav, explosion.wav and epic_music.mp3'
    )
    parser.add_argument(
        '--log-level', type=str, default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging verbosity (default: from config)'
    )
    parser.add_argument(
        '--log-file', action='store_true',
        help='Also write logs to the log directory'
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Apply command line overrides to the selected ruleset preset."""
    config = Config.for_ruleset(args.ruleset)
    if args.fps is not None:
        config.FPS = args.fps
    if args.no_audio or args.headless:
        config.AUDIO_ENABLED = False
    if args.assets is not None:
        config.ASSETS_DIR = args.assets
    if args.log_level is not None:
        config.LOG_LEVEL = args.log_level
    if args.log_file:
        config.LOG_TO_FILE = True
    if args.seed is not None:
        config.SEED = args.seed
    config.__post_init__()
    return config


def main(argv=None) -> None:
    args = parse_args(argv)
    config = build_config(args)

    setup_logging(
        log_dir=config.LOG_DIR,
        level=LogLevel.from_name(config.LOG_LEVEL),
        file_output=config.LOG_TO_FILE,
        force=True,
    )
    log_path = get_log_path()
    if log_path is not None:
        get_logger('app').info(f"Writing log to {log_path}")

    if args.headless:
        run_headless(config, args.ticks, seed=config.SEED)
    else:
        GameApp(config, seed=config.SEED).run()


if __name__ == "__main__":
    main()
