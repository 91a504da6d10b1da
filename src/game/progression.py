"""
Progression & Game Phase State Machine
======================================

Phases:
    START      - idle, waiting for the player to press start
    PLAYING    - the simulation runs every tick
    GAME_OVER  - terminal until the player restarts

Transitions:
    START     --start-->        PLAYING    (full reset, music starts)
    PLAYING   --score floor-->  GAME_OVER  (music stops)
    GAME_OVER --restart-->      PLAYING    (full reset, music starts)

Any other (phase, signal) pair is ignored. Waves advance only by chance when
the player clears the last alien on screen.
"""

import random
from enum import Enum, auto
from typing import Dict, Optional, Tuple
import sys
sys.path.append('..')
from config import Config

from .state import GamePhase, SessionState, TickEvents, AudioCue, InputState
from src.utils.logger import get_logger

logger = get_logger(__name__)


class Signal(Enum):
    """Events that can move the game between phases."""
    START = auto()
    RESTART = auto()
    SCORE_BELOW_FLOOR = auto()


TRANSITIONS: Dict[Tuple[GamePhase, Signal], GamePhase] = {
    (GamePhase.START, Signal.START): GamePhase.PLAYING,
    (GamePhase.PLAYING, Signal.SCORE_BELOW_FLOOR): GamePhase.GAME_OVER,
    (GamePhase.GAME_OVER, Signal.RESTART): GamePhase.PLAYING,
}


def next_phase(phase: GamePhase, signal: Signal) -> Optional[GamePhase]:
    """Look up the target phase for a signal, or None if the signal is ignored."""
    return TRANSITIONS.get((phase, signal))


def apply_signal(state: SessionState, signal: Signal, config: Config,
                 events: TickEvents) -> bool:
    """
    Apply a phase signal to the session.

    Entering PLAYING performs a full session reset. Music cues are emitted
    on every transition.

    Returns:
        True if the phase changed
    """
    target = next_phase(state.phase, signal)
    if target is None:
        return False

    previous = state.phase
    if target is GamePhase.PLAYING:
        state.reset(config)
        events.cues.append(AudioCue.MUSIC_START)
    elif target is GamePhase.GAME_OVER:
        events.cues.append(AudioCue.MUSIC_STOP)

    state.phase = target
    events.phase_changed = True
    logger.info(f"Phase {previous.name} -> {target.name} (score={state.score}, wave={state.wave})")
    return True


def handle_phase_inputs(state: SessionState, inputs: InputState, config: Config,
                        events: TickEvents) -> bool:
    """Translate the host's one-shot start/restart flags into phase signals."""
    if inputs.start and apply_signal(state, Signal.START, config, events):
        return True
    if inputs.restart and apply_signal(state, Signal.RESTART, config, events):
        return True
    return False


def check_game_over(state: SessionState, config: Config, events: TickEvents) -> bool:
    """End the game once the score has dropped below the configured floor."""
    if state.score < config.SCORE_FLOOR:
        return apply_signal(state, Signal.SCORE_BELOW_FLOOR, config, events)
    return False


def maybe_advance_wave(state: SessionState, config: Config, rng: random.Random,
                       events: TickEvents) -> bool:
    """
    Roll for a wave advance after a kill.

    Only rolls when the alien collection is empty. The wave never decreases.
    """
    if state.aliens:
        return False
    if rng.random() < config.WAVE_ADVANCE_CHANCE:
        state.wave += 1
        events.wave_advanced = True
        logger.info(f"Wave {state.wave} reached (score={state.score})")
        return True
    return False
