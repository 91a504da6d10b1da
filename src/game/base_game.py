"""
Base Game Interface
===================

Abstract base class that defines the interface every game exposes to a host
(the pygame window, the headless runner, the benchmark).

A new game subclasses BaseGame, implements the abstract members and is
added to GAME_REGISTRY in src/game/__init__.py.
"""

from abc import ABC, abstractmethod
from typing import Any, Tuple
import numpy as np


class BaseGame(ABC):
    """
    Abstract base class for games.

    Properties:
        state_size: int - Dimension of the state vector

    Methods:
        reset() -> snapshot
            Return the game to its idle start screen

        step(inputs) -> Tuple[snapshot, events]
            Advance one tick with the given input flags

        snapshot() -> snapshot
            Read-only view of the current frame for rendering

        get_state() -> np.ndarray
            Normalized numeric view of the current frame
    """

    @property
    @abstractmethod
    def state_size(self) -> int:
        """Length of the vector returned by get_state()."""
        pass

    @abstractmethod
    def reset(self) -> Any:
        """
        Reset the game to its initial state.

        Returns:
            Snapshot of the reset game
        """
        pass

    @abstractmethod
    def step(self, inputs: Any) -> Tuple[Any, Any]:
        """
        Execute one game tick with the given inputs.

        Args:
            inputs: Input flags sampled by the host

        Returns:
            Tuple of (snapshot, events)
        """
        pass

    @abstractmethod
    def snapshot(self) -> Any:
        """Return a read-only view of the current frame."""
        pass

    @abstractmethod
    def get_state(self) -> np.ndarray:
        """
        Numeric view of the current frame, normalized for bots.

        Returns:
            np.ndarray: Current state vector (values in [0, 1])
        """
        pass

    def close(self) -> None:
        """Release anything the game holds. Nothing by default."""
        pass

    def seed(self, seed: int) -> None:
        """Reseed the game's random source."""
        pass
