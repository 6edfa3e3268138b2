"""Keyboard state and translation of window events into game state changes."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

import pygame

from .components import GameState


class Arrow(IntEnum):
    """Flags tracked for the keyboard."""

    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3
    CLICKER_TOP = 4
    CLICKER_RIGHT = 5
    CLICKER_BOTTOM = 6
    CLICKER_LEFT = 7
    SCORE = 8


# Movement key -> (direction flag, flag marking the press as already consumed)
_MOVE_KEYS = {
    pygame.K_w: (Arrow.TOP, Arrow.CLICKER_TOP),
    pygame.K_d: (Arrow.RIGHT, Arrow.CLICKER_RIGHT),
    pygame.K_s: (Arrow.BOTTOM, Arrow.CLICKER_BOTTOM),
    pygame.K_a: (Arrow.LEFT, Arrow.CLICKER_LEFT),
}

_STATE_KEYS = {
    pygame.K_ESCAPE: GameState.CLOSE,
    pygame.K_1: GameState.RESUME,
    pygame.K_2: GameState.PAUSE,
    pygame.K_3: GameState.RESTART,
    pygame.K_4: GameState.CLOSE,
}


class KeyState:
    """Boolean flag for every Arrow, all initially False."""

    def __init__(self):
        self._flags = {arrow: False for arrow in Arrow}

    def __getitem__(self, arrow) -> bool:
        return self._flags[Arrow(arrow)]

    def __setitem__(self, arrow, value) -> None:
        self._flags[Arrow(arrow)] = bool(value)

    def __repr__(self) -> str:
        pressed = [arrow.name for arrow, flag in self._flags.items() if flag]
        return f"KeyState({pressed})"

    def key_down(self, key) -> Optional[GameState]:
        """Record a key press; return the game state it requests, if any."""
        if key in _MOVE_KEYS:
            direction, clicker = _MOVE_KEYS[key]
            if not self._flags[clicker]:
                self._flags[direction] = True
                self._flags[Arrow.SCORE] = True
        return _STATE_KEYS.get(key)

    def key_up(self, key) -> None:
        """Record a key release."""
        if key in _MOVE_KEYS:
            direction, clicker = _MOVE_KEYS[key]
            self._flags[direction] = False
            self._flags[clicker] = False


def handle_event(event, keys: KeyState, state: GameState) -> GameState:
    """Apply one event to the key state and return the resulting game state."""
    if event.type == pygame.QUIT:
        return GameState.CLOSE
    if event.type == pygame.KEYDOWN:
        requested = keys.key_down(event.key)
        return state if requested is None else requested
    if event.type == pygame.KEYUP:
        keys.key_up(event.key)
    return state


def process_input(keys: KeyState, state: GameState) -> GameState:
    """Take at most one pending event from the window and apply it."""
    return handle_event(pygame.event.poll(), keys, state)