"""Scoring: a player touching a collectible scores and the collectible jumps elsewhere."""

from __future__ import annotations

import sys

from .collision import collision_bounds, is_colliding
from .components import SPRITE, ComponentType
from .controls import Arrow, KeyState

_CELLS = 10


def _clear_terminal() -> None:
    if sys.stdout.isatty():
        print("\033[H\033[2J", end="")


def score_calculator(world, keys: KeyState, score: int, rng) -> int:
    """Return the score after checking every player against every collectible.

    A collision scores only while the score flag is set; the flag is cleared on
    scoring, so one key press scores at most once. The collectible is moved to a
    random tile that differs from the player's position.
    """
    entities = list(world.entities())
    for entity_a in entities:
        found_a = world.components(
            entity_a.index,
            ComponentType.POSITION,
            ComponentType.SIZE,
            ComponentType.PLAYER,
        )
        if found_a is None:
            continue
        position_a, size_a, _ = found_a
        bounds_a = collision_bounds(position_a, size_a)
        player_x, player_y = position_a.current.x, position_a.current.y

        for entity_b in entities:
            if entity_b.index == entity_a.index:
                continue
            found_b = world.components(
                entity_b.index,
                ComponentType.POSITION,
                ComponentType.SIZE,
                ComponentType.COLLECTIBLE,
            )
            if found_b is None:
                continue
            position_b, size_b, _ = found_b
            if not is_colliding(*bounds_a, *collision_bounds(position_b, size_b)):
                continue
            if not keys[Arrow.SCORE]:
                continue

            keys[Arrow.SCORE] = False
            _clear_terminal()
            score += 1
            print(score, flush=True)

            while True:
                new_x = rng.randrange(_CELLS) * SPRITE + SPRITE * 2
                new_y = rng.randrange(_CELLS) * SPRITE + SPRITE * 2
                if not (new_x == player_x and new_y == player_y):
                    break

            # The old x deliberately records the previous y, as the game always has.
            position_b.old.x = position_b.current.y
            position_b.old.y = position_b.current.y
            position_b.current.x = new_x
            position_b.current.y = new_y
    return score