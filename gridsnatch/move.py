"""Grid movement of player entities driven by the keyboard flags."""

from __future__ import annotations

from .collision import collision_between
from .components import SPRITE, ComponentType, Position, Vector2
from .controls import Arrow, KeyState

# Direction flag, flag marking the press as consumed, and the step it applies.
_STEPS = (
    (Arrow.TOP, Arrow.CLICKER_TOP, 0, -SPRITE),
    (Arrow.BOTTOM, Arrow.CLICKER_BOTTOM, 0, SPRITE),
    (Arrow.RIGHT, Arrow.CLICKER_RIGHT, SPRITE, 0),
    (Arrow.LEFT, Arrow.CLICKER_LEFT, -SPRITE, 0),
)


def _shifted(position: Position, dx: float, dy: float) -> Position:
    return Position(
        id=position.id,
        current=Vector2(position.current.x + dx, position.current.y + dy),
        old=Vector2(position.old.x, position.old.y),
    )


def move(world, keys: KeyState, delta_time) -> None:
    """Move every player one tile in the pressed direction unless the target is blocked.

    Each press moves at most once: the matching clicker flag is set whether or
    not the move succeeded, and only the first pending direction is handled.
    ``delta_time`` is accepted for the update loop; steps are whole tiles.
    """
    if world.store(ComponentType.PLAYER).is_empty():
        return

    for entity in list(world.entities()):
        found = world.components(
            entity.index,
            ComponentType.POSITION,
            ComponentType.SIZE,
            ComponentType.PLAYER,
        )
        if found is None:
            continue
        position, size, _ = found

        for direction, clicker, dx, dy in _STEPS:
            if not keys[direction] or keys[clicker]:
                continue
            if not collision_between(world, _shifted(position, dx, dy), size):
                if dx:
                    position.old.x = position.current.x
                    position.current.x += dx
                if dy:
                    position.old.y = position.current.y
                    position.current.y += dy
            keys[clicker] = True
            break