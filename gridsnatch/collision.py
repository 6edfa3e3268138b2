"""Axis-aligned rectangle collision tests between entities."""

from __future__ import annotations

from .components import ComponentType, Position, Size


def is_colliding(xa, ya, wa, ha, xb, yb, wb, hb) -> bool:
    """Return True if rectangles A and B overlap by at least one unit.

    Rectangles that only touch along an edge do not collide.
    """
    return (
        xa + (wa - 1) >= xb
        and xa <= xb + (wb - 1)
        and ya + (ha - 1) >= yb
        and ya <= yb + (hb - 1)
    )


def is_same_index(a, b) -> bool:
    """Return True if two components belong to the same entity."""
    return a.id == b.id


def collision_bounds(position: Position, size: Size) -> tuple:
    """Return the (x, y, width, height) rectangle of a positioned entity."""
    return (position.current.x, position.current.y, size.vector.x, size.vector.y)


def collision_between(world, position: Position, size: Size) -> bool:
    """Return True if the rectangle collides with any other entity that has a collider.

    The entity that owns ``position`` is never tested against itself.
    """
    bounds = collision_bounds(position, size)
    for entity in world.entities():
        if entity.index == position.id:
            continue
        found = world.components(
            entity.index,
            ComponentType.POSITION,
            ComponentType.SIZE,
            ComponentType.COLLIDER,
        )
        if found is None:
            continue
        other_position, other_size, _ = found
        if is_colliding(*bounds, *collision_bounds(other_position, other_size)):
            return True
    return False


def is_colliding_bottom(ya, ha, yb, hb, size) -> bool:
    """Return True if A's bottom edge, pushed down by size, reaches into B."""
    return (ya + ha) + size >= yb and (ya + ha) <= yb + hb


def is_colliding_top(ya, yb, hb, size) -> bool:
    """Return True if A's top edge, pulled up by size, still lies within B."""
    return ya - size >= yb and ya <= yb + hb


def is_colliding_right(xa, wa, xb, wb, size) -> bool:
    """Return True if A's right edge, pushed right by size, reaches into B."""
    return (xa + wa) + size >= xb and xa + wa <= xb + wb


def is_colliding_left(xa, xb, wb, size) -> bool:
    """Return True if A's left edge, pulled left by size, reaches into B."""
    return xa - size <= xb + wb and xa >= xb