"""Filling the world with entities built from the tile map and entity templates."""

from __future__ import annotations

from .components import (
    COL,
    ROW,
    SPRITE,
    Collectible,
    Collider,
    Color,
    ComponentType,
    Information,
    Layer,
    Player,
    Position,
    Size,
    Vector2,
    Vector4,
)


def _build(kind: ComponentType, template, entity_id: int, row: int, col: int):
    """Return the component of kind for a new entity, or None for kinds not placed."""
    if kind is ComponentType.INFORMATION:
        return Information(id=entity_id, name=template.information.name)
    if kind is ComponentType.POSITION:
        return Position(
            id=entity_id,
            current=Vector2(col * SPRITE + SPRITE, row * SPRITE + SPRITE),
            old=Vector2(template.position.old.x, template.position.old.y),
        )
    if kind is ComponentType.SIZE:
        return Size(
            id=entity_id,
            vector=Vector2(template.size.vector.x, template.size.vector.y),
        )
    if kind is ComponentType.COLOR:
        channels = template.color.vector
        # Alpha is taken from the green channel, as the game always has.
        return Color(
            id=entity_id,
            vector=Vector4(int(channels.x), int(channels.y), int(channels.z), int(channels.y)),
        )
    if kind is ComponentType.COLLIDER:
        return Collider(
            id=entity_id,
            is_colliding=template.collider.is_colliding,
            collision_direction=list(template.collider.collision_direction),
            is_static=template.collider.is_static,
        )
    if kind is ComponentType.LAYER:
        return Layer(id=entity_id, layer=template.layer.layer)
    if kind is ComponentType.PLAYER:
        return Player(id=entity_id)
    if kind is ComponentType.COLLECTIBLE:
        return Collectible(id=entity_id)
    return None


def populate_world(world, tile_map, templates) -> int:
    """Reset the world and create one entity per tile and matching template.

    Tiles are visited row by row; entity ids count up from 0. Direction,
    velocity and acceleration components are not placed. Returns the number
    of entities created.
    """
    world.reset()
    entity_id = 0
    for row, tiles in enumerate(tile_map[:ROW]):
        for col, tile in enumerate(tiles[:COL]):
            for template in templates:
                if tile != template.index:
                    continue
                world.add_entity(entity_id)
                for kind in template.component_types:
                    component = _build(ComponentType(kind), template, entity_id, row, col)
                    if component is not None:
                        world.add_component(component)
                entity_id += 1
    return entity_id