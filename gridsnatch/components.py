"""Component, entity and enumeration types shared by the whole game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Optional

ID_INIT = -1

SPRITE = 32
COL = 12
ROW = 12
SPACE = 2

WINDOW_WIDTH = COL * SPRITE + SPACE * SPRITE
WINDOW_HEIGHT = ROW * SPRITE + SPACE * SPRITE

FPS = 30
FRAME_TARGET_TIME = 1000 // FPS

MAX_LAYER = 5
MAX_COMPONENTS = 1000
MAX_ENTITIES = 100
MAX_SYSTEMS = 4


class GameState(IntEnum):
    """State of the main loop."""

    RUN = 0
    PAUSE = 1
    RESTART = 2
    CLOSE = 3
    RESUME = 4


class Coordinate(IntEnum):
    """Sides of a collider."""

    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3


class ComponentType(IntEnum):
    """Every kind of component an entity can carry."""

    INFORMATION = 0
    POSITION = 1
    DIRECTION = 2
    VELOCITY = 3
    ACCELERATION = 4
    SIZE = 5
    COLOR = 6
    COLLIDER = 7
    LAYER = 8
    PLAYER = 9
    COLLECTIBLE = 10


class SystemType(IntEnum):
    """Systems that can be attached to an entity."""

    GRAVITY = 0
    COLLISION = 1
    LAYERS = 2
    MOVE = 3
    SCORE = 4


_COMPONENT_NAMES = {
    ComponentType.INFORMATION: "Information",
    ComponentType.POSITION: "Position",
    ComponentType.DIRECTION: "Direction",
    ComponentType.VELOCITY: "Velocity",
    ComponentType.ACCELERATION: "Acceleration",
    ComponentType.SIZE: "Size",
    ComponentType.COLOR: "Color",
    ComponentType.COLLIDER: "Collider",
    ComponentType.LAYER: "Layer",
    ComponentType.PLAYER: "Player",
    ComponentType.COLLECTIBLE: "Collectible",
}

_SYSTEM_NAMES = {
    SystemType.GRAVITY: "Gravity",
    SystemType.COLLISION: "Collision",
    SystemType.LAYERS: "Layer",
    SystemType.MOVE: "Move",
}


@dataclass
class Vector2:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Vector4:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass
class Information:
    kind: ClassVar[ComponentType] = ComponentType.INFORMATION
    id: int = ID_INIT
    name: str = ""


@dataclass
class Position:
    kind: ClassVar[ComponentType] = ComponentType.POSITION
    id: int = ID_INIT
    current: Vector2 = field(default_factory=Vector2)
    old: Vector2 = field(default_factory=Vector2)


@dataclass
class Direction:
    kind: ClassVar[ComponentType] = ComponentType.DIRECTION
    id: int = ID_INIT
    vector: Vector2 = field(default_factory=Vector2)


@dataclass
class Velocity:
    kind: ClassVar[ComponentType] = ComponentType.VELOCITY
    id: int = ID_INIT
    vector: Vector2 = field(default_factory=Vector2)


@dataclass
class Acceleration:
    kind: ClassVar[ComponentType] = ComponentType.ACCELERATION
    id: int = ID_INIT
    vector: Vector2 = field(default_factory=Vector2)


@dataclass
class Size:
    kind: ClassVar[ComponentType] = ComponentType.SIZE
    id: int = ID_INIT
    vector: Vector2 = field(default_factory=Vector2)


@dataclass
class Color:
    kind: ClassVar[ComponentType] = ComponentType.COLOR
    id: int = ID_INIT
    vector: Vector4 = field(default_factory=Vector4)


@dataclass
class Collider:
    """Collision flags; one direction flag per side (top, right, bottom, left)."""

    kind: ClassVar[ComponentType] = ComponentType.COLLIDER
    id: int = ID_INIT
    is_colliding: bool = False
    collision_direction: Optional[list] = None
    is_static: bool = True

    def __post_init__(self) -> None:
        if self.collision_direction is None:
            self.collision_direction = [False] * len(Coordinate)
            return
        directions = [bool(flag) for flag in self.collision_direction]
        if len(directions) != len(Coordinate):
            raise ValueError(
                f"collision_direction needs {len(Coordinate)} flags, got {len(directions)}"
            )
        self.collision_direction = directions


@dataclass
class Layer:
    kind: ClassVar[ComponentType] = ComponentType.LAYER
    id: int = ID_INIT
    layer: int = 0


@dataclass
class Player:
    kind: ClassVar[ComponentType] = ComponentType.PLAYER
    id: int = ID_INIT


@dataclass
class Collectible:
    kind: ClassVar[ComponentType] = ComponentType.COLLECTIBLE
    id: int = ID_INIT


@dataclass
class Entity:
    index: int = ID_INIT


_COMPONENT_CLASSES = {
    cls.kind: cls
    for cls in (
        Information,
        Position,
        Direction,
        Velocity,
        Acceleration,
        Size,
        Color,
        Collider,
        Layer,
        Player,
        Collectible,
    )
}


def component_name(kind) -> str:
    """Return the display name of a component kind."""
    return _COMPONENT_NAMES[ComponentType(kind)]


def system_name(kind) -> str:
    """Return the display name of a system kind."""
    kind = SystemType(kind)
    try:
        return _SYSTEM_NAMES[kind]
    except KeyError:
        raise ValueError(f"system {kind.name} has no name") from None


def default_component(kind):
    """Return a fresh component of the given kind holding default values."""
    return _COMPONENT_CLASSES[ComponentType(kind)]()