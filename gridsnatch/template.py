"""Entity templates: the component values a scene description gives each tile kind."""

from __future__ import annotations

from dataclasses import dataclass, field

from .components import (
    ID_INIT,
    MAX_SYSTEMS,
    Acceleration,
    Collectible,
    Collider,
    Color,
    ComponentType,
    Direction,
    Information,
    Layer,
    Player,
    Position,
    Size,
    Velocity,
)


@dataclass
class EntityTemplate:
    """Component values for every entity created from one map tile index."""

    index: int = ID_INIT
    information: Information = field(default_factory=Information)
    position: Position = field(default_factory=Position)
    direction: Direction = field(default_factory=Direction)
    velocity: Velocity = field(default_factory=Velocity)
    acceleration: Acceleration = field(default_factory=Acceleration)
    size: Size = field(default_factory=Size)
    color: Color = field(default_factory=Color)
    collider: Collider = field(default_factory=Collider)
    layer: Layer = field(default_factory=Layer)
    player: Player = field(default_factory=Player)
    collectible: Collectible = field(default_factory=Collectible)
    component_types: list = field(default_factory=list)
    systems: list = field(default_factory=list)

    def add_component(self, kind) -> ComponentType:
        """Record that entities from this template carry a component of kind."""
        kind = ComponentType(kind)
        if len(self.component_types) >= len(ComponentType):
            raise ValueError(
                f"template already lists {len(ComponentType)} component kinds"
            )
        self.component_types.append(kind)
        return kind

    def has_component(self, kind) -> bool:
        return ComponentType(kind) in self.component_types

    def add_system(self, system) -> int:
        """Record a system number for this template."""
        if len(self.systems) >= MAX_SYSTEMS:
            raise ValueError(f"template already lists {MAX_SYSTEMS} systems")
        system = int(system)
        self.systems.append(system)
        return system