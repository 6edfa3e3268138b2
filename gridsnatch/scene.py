"""Reading of the scene description that defines one entity template per tile kind."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from .components import WINDOW_WIDTH, ComponentType
from .template import EntityTemplate

MAX_TEMPLATES = 10


class SceneError(Exception):
    """Raised when a scene description cannot be read or is malformed."""


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _number(obj: dict, key: str) -> Optional[float]:
    value = obj.get(key)
    return value if _is_number(value) else None


def _section(components: dict, key: str) -> Optional[dict]:
    value = components.get(key)
    return value if isinstance(value, dict) else None


def _read_vector(vector, section: dict, x_key: str, y_key: str) -> None:
    x = _number(section, x_key)
    if x is not None:
        vector.x = x
    y = _number(section, y_key)
    if y is not None:
        vector.y = y


def _read_information(template: EntityTemplate, section: dict) -> None:
    name = section.get("name")
    if isinstance(name, str):
        template.information.name = name


def _read_position(template: EntityTemplate, section: dict) -> None:
    _read_vector(template.position.current, section, "x", "y")
    _read_vector(template.position.old, section, "oldX", "oldY")


def _read_size(template: EntityTemplate, section: dict) -> None:
    width = _number(section, "width")
    if width is not None:
        # A width of -1 stretches the entity over the whole window.
        template.size.vector.x = WINDOW_WIDTH if width == -1.0 else width
    height = _number(section, "height")
    if height is not None:
        template.size.vector.y = height


def _read_color(template: EntityTemplate, section: dict) -> None:
    channels = template.color.vector
    for key, attribute in (("red", "x"), ("green", "y"), ("blue", "z"), ("alpha", "w")):
        value = _number(section, key)
        if value is not None:
            setattr(channels, attribute, int(value))


def _read_collider(template: EntityTemplate, section: dict) -> None:
    colliding = section.get("isItColliding")
    if isinstance(colliding, str):
        template.collider.is_colliding = colliding == "true"


def _read_layer(template: EntityTemplate, section: dict) -> None:
    layer = _number(section, "layer")
    if layer is not None:
        template.layer.layer = int(layer)


def _vector_reader(attribute: str):
    def read(template: EntityTemplate, section: dict) -> None:
        _read_vector(getattr(template, attribute).vector, section, "x", "y")

    return read


# Sections in the order they are read; this order fixes the template's component list.
# Sections without a reader are marker components that carry no fields.
_SECTIONS = (
    ("information", ComponentType.INFORMATION, _read_information),
    ("position", ComponentType.POSITION, _read_position),
    ("direction", ComponentType.DIRECTION, _vector_reader("direction")),
    ("velocity", ComponentType.VELOCITY, _vector_reader("velocity")),
    ("acceleration", ComponentType.ACCELERATION, _vector_reader("acceleration")),
    ("size", ComponentType.SIZE, _read_size),
    ("color", ComponentType.COLOR, _read_color),
    ("collider", ComponentType.COLLIDER, _read_collider),
    ("layer", ComponentType.LAYER, _read_layer),
    ("player", ComponentType.PLAYER, None),
    ("collectible", ComponentType.COLLECTIBLE, None),
)


def _read_components(template: EntityTemplate, components: dict) -> None:
    for key, kind, reader in _SECTIONS:
        section = _section(components, key)
        if section is None:
            continue
        template.add_component(kind)
        if reader is not None:
            reader(template, section)


def _read_index(entry: dict, number: int) -> int:
    index = entry.get("index")
    if not _is_number(index):
        raise SceneError(f"entity {number} has no numeric index")
    return int(index)


def parse_scene(data) -> list:
    """Build the entity templates described by a decoded scene document.

    Entries that are not objects yield a default template. An object entry
    without a "systems" array ends the scan; it and later entries are dropped.
    """
    if not isinstance(data, dict):
        raise SceneError("scene must be a JSON object")
    entries = data.get("entities")
    if not isinstance(entries, list):
        return []
    if len(entries) > MAX_TEMPLATES:
        raise SceneError(
            f"scene holds {len(entries)} entities, at most {MAX_TEMPLATES} are allowed"
        )

    templates = []
    for number, entry in enumerate(entries):
        template = EntityTemplate()
        if isinstance(entry, dict):
            template.index = _read_index(entry, number)
            components = entry.get("components")
            if isinstance(components, dict):
                _read_components(template, components)
            systems = entry.get("systems")
            if not isinstance(systems, list):
                break
            for system in systems:
                if not _is_number(system):
                    continue
                try:
                    template.add_system(int(system))
                except ValueError as error:
                    raise SceneError(f"entity {number}: {error}") from error
        templates.append(template)
    return templates


def load_scene(path) -> list:
    """Read the scene file at path and return its entity templates."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise SceneError(f"cannot read scene {path}: {error}") from error
    try:
        data = json.loads(text)
    except json.JSONDecodeError as error:
        raise SceneError(f"scene {path} is not valid JSON: {error}") from error
    return parse_scene(data)