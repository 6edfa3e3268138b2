"""Drawing the world into a window surface and managing that window."""

from __future__ import annotations

import pygame

from .components import (
    MAX_LAYER,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Color,
    ComponentType,
    Vector4,
)


def entity_rect(position, size) -> tuple:
    """Return the (x, y, width, height) rectangle an entity covers on screen."""
    return (position.current.x, position.current.y, size.vector.x, size.vector.y)


def _rgba(color: Color) -> tuple:
    channels = color.vector
    return tuple(
        max(0, min(255, int(value)))
        for value in (channels.x, channels.y, channels.z, channels.w)
    )


def ticks_passed(a, b) -> bool:
    """Return True once time b has reached or passed time a."""
    return (b - a) <= 0


class Renderer:
    """Draws entities as filled rectangles on a pygame surface."""

    def __init__(self, surface):
        self.surface = surface

    def clear(self, color: Color) -> None:
        self.surface.fill(_rgba(color))

    def draw(self, position, size, color: Color) -> None:
        x, y, width, height = entity_rect(position, size)
        rect = pygame.Rect(round(x), round(y), round(width), round(height))
        pygame.draw.rect(self.surface, _rgba(color), rect)

    def render(self, world) -> int:
        """Draw every entity layer by layer, lowest first; return how many were drawn.

        Nothing happens while no entity has a layer. Within a layer the scan
        stops at the first entity lacking a position, size, color or layer.
        """
        if world.store(ComponentType.LAYER).is_empty():
            return 0

        self.clear(Color(vector=Vector4(0, 0, 0, 255)))
        drawn = 0
        for layer_order in range(MAX_LAYER):
            for entity in world.entities():
                found = world.components(
                    entity.index,
                    ComponentType.POSITION,
                    ComponentType.SIZE,
                    ComponentType.COLOR,
                    ComponentType.LAYER,
                )
                if found is None:
                    break
                position, size, color, layer = found
                if layer.layer == layer_order:
                    self.draw(position, size, color)
                    drawn += 1
        self._present()
        return drawn

    def _present(self) -> None:
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()


def open_window() -> Renderer:
    """Open the game window and return a renderer for it."""
    try:
        pygame.display.init()
    except pygame.error as error:
        raise RuntimeError(f"Error initializing display: {error}") from error
    try:
        surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    except pygame.error as error:
        raise RuntimeError(f"Error creating window: {error}") from error
    return Renderer(surface)


def close_window() -> None:
    """Close the game window and shut pygame down."""
    pygame.display.quit()
    pygame.quit()