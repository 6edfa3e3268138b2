"""A grid-based collect-the-tile arcade game on an entity-component-system core."""

__version__ = "0.1.0"