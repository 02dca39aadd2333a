"""Built-in block catalogue; importing this package registers every kind on ``BLOCKS``."""

from . import actions, camera, events, lighting, materials, physics, shapes, values, world

__all__ = ["actions", "camera", "events", "lighting", "materials", "physics", "shapes", "values", "world"]
