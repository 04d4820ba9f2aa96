"""object_tasks - rectangles, JSON helpers and a CSS selector builder."""

from object_tasks.config import SerializationConfig
from object_tasks.selector import builder as css_selector_builder
from object_tasks.serialization import from_json, get_json
from object_tasks.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    "Rectangle",
    "get_json",
    "from_json",
    "SerializationConfig",
    "css_selector_builder",
]
