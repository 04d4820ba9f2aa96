"""JSON helpers: render objects as JSON and rebuild typed values from it."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from object_tasks.config import SerializationConfig

__all__ = ["get_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DEFAULT_CONFIG = SerializationConfig()


def _to_plain(obj: Any) -> Any:
    """Fallback encoder for values ``json`` cannot handle natively."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any, config: SerializationConfig | None = None) -> str:
    """Return the JSON representation of *obj*.

    Output is compact by default::

        get_json([1, 2, 3])               # => '[1,2,3]'
        get_json({"width": 10, "height": 20})
        # => '{"width":10,"height":20}'

    Dataclass instances are written as an object of their fields.
    """
    cfg = config or _DEFAULT_CONFIG
    text = json.dumps(
        obj,
        separators=cfg.separators,
        sort_keys=cfg.sort_keys,
        indent=cfg.indent,
        ensure_ascii=cfg.ensure_ascii,
        default=_to_plain,
    )
    logger.debug("Encoded %s as %d characters of JSON", type(obj).__name__, len(text))
    return text


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of *cls* from the JSON object in *text*.

    The JSON is parsed into a plain dict first and the matching fields are
    then copied into a new *cls* value. For dataclasses only init fields
    present in the data are passed to the constructor; unknown keys are
    ignored. Other classes get a bare instance (``__init__`` is not called)
    with each parsed key set as an attribute.

    Raises:
        TypeError: If *text* does not hold a JSON object.
        json.JSONDecodeError: If *text* is not valid JSON.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )

    if dataclasses.is_dataclass(cls):
        names = {f.name for f in dataclasses.fields(cls) if f.init}
        kwargs = {key: value for key, value in data.items() if key in names}
        logger.debug("Decoded %s with fields %s", cls.__name__, sorted(kwargs))
        return cls(**kwargs)

    instance = cls.__new__(cls)
    for key, value in data.items():
        setattr(instance, key, value)
    logger.debug("Decoded %s with attributes %s", cls.__name__, sorted(data))
    return instance
