from enum import Enum
from typing import Any


PRIMITIVE_TYPES = (str, int, float, bool, type(None))


def serialize(obj: Any):
    """
    Serialize style and validation objects into JSON-compatible structures.
    Enums become their values, dataclasses become dicts.
    """

    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, PRIMITIVE_TYPES):
        return obj

    if isinstance(obj, (list, tuple)):
        return [serialize(item) for item in obj]

    if isinstance(obj, dict):
        return {k: serialize(v) for k, v in obj.items()}

    if hasattr(obj, "__dict__"):
        return {
            key: serialize(value)
            for key, value in obj.__dict__.items()
            if not key.startswith("_")
        }

    return str(obj)
