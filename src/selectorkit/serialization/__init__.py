"""Serialization helpers: JSON encode and decode-onto-prototype."""

from selectorkit.serialization.codec import SerializationError, from_json, to_json

__all__ = [
    "to_json",
    "from_json",
    "SerializationError",
]
