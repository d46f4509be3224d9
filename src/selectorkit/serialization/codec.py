"""JSON encode/decode helpers.

Usage:
    to_json([1, 2, 3])                                   # '[1,2,3]'
    to_json(Rectangle(10, 20))                           # '{"width":10,"height":20}'
    r = from_json(Rectangle, '{"width":10,"height":20}')
    r.area()                                             # 200
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any, TypeVar, cast

import pydantic_core

from selectorkit.config import CodecSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SerializationError(ValueError):
    """Raised when text cannot be decoded onto a prototype."""

    pass


def to_json(value: Any, settings: CodecSettings | None = None) -> str:
    """Serialize a value to JSON text.

    Dataclasses, mappings, sequences and scalars are supported. Keys keep
    their insertion order and None values are written as null.

    Args:
        value: Value to encode.
        settings: Output options; loaded from the environment when omitted.

    Returns:
        JSON text, compact unless settings.indent is set.
    """
    settings = settings or CodecSettings()
    logger.debug("Encoding %s to JSON", type(value).__name__)
    return pydantic_core.to_json(value, indent=settings.indent).decode("utf-8")


def from_json(prototype: type[T] | T, text: str | bytes) -> T:
    """Decode JSON text and merge its fields onto a prototype.

    When prototype is a class, a bare instance is created without calling
    ``__init__``. When it is an instance, a shallow copy is used so the
    original is left untouched. Either way the result keeps the prototype's
    methods. A mapping prototype yields a new dict with the decoded keys
    layered over its own.

    Args:
        prototype: Class, instance or mapping to merge onto.
        text: JSON object text.

    Returns:
        New instance carrying every decoded field.

    Raises:
        SerializationError: If text is malformed, is not a JSON object, or
            has a field the prototype cannot hold.
    """
    try:
        data = pydantic_core.from_json(text)
    except ValueError as e:
        logger.warning("Rejected malformed JSON for %s: %s", _name_of(prototype), e)
        raise SerializationError(f"Malformed JSON: {e}") from e

    if not isinstance(data, dict):
        raise SerializationError(f"Expected a JSON object, got {type(data).__name__}")

    if isinstance(prototype, Mapping):
        logger.debug("Merged %d key(s) onto mapping", len(data))
        return cast(T, {**prototype, **data})

    if isinstance(prototype, type):
        obj = prototype.__new__(prototype)
    else:
        obj = copy.copy(prototype)

    for key, item in data.items():
        try:
            setattr(obj, key, item)
        except (AttributeError, TypeError) as e:
            raise SerializationError(f"{_name_of(prototype)} cannot hold field {key!r}") from e

    logger.debug("Decoded %d field(s) onto %s", len(data), _name_of(prototype))
    return cast(T, obj)


def _name_of(prototype: Any) -> str:
    if isinstance(prototype, type):
        return prototype.__name__
    return type(prototype).__name__
