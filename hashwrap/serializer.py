# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.

# pylint: disable=too-many-return-statements
"""Canonical string encoding of arbitrary input.

Scalars are cast to text. Everything else gets a tagged, length
prefixed encoding (the layout of PHP's ``serialize``), so hashes of
structured data stay comparable with ones made by PHP applications::

    None            N;
    True            b:1;
    12345           i:12345;
    0.5             d:0.5;
    "foo"           s:3:"foo";
    ["foo", "bar"]  a:2:{i:0;s:3:"foo";i:1;s:3:"bar";}
    object()        O:8:"stdClass":0:{}
"""

import dataclasses
import datetime
import decimal
import enum
import math
import uuid
from typing import Any, Dict, Iterable, List, Set, Tuple

from .errors import SerializationError

RECORD_NAME = "stdClass"

_TEXT_LIKE = (
    datetime.date,
    datetime.time,
    datetime.timedelta,
    decimal.Decimal,
    uuid.UUID,
)


def to_data_string(data: Any) -> str:
    """Get the canonical string for any input.

    Parameters
    ----------
    data : Any
        The input.

    Returns
    -------
    str
        The input itself for scalars, its tagged encoding otherwise.

    Raises
    ------
    SerializationError
        If the input cannot be encoded.
    """
    if isinstance(data, str):
        return data
    if isinstance(data, bytes):
        return _decode(data)
    if isinstance(data, bool):
        return "1" if data else ""
    if isinstance(data, int):
        return str(data)
    if isinstance(data, float):
        return format_float(data)
    return encode(data)


def encode(data: Any) -> str:
    """Encode a value with the tagged encoding.

    Parameters
    ----------
    data : Any
        The value to encode.

    Returns
    -------
    str
        The encoded value.
    """
    return _encode(data, set())


def format_float(value: float) -> str:
    """Format a float the same way on every platform.

    Parameters
    ----------
    value : float
        The value.

    Returns
    -------
    str
        The shortest round-tripping representation, without a
        fractional part for integral values.
    """
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def _encode(data: Any, seen: Set[int]) -> str:  # noqa: C901
    # Handle None
    if data is None:
        return "N;"

    # Handle scalars
    if isinstance(data, bool):
        return f"b:{int(data)};"
    if isinstance(data, int):
        return f"i:{data};"
    if isinstance(data, float):
        return f"d:{format_float(data)};"
    if isinstance(data, (str, bytes)):
        return _encode_text(data if isinstance(data, str) else _decode(data))
    if isinstance(data, enum.Enum):
        return _encode(data.value, seen)
    if isinstance(data, _TEXT_LIKE):
        return _encode_text(str(data))

    # Handle composites, guarding against reference cycles
    marker = id(data)
    if marker in seen:
        raise SerializationError(
            f"Cannot serialize self-referencing {type(data).__name__}"
        )
    seen.add(marker)
    try:
        if isinstance(data, dict):
            return _encode_array(data.items(), seen)
        if isinstance(data, (list, tuple)):
            return _encode_array(enumerate(data), seen)
        if isinstance(data, (set, frozenset)):
            items = sorted(_encode(item, seen) for item in data)
            return _encode_pairs(
                [(f"i:{index};", item) for index, item in enumerate(items)],
                "a:{count}:{{{body}}}",
            )
        return _encode_record(_record_fields(data), seen)
    finally:
        seen.discard(marker)


def _encode_text(value: str) -> str:
    return f's:{len(value.encode("utf-8"))}:"{value}";'


def _encode_key(key: Any) -> str:
    if isinstance(key, bool):
        return f"i:{int(key)};"
    if isinstance(key, int):
        return f"i:{key};"
    if isinstance(key, str):
        return _encode_text(key)
    raise SerializationError(f"Unsupported key type: {type(key).__name__}")


def _encode_array(items: Iterable[Tuple[Any, Any]], seen: Set[int]) -> str:
    pairs = [(_encode_key(key), _encode(value, seen)) for key, value in items]
    return _encode_pairs(pairs, "a:{count}:{{{body}}}")


def _encode_record(fields: Dict[str, Any], seen: Set[int]) -> str:
    pairs = [
        (_encode_text(name), _encode(value, seen))
        for name, value in fields.items()
    ]
    name = f'O:{len(RECORD_NAME)}:"{RECORD_NAME}"'
    return _encode_pairs(pairs, name + ":{count}:{{{body}}}")


def _encode_pairs(pairs: List[Tuple[str, str]], template: str) -> str:
    body = "".join(key + value for key, value in pairs)
    return template.format(count=len(pairs), body=body)


def _record_fields(data: Any) -> Dict[str, Any]:
    """Get the instance state of an object, in definition order."""
    # Handle Pydantic models
    if hasattr(data, "model_dump") and not isinstance(data, type):
        return dict(data.model_dump())
    # Handle dataclasses
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return {
            field.name: getattr(data, field.name)
            for field in dataclasses.fields(data)
        }
    fields: Dict[str, Any] = {}
    for cls in reversed(type(data).__mro__):
        for slot in _as_tuple(cls.__dict__.get("__slots__", ())):
            if slot in ("__dict__", "__weakref__"):
                continue
            if hasattr(data, slot):
                fields[slot] = getattr(data, slot)
    fields.update(getattr(data, "__dict__", {}))
    return fields


def _as_tuple(slots: Any) -> Tuple[str, ...]:
    if isinstance(slots, str):
        return (slots,)
    return tuple(slots)


def _decode(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as error:
        raise SerializationError(
            f"Bytes are not valid UTF-8: {error}"
        ) from error


__all__ = ["RECORD_NAME", "encode", "format_float", "to_data_string"]
