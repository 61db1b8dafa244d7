"""
Packed parameter blocks.

A parameter block stores a record as one byte per parameter in
declaration order, with names as fixed-length, space padded ASCII.
Nested records and repeated records (tones, setup keys, matrix entries)
are stored inline, one after another.
"""

import dataclasses
import typing
from typing import Any, Dict, Tuple, Type, TypeVar

from jdconv.utils.validation import ValidationError, validate_midi_value, validate_name

R = TypeVar("R")


def pack_parameters(record: Any) -> bytes:
    """
    Pack a record into a parameter block.

    Raises:
        ValidationError: If a parameter cannot be stored
    """
    out = bytearray()
    for f in dataclasses.fields(record):
        value = getattr(record, f.name)
        if dataclasses.is_dataclass(value):
            out += pack_parameters(value)
        elif isinstance(value, list):
            count = f.metadata["count"]
            if len(value) != count:
                raise ValidationError(f"{f.name} must have {count} entries, got {len(value)}")
            for item in value:
                out += pack_parameters(item)
        elif "length" in f.metadata:
            out += validate_name(value, f.metadata["length"]).encode("ascii")
        else:
            validate_midi_value(value, f.name)
            out.append(value)
    return bytes(out)


def block_size(cls: type) -> int:
    """Size in bytes of the parameter block of a record type."""
    return len(pack_parameters(cls()))


def unpack_parameters(cls: Type[R], data: bytes) -> R:
    """
    Unpack a parameter block.

    Args:
        cls: Record type
        data: Parameter block, exactly block_size(cls) bytes

    Returns:
        The record

    Raises:
        ValueError: If the block has the wrong size
        ValidationError: If a parameter is out of range
    """
    expected = block_size(cls)
    if len(data) != expected:
        raise ValueError(f"Invalid {cls.__name__} block size: {len(data)} (expected {expected})")
    record, _ = _unpack(cls, bytes(data), 0)
    return record


def _unpack(cls: type, data: bytes, offset: int) -> Tuple[Any, int]:
    hints = typing.get_type_hints(cls)
    values: Dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        hint = hints[f.name]
        if dataclasses.is_dataclass(hint):
            values[f.name], offset = _unpack(hint, data, offset)
        elif "item" in f.metadata:
            items = []
            for _ in range(f.metadata["count"]):
                item, offset = _unpack(f.metadata["item"], data, offset)
                items.append(item)
            values[f.name] = items
        elif hint is str:
            length = f.metadata["length"]
            raw = data[offset : offset + length]
            if any(not 0x20 <= b <= 0x7E for b in raw):
                raise ValidationError(f"{f.name} is not printable ASCII: {raw.hex(' ')}")
            values[f.name] = raw.decode("ascii").rstrip(" ")
            offset += length
        else:
            validate_midi_value(data[offset], f.name)
            values[f.name] = data[offset]
            offset += 1
    return cls(**values), offset
