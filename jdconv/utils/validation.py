"""
Data validation utilities for JD parameter records.
"""

import dataclasses
import typing
from typing import Any, Iterator, Tuple


class ValidationError(Exception):
    """Raised when parameter data validation fails."""

    pass


def validate_midi_value(value: int, name: str = "value") -> None:
    """
    Validate that a value is in MIDI data range (0-127).

    Args:
        value: The value to validate
        name: Name of the value for error messages

    Raises:
        ValidationError: If value is out of range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= 127:
        raise ValidationError(f"{name} must be 0-127, got {value}")


def validate_name(name: str, max_length: int = 16) -> str:
    """
    Validate and normalize a patch, setup or key name.

    Args:
        name: Name
        max_length: Maximum allowed length (16 on both JD models)

    Returns:
        Name padded with spaces to max_length

    Raises:
        ValidationError: If name is not a string, too long or not printable ASCII
    """
    if not isinstance(name, str):
        raise ValidationError(f"Name must be a string, got {name!r}")

    for char in name:
        if not 0x20 <= ord(char) <= 0x7E:
            raise ValidationError(f"Invalid character {char!r} in name {name!r}")

    if len(name) > max_length:
        raise ValidationError(f"Name {name!r} longer than {max_length} characters")

    return name.ljust(max_length)


def iter_parameters(record: Any, prefix: str = "") -> Iterator[Tuple[str, Any]]:
    """
    Walk a parameter record depth-first in declaration order.

    Yields:
        (dotted parameter path, value) for every leaf parameter
    """
    for f in dataclasses.fields(record):
        value = getattr(record, f.name)
        path = f"{prefix}{f.name}"
        if dataclasses.is_dataclass(value):
            yield from iter_parameters(value, f"{path}.")
        elif isinstance(value, list):
            for index, item in enumerate(value):
                yield from iter_parameters(item, f"{path}[{index}].")
        else:
            yield path, value


def validate_record(record: Any, prefix: str = "") -> None:
    """
    Check that every parameter of a record is storable.

    Each parameter is checked against its declared type: str fields must
    hold a valid name, int fields a 7-bit value.

    Raises:
        ValidationError: On the first invalid parameter
    """
    hints = typing.get_type_hints(type(record))
    for f in dataclasses.fields(record):
        value = getattr(record, f.name)
        path = f"{prefix}{f.name}"
        hint = hints[f.name]
        if dataclasses.is_dataclass(hint):
            if not isinstance(value, hint):
                raise ValidationError(f"{path} must be a {hint.__name__} record")
            validate_record(value, f"{path}.")
        elif "item" in f.metadata:
            if not isinstance(value, list) or len(value) != f.metadata["count"]:
                raise ValidationError(f"{path} must be a list of {f.metadata['count']}")
            for index, item in enumerate(value):
                validate_record(item, f"{path}[{index}].")
        elif hint is str:
            validate_name(value, f.metadata.get("length", 16))
        else:
            validate_midi_value(value, path)
