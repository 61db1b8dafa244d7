"""
Record file reader and writer.

Records are stored either as JSON (human editable, one key per
parameter) or as packed parameter blocks (any other suffix).
"""

import dataclasses
import json
import typing
from pathlib import Path
from typing import Any, Dict, Type, TypeVar, Union

from jdconv.formats.parameter_block import pack_parameters, unpack_parameters
from jdconv.utils.validation import ValidationError, validate_record

R = TypeVar("R")

JSON_SUFFIX = ".json"


def record_to_dict(record: Any) -> Dict[str, Any]:
    """Convert a record to plain dictionaries and lists."""
    return dataclasses.asdict(record)


def record_from_dict(cls: Type[R], data: Dict[str, Any], path: str = "") -> R:
    """
    Build a record from a dictionary.

    Missing parameters keep their defaults.

    Raises:
        ValidationError: On unknown keys or mismatched structure
    """
    if not isinstance(data, dict):
        raise ValidationError(f"{path or cls.__name__} must be an object")

    fields = {f.name: f for f in dataclasses.fields(cls)}
    unknown = sorted(set(data) - set(fields))
    if unknown:
        raise ValidationError(f"Unknown parameters in {path or cls.__name__}: {', '.join(unknown)}")

    hints = typing.get_type_hints(cls)
    values: Dict[str, Any] = {}
    for name, value in data.items():
        f = fields[name]
        hint = hints[name]
        if dataclasses.is_dataclass(hint):
            values[name] = record_from_dict(hint, value, f"{path}{name}.")
        elif "item" in f.metadata:
            if not isinstance(value, list) or len(value) != f.metadata["count"]:
                raise ValidationError(f"{path}{name} must be a list of {f.metadata['count']}")
            values[name] = [
                record_from_dict(f.metadata["item"], item, f"{path}{name}[{index}].")
                for index, item in enumerate(value)
            ]
        elif hint is str:
            if not isinstance(value, str):
                raise ValidationError(f"{path}{name} must be a string, got {value!r}")
            values[name] = value
        else:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(f"{path}{name} must be an integer, got {value!r}")
            values[name] = value
    return cls(**values)


class RecordReader:
    """
    Reader for parameter record files.

    Example:
        patch = RecordReader.read("brass.json", Patch990)
    """

    @classmethod
    def read(cls, filepath: Union[str, Path], record_type: Type[R]) -> R:
        """
        Read a record file.

        Args:
            filepath: JSON file or packed parameter block
            record_type: Record class to read

        Returns:
            Validated record
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        if filepath.suffix.lower() == JSON_SUFFIX:
            with open(filepath, "r", encoding="utf-8") as f:
                try:
                    data = json.load(f)
                except json.JSONDecodeError as e:
                    raise ValidationError(f"Invalid JSON in {filepath}: {e}") from e
            record = record_from_dict(record_type, data)
            validate_record(record)
            return record

        with open(filepath, "rb") as f:
            return unpack_parameters(record_type, f.read())


class RecordWriter:
    """
    Writer for parameter record files.

    Example:
        RecordWriter.write(patch800, "brass.bin")
    """

    @classmethod
    def write(cls, record: Any, filepath: Union[str, Path]) -> None:
        """
        Write a record file.

        Args:
            record: Record to write
            filepath: Output path; .json writes JSON, anything else a packed block
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        if filepath.suffix.lower() == JSON_SUFFIX:
            validate_record(record)
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(record_to_dict(record), f, indent=2)
                f.write("\n")
        else:
            with open(filepath, "wb") as f:
                f.write(pack_parameters(record))
