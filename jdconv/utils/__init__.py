"""Utility functions for jdconv."""

from jdconv.utils.validation import (
    ValidationError,
    iter_parameters,
    validate_midi_value,
    validate_name,
    validate_record,
)

__all__ = [
    "ValidationError",
    "iter_parameters",
    "validate_midi_value",
    "validate_name",
    "validate_record",
]
