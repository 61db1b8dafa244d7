"""
jdconv - Patch converter from the Roland JD-990 to the Roland JD-800.

This library provides tools to:
- Convert JD-990 patches and special setups to the JD-800
- Report every parameter that could not be converted exactly
- Read and write parameter records as JSON or packed parameter blocks
- Extract JX-8P tone data from SysEx dumps

Example usage:
    from jdconv import Patch990, RecordReader, convert_patch_990_to_800

    patch = RecordReader.read("brass.json", Patch990)
    result = convert_patch_990_to_800(patch)
    for diagnostic in result.diagnostics:
        print(diagnostic)
"""

__version__ = "0.1.0"
__author__ = "jdconv Contributors"

from jdconv.converters import (
    ConversionResult,
    Diagnostic,
    Severity,
    convert_patch_990_to_800,
    convert_setup_990_to_800,
)
from jdconv.formats import RecordReader, RecordWriter
from jdconv.models import Patch800, Patch990, SpecialSetup800, SpecialSetup990

__all__ = [
    "ConversionResult",
    "Diagnostic",
    "Severity",
    "convert_patch_990_to_800",
    "convert_setup_990_to_800",
    "RecordReader",
    "RecordWriter",
    "Patch800",
    "Patch990",
    "SpecialSetup800",
    "SpecialSetup990",
]
