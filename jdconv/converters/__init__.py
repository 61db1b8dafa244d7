"""
Record converters for JD-990 -> JD-800 conversion.

Example:
    from jdconv.converters import convert_patch_990_to_800

    result = convert_patch_990_to_800(patch990)
    patch800 = result.target
    for diagnostic in result.diagnostics:
        print(diagnostic)
"""

from jdconv.converters.diagnostics import (
    ConversionResult,
    Diagnostic,
    DiagnosticLog,
    Severity,
)
from jdconv.converters.jd990_to_jd800 import (
    JD990ToJD800Converter,
    convert_patch_990_to_800,
    convert_setup_990_to_800,
    fixup_structure,
    rescale_setup_pan,
)
from jdconv.converters.tone_control import (
    ControlSource,
    Destination,
    ToneControlUpdate,
    resolve_tone_control,
)

__all__ = [
    "ConversionResult",
    "Diagnostic",
    "DiagnosticLog",
    "Severity",
    "JD990ToJD800Converter",
    "convert_patch_990_to_800",
    "convert_setup_990_to_800",
    "fixup_structure",
    "rescale_setup_pan",
    "ControlSource",
    "Destination",
    "ToneControlUpdate",
    "resolve_tone_control",
]
