"""Parameter records for the JD-990 (source) and JD-800 (target)."""

from jdconv.models.jd990 import (
    Eq,
    ModMatrixEntry,
    Patch990,
    SetupKey990,
    SpecialSetup990,
    Tone990,
)
from jdconv.models.jd800 import (
    Patch800,
    SetupKey800,
    SpecialSetup800,
    Tone800,
)

__all__ = [
    "Eq",
    "ModMatrixEntry",
    "Patch990",
    "SetupKey990",
    "SpecialSetup990",
    "Tone990",
    "Patch800",
    "SetupKey800",
    "SpecialSetup800",
    "Tone800",
]
