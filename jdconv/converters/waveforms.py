"""
Waveform lookup tables for JD-990 to JD-800 conversion.
"""

from typing import Optional, Tuple

from jdconv.models.jd800 import INTERNAL_WAVEFORM_COUNT

# Flag for LFO waveforms without a JD-800 equivalent
NO_EQUIVALENT = 0x80

# JD-990 LFO waveform -> JD-800 LFO waveform
LFO_WAVEFORMS = (
    0,  # TRI
    0 | NO_EQUIVALENT,  # SIN
    1,  # SAW
    2,  # SQU
    2 | NO_EQUIVALENT,  # TRP
    3,  # S&H
    4,  # RND
    4 | NO_EQUIVALENT,  # CHS
)

FIRST_EXTENDED_WAVEFORM = INTERNAL_WAVEFORM_COUNT
LAST_EXTENDED_WAVEFORM = 194

# Closest JD-800 waveform for each JD-990 internal waveform 108-194.
# Values are 1-based waveform numbers as printed in the manuals.
# The +DC variations are safe since the JD-800 has no ring modulator.
EXTENDED_WAVEFORMS = (
    71, 72, 72, 72, 72, 19, 40, 40, 40, 58, 58, 58, 58, 38, 38, 38,
    39, 36, 36, 70, 70, 36, 36, 36, 36, 92, 96, 96, 96, 96, 96, 94,
    97, 20, 42, 43, 44, 45, 66, 66, 47, 47, 45, 1, 1, 107, 61, 104,
    91, 91, 91, 84, 84, 84, 84, 84, 86, 86, 86, 86, 98, 98, 98, 86,
    86, 86, 86, 86, 86, 86, 86, 86, 86, 86, 1, 4, 5, 6, 7, 8,
    9, 11, 12, 107, 107, 107, 107,
)  # fmt: skip


def convert_lfo_waveform(waveform: int) -> Tuple[int, bool]:
    """
    Map a JD-990 LFO waveform to the JD-800.

    Returns:
        (JD-800 waveform, exact) where exact is False if the base
        waveform had to be substituted

    Raises:
        ValueError: If the waveform is not a JD-990 LFO waveform
    """
    if not 0 <= waveform < len(LFO_WAVEFORMS):
        raise ValueError(f"Invalid LFO waveform: {waveform}")
    mapped = LFO_WAVEFORMS[waveform]
    return mapped & ~NO_EQUIVALENT, not mapped & NO_EQUIVALENT


def substitute_waveform(waveform: int) -> Optional[int]:
    """
    Find the closest JD-800 internal waveform index (0-based).

    Args:
        waveform: JD-990 internal waveform index (0-based)

    Returns:
        JD-800 waveform index, or None if the waveform is unknown
    """
    if 0 <= waveform < INTERNAL_WAVEFORM_COUNT:
        return waveform
    if FIRST_EXTENDED_WAVEFORM <= waveform <= LAST_EXTENDED_WAVEFORM:
        return EXTENDED_WAVEFORMS[waveform - FIRST_EXTENDED_WAVEFORM] - 1
    return None
