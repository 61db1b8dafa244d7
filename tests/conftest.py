"""Test configuration and fixtures."""

import dataclasses
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from jdconv.converters import JD990ToJD800Converter
from jdconv.models import Patch990, SpecialSetup990, Tone990


def _fill(record, value):
    """Set every integer parameter of a record to value."""
    for f in dataclasses.fields(record):
        current = getattr(record, f.name)
        if dataclasses.is_dataclass(current):
            _fill(current, value)
        elif isinstance(current, list):
            for item in current:
                _fill(item, value)
        elif isinstance(current, int):
            setattr(record, f.name, value)
    return record


@pytest.fixture
def converter():
    """Return a fresh converter."""
    return JD990ToJD800Converter()


@pytest.fixture
def patch990():
    """Return a default JD-990 patch (converts without loss)."""
    return Patch990()


@pytest.fixture
def setup990():
    """Return a default JD-990 special setup."""
    return SpecialSetup990()


@pytest.fixture
def tone990():
    """Return a default JD-990 tone."""
    return Tone990()


@pytest.fixture
def messy_patch990():
    """Return a JD-990 patch that uses many features the JD-800 lacks."""
    patch = Patch990()
    patch.common.name = "MESSY PATCH"
    patch.common.patch_pan = 30
    patch.common.analog_feel = 5
    patch.structure.structure_ab = 1
    patch.structure.structure_cd = 3
    patch.velocity.velocity_range2 = 1
    patch.effect.delay_center_tap_msb = 1
    patch.effect.delay_left_tap_lsb = 0x7F

    patch.tone_a.wg.waveform_lsb = 120
    patch.tone_a.wg.fxm_depth = 40
    patch.tone_a.lfo1.waveform = 1
    patch.tone_a.lfo1.depth_tvf = 70
    patch.tone_a.lfo2.depth_tvf = 20
    patch.tone_a.cs1.entries[0].destination = 4
    patch.tone_a.cs1.entries[0].depth = 30
    patch.tone_a.cs2.entries[1].destination = 0
    patch.tone_a.cs2.entries[1].depth = 44

    patch.tone_b.tva.level = 77
    patch.tone_b.tva_env.time1 = 33
    patch.tone_b.tva.pan = 80

    patch.tone_d.pitch_env.level0 = 10
    patch.tone_d.pitch_env.level1 = 90
    patch.tone_d.pitch_env.level3 = 70
    patch.tone_d.cs2.entries[3].destination = 9
    patch.tone_d.cs2.entries[3].depth = 60
    return patch


@pytest.fixture
def saturated_patch990():
    """Return a JD-990 patch with every numeric parameter at 100."""
    return _fill(Patch990(), 100)


@pytest.fixture
def zeroed_patch990():
    """Return a JD-990 patch with every numeric parameter at 0."""
    return _fill(Patch990(), 0)


@pytest.fixture
def saturated_setup990():
    """Return a JD-990 special setup with every numeric parameter at 100."""
    return _fill(SpecialSetup990(), 100)
