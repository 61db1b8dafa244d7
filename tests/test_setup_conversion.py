"""Tests for JD-990 to JD-800 special setup conversion."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from jdconv.converters import Severity, convert_setup_990_to_800, rescale_setup_pan
from jdconv.formats import pack_parameters
from jdconv.utils import validate_record


class TestSetupConversion:
    def test_default_setup_reports_only_name(self, setup990):
        result = convert_setup_990_to_800(setup990)

        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].severity == Severity.INFO
        assert result.is_lossless
        assert len(result.target.keys) == 61
        validate_record(result.target)

    def test_common_diagnostics(self, setup990):
        setup990.common.level = 100
        setup990.common.pan = 40
        setup990.common.analog_feel = 3
        setup990.common.tone_control_source1 = 2

        result = convert_setup_990_to_800(setup990)

        assert [d.parameter for d in result.diagnostics] == [
            "name",
            "level",
            "pan",
            "analog_feel",
            "tone_control_source1",
        ]
        assert all(d.context == "setup" for d in result.diagnostics)

    def test_common_fields(self, setup990):
        setup990.common.bender_range_down = 24
        setup990.common.bender_range_up = 12
        setup990.eq.high_gain = 20

        target = convert_setup_990_to_800(setup990).target

        assert target.common.bender_range_down == 24
        assert target.common.bender_range_up == 12
        assert target.common.aftertouch_bend_sens == 14
        assert target.eq.high_gain == 20

    def test_key_fields(self, setup990):
        key = setup990.keys[10]
        key.name = "SNARE"
        key.mute_group = 4
        key.env_mode = 1
        key.effect_mode = 2
        key.effect_level = 64
        key.tone.tvf.cutoff_freq = 70

        target = convert_setup_990_to_800(setup990).target.keys[10]

        assert target.name == "SNARE"
        assert target.mute_group == 4
        assert target.env_mode == 1
        assert target.effect_mode == 2
        assert target.effect_level == 64
        assert target.tone.tvf.cutoff_freq == 70

    def test_key_pan_is_rescaled_silently(self, setup990):
        setup990.keys[0].tone.tva.pan = 100
        setup990.keys[1].tone.tva.pan = 0

        result = convert_setup_990_to_800(setup990)

        assert result.target.keys[0].pan == 60
        assert result.target.keys[1].pan == 0
        assert result.target.keys[2].pan == 30
        assert len(result.diagnostics) == 1

    @pytest.mark.parametrize("pan,expected", [(0, 0), (50, 30), (100, 60), (127, 76)])
    def test_rescale_setup_pan(self, pan, expected):
        assert rescale_setup_pan(pan) == expected

    def test_invalid_mute_group(self, setup990):
        setup990.keys[5].mute_group = 9

        result = convert_setup_990_to_800(setup990)

        assert result.target.keys[5].mute_group == 0
        diagnostic = result.diagnostics[1]
        assert diagnostic.severity == Severity.OUT_OF_RANGE
        assert diagnostic.context == "key 5"
        assert diagnostic.value == 9

    def test_invalid_effect_mode(self, setup990):
        setup990.keys[60].effect_mode = 4

        result = convert_setup_990_to_800(setup990)

        assert result.target.keys[60].effect_mode == 0
        assert result.diagnostics[1].parameter == "effect_mode"
        assert result.diagnostics[1].context == "key 60"
        assert not result.is_lossless

    def test_tone_diagnostics_name_the_key(self, setup990):
        setup990.keys[7].tone.wg.waveform_lsb = 110

        result = convert_setup_990_to_800(setup990)

        assert result.diagnostics[1].context == "key 7"
        assert result.diagnostics[1].parameter == "waveform"

    def test_aftertouch_bend_reaches_common(self, setup990):
        entry = setup990.keys[30].tone.cs2.entries[2]
        entry.destination = 0
        entry.depth = 14

        target = convert_setup_990_to_800(setup990).target

        assert target.common.aftertouch_bend_sens == 0
        assert target.keys[30].tone.wg.aftertouch_bend == 1

    def test_saturated_setup(self, saturated_setup990):
        result = convert_setup_990_to_800(saturated_setup990)

        validate_record(result.target)
        assert all(key.mute_group == 0 for key in result.target.keys)
        assert all(key.pan == 60 for key in result.target.keys)

    def test_conversion_is_stable(self, setup990):
        """Converting twice gives identical output and diagnostics."""
        setup990.common.pan = 10
        setup990.keys[2].mute_group = 12
        setup990.keys[9].tone.wg.sync_slave_switch = 1
        setup990.keys[40].tone.tva.pan = 90

        first = convert_setup_990_to_800(setup990)
        second = convert_setup_990_to_800(setup990)

        assert pack_parameters(first.target) == pack_parameters(second.target)
        assert first.diagnostics == second.diagnostics
        assert len(first.diagnostics) == 4

    def test_source_is_not_modified(self, setup990):
        setup990.keys[3].mute_group = 20

        convert_setup_990_to_800(setup990)

        assert setup990.keys[3].mute_group == 20
