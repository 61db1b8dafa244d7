"""Tests for tone control (modulation matrix) resolution."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from jdconv.converters.tone_control import (
    ControlSource,
    Destination,
    ToneControlUpdate,
    aftertouch_bend_code,
    resolve_tone_control,
)
from jdconv.models.jd800 import Tone800

MOD_WHEEL = ControlSource.MOD_WHEEL
AFTERTOUCH = ControlSource.AFTERTOUCH


class TestPitchViaLfo:
    """Mod wheel / aftertouch routed to pitch through an LFO."""

    def test_mod_wheel_lfo1_positive(self):
        """Positive depth maps straight onto lever sens without a warning."""
        update = resolve_tone_control(MOD_WHEEL, Destination.PITCH_LFO1, 70)

        assert update.lever_sens == 70
        assert update.warning is None

    def test_mod_wheel_lfo1_negative_is_inverted(self):
        """Negative depth is mirrored and reported."""
        update = resolve_tone_control(MOD_WHEEL, Destination.PITCH_LFO1, 30)

        assert update.lever_sens == 70
        assert "negative modulation" in update.warning

    def test_mirrored_depths_give_same_sensitivity(self):
        """Depth 30 and depth 70 end up at the same sensitivity."""
        low = resolve_tone_control(MOD_WHEEL, Destination.PITCH_LFO1, 30)
        high = resolve_tone_control(MOD_WHEEL, Destination.PITCH_LFO1, 70)

        assert low.lever_sens == high.lever_sens
        assert low.warning is not None
        assert high.warning is None

    def test_mod_wheel_lfo2_uses_opposite_sign(self):
        """LFO2 is wired with the opposite sign on the JD-800."""
        assert resolve_tone_control(MOD_WHEEL, Destination.PITCH_LFO2, 70).lever_sens == 30
        assert resolve_tone_control(MOD_WHEEL, Destination.PITCH_LFO2, 100).lever_sens == 0

    def test_mod_wheel_lfo2_negative(self):
        update = resolve_tone_control(MOD_WHEEL, Destination.PITCH_LFO2, 20)

        assert update.lever_sens == 20
        assert "LFO2" in update.warning

    def test_aftertouch_lfo1_writes_aftertouch_mod_sens(self):
        update = resolve_tone_control(AFTERTOUCH, Destination.PITCH_LFO1, 65)

        assert update.aftertouch_mod_sens == 65
        assert update.lever_sens is None
        assert update.warning is None

    def test_aftertouch_lfo2_negative(self):
        update = resolve_tone_control(AFTERTOUCH, Destination.PITCH_LFO2, 40)

        assert update.aftertouch_mod_sens == 40
        assert update.warning.startswith("Aftertouch")

    def test_depth_above_range_is_clamped(self):
        """Depths above 100 are clamped and reported as out of range."""
        update = resolve_tone_control(MOD_WHEEL, Destination.PITCH_LFO2, 127)

        assert update.lever_sens == 0
        assert update.out_of_range
        assert "clamped" in update.warning

    def test_full_depth_is_not_clamped(self):
        update = resolve_tone_control(AFTERTOUCH, Destination.PITCH_LFO1, 100)

        assert update.aftertouch_mod_sens == 100
        assert update.warning is None
        assert not update.out_of_range

    def test_neutral_depth_writes_neutral_sensitivity(self):
        update = resolve_tone_control(MOD_WHEEL, Destination.PITCH_LFO1, 50)

        assert update.lever_sens == 50
        assert update.warning is None


class TestAftertouchBend:
    """Aftertouch routed directly to pitch."""

    @pytest.mark.parametrize(
        "depth,code",
        [(14, 0), (26, 1), (38, 2), (39, 3), (49, 13), (51, 15), (62, 26)],
    )
    def test_supported_depths(self, depth, code):
        update = resolve_tone_control(AFTERTOUCH, Destination.PITCH, depth)

        assert update.aftertouch_bend_code == code
        assert update.aftertouch_bend == 1
        assert update.warning is None

    @pytest.mark.parametrize("depth", [0, 13, 15, 25, 27, 37, 63, 100])
    def test_unsupported_depths(self, depth):
        """Depths between calibration points are reported and leave the code alone."""
        update = resolve_tone_control(AFTERTOUCH, Destination.PITCH, depth)

        assert update.aftertouch_bend_code is None
        assert update.aftertouch_bend == 1
        assert str(depth) in update.warning

    def test_neutral_depth_is_ignored(self):
        update = resolve_tone_control(AFTERTOUCH, Destination.PITCH, 50)

        assert update.is_empty

    def test_calibration_function(self):
        assert aftertouch_bend_code(14) == 0
        assert aftertouch_bend_code(50) == 14
        assert aftertouch_bend_code(13) is None


class TestDirectSensitivities:
    def test_aftertouch_to_cutoff(self):
        update = resolve_tone_control(AFTERTOUCH, Destination.CUTOFF, 83)

        assert update.tvf_aftertouch_sens == 83
        assert update.warning is None

    def test_aftertouch_to_level(self):
        update = resolve_tone_control(AFTERTOUCH, Destination.LEVEL, 12)

        assert update.tva_aftertouch_sens == 12
        assert update.warning is None


class TestUnsupportedRoutings:
    @pytest.mark.parametrize(
        "source,destination",
        [(0, 0), (0, 1), (0, 3), (1, 2), (1, 6), (2, 4), (5, 0)],
    )
    def test_neutral_depth_never_warns(self, source, destination):
        """A neutral depth has no effect, so it is never reported."""
        update = resolve_tone_control(source, destination, 50)

        assert update.warning is None
        assert update.is_empty

    def test_mod_wheel_to_cutoff_is_reported(self):
        update = resolve_tone_control(MOD_WHEEL, Destination.CUTOFF, 70)

        assert "Unknown mod matrix routing" in update.warning
        assert update.tvf_aftertouch_sens is None
        assert update.lever_sens is None

    def test_unknown_source_is_reported(self):
        update = resolve_tone_control(2, Destination.PITCH_LFO1, 80)

        assert "source = 2" in update.warning
        assert update.lever_sens is None


class TestApply:
    def test_apply_writes_fields(self):
        tone = Tone800()
        update = ToneControlUpdate(
            lever_sens=70,
            aftertouch_mod_sens=30,
            tvf_aftertouch_sens=60,
            tva_aftertouch_sens=40,
            aftertouch_bend=1,
        )

        code = update.apply(tone, 14)

        assert code == 14
        assert tone.wg.lever_sens == 70
        assert tone.wg.aftertouch_mod_sens == 30
        assert tone.wg.aftertouch_bend == 1
        assert tone.tvf.aftertouch_sens == 60
        assert tone.tva.aftertouch_sens == 40

    def test_apply_returns_new_bend_code(self):
        tone = Tone800()
        update = resolve_tone_control(AFTERTOUCH, Destination.PITCH, 26)

        assert update.apply(tone, 14) == 1

    def test_empty_update_changes_nothing(self):
        tone = Tone800()

        assert ToneControlUpdate().apply(tone, 5) == 5
        assert tone == Tone800()
