"""
JD-800 parameter records (conversion target).

The JD-800 shares most of its architecture with the JD-990 but has fewer
LFO waveforms, a 108 entry internal waveform ROM, a three level pitch
envelope and hardwired controller sensitivities instead of a
modulation matrix.
"""

from dataclasses import dataclass, field
from typing import List

from jdconv.models.jd990 import NAME_LENGTH, NEUTRAL, SETUP_KEY_COUNT, Eq

# Patch-level aftertouch bend code that corresponds to a neutral depth
DEFAULT_AFTERTOUCH_BEND = 14
INTERNAL_WAVEFORM_COUNT = 108


@dataclass
class ToneCommon800:
    velocity_curve: int = 0
    hold_control: int = 1


@dataclass
class Lfo800:
    rate: int = 50
    delay: int = 0
    fade: int = 50
    waveform: int = 0  # 0-4
    offset: int = 1
    key_trigger: int = 0


@dataclass
class Wg800:
    wave_source: int = 0
    waveform_msb: int = 0
    waveform_lsb: int = 0
    pitch_coarse: int = 48
    pitch_fine: int = 50
    pitch_random: int = 0
    key_follow: int = 15
    bender_switch: int = 1
    aftertouch_bend: int = 0  # switch
    lfo1_sens: int = NEUTRAL
    lfo2_sens: int = NEUTRAL
    lever_sens: int = NEUTRAL
    aftertouch_mod_sens: int = NEUTRAL


@dataclass
class PitchEnv800:
    velo: int = NEUTRAL
    time_velo: int = NEUTRAL
    time_kf: int = 10
    level0: int = NEUTRAL
    time1: int = 0
    level1: int = NEUTRAL
    time2: int = 0
    time3: int = 0
    level2: int = NEUTRAL


@dataclass
class Tvf800:
    filter_mode: int = 0
    cutoff_freq: int = 100
    resonance: int = 0
    key_follow: int = 10
    aftertouch_sens: int = NEUTRAL
    lfo_select: int = 0  # 0 = LFO1, 1 = LFO2
    lfo_depth: int = NEUTRAL
    env_depth: int = NEUTRAL


@dataclass
class TvfEnv800:
    velo: int = NEUTRAL
    time_velo: int = NEUTRAL
    time_kf: int = 10
    time1: int = 0
    level1: int = 100
    time2: int = 0
    level2: int = 100
    time3: int = 0
    sustain_level: int = 100
    time4: int = 0
    level4: int = 0


@dataclass
class Tva800:
    bias_direction: int = 0
    bias_point: int = 60
    bias_level: int = 10
    level: int = 100
    aftertouch_sens: int = NEUTRAL
    lfo_select: int = 0
    lfo_depth: int = NEUTRAL


@dataclass
class TvaEnv800:
    velo: int = NEUTRAL
    time_velo: int = NEUTRAL
    time_kf: int = 10
    time1: int = 0
    level1: int = 100
    time2: int = 0
    level2: int = 100
    time3: int = 0
    sustain_level: int = 100
    time4: int = 0


@dataclass
class Tone800:
    common: ToneCommon800 = field(default_factory=ToneCommon800)
    lfo1: Lfo800 = field(default_factory=Lfo800)
    lfo2: Lfo800 = field(default_factory=Lfo800)
    wg: Wg800 = field(default_factory=Wg800)
    pitch_env: PitchEnv800 = field(default_factory=PitchEnv800)
    tvf: Tvf800 = field(default_factory=Tvf800)
    tvf_env: TvfEnv800 = field(default_factory=TvfEnv800)
    tva: Tva800 = field(default_factory=Tva800)
    tva_env: TvaEnv800 = field(default_factory=TvaEnv800)


@dataclass
class PatchCommon800:
    name: str = field(default="INIT PATCH", metadata={"length": NAME_LENGTH})
    patch_level: int = 80
    key_range_low_a: int = 0
    key_range_high_a: int = 127
    key_range_low_b: int = 0
    key_range_high_b: int = 127
    key_range_low_c: int = 0
    key_range_high_c: int = 127
    key_range_low_d: int = 0
    key_range_high_d: int = 127
    bender_range_down: int = 2
    bender_range_up: int = 2
    aftertouch_bend: int = DEFAULT_AFTERTOUCH_BEND
    solo_sw: int = 0
    solo_legato: int = 0
    portamento_sw: int = 0
    portamento_mode: int = 0
    portamento_time: int = 0
    layer_tone: int = 0x0F
    active_tone: int = 0x0F


@dataclass
class MidiTx800:
    """MIDI transmit settings. The JD-990 has no equivalent block."""

    key_mode: int = 0
    split_point: int = 36
    lower_channel: int = 1
    upper_channel: int = 0
    lower_program_change: int = 0
    upper_program_change: int = 0
    hold_mode: int = 2
    dummy: int = 0


@dataclass
class Effect800:
    group_a_sequence: int = 0
    group_b_sequence: int = 0
    group_a_block_switch1: int = 0
    group_a_block_switch2: int = 0
    group_a_block_switch3: int = 0
    group_a_block_switch4: int = 0
    group_b_block_switch1: int = 0
    group_b_block_switch2: int = 0
    group_b_block_switch3: int = 0
    effects_balance_group_b: int = 50

    distortion_type: int = 0
    distortion_drive: int = 0
    distortion_level: int = 0

    phaser_manual: int = 0
    phaser_rate: int = 0
    phaser_depth: int = 0
    phaser_resonance: int = 0
    phaser_mix: int = 0

    spectrum_band1: int = 15
    spectrum_band2: int = 15
    spectrum_band3: int = 15
    spectrum_band4: int = 15
    spectrum_band5: int = 15
    spectrum_band6: int = 15
    spectrum_bandwidth: int = 0

    enhancer_sens: int = 0
    enhancer_mix: int = 0

    delay_center_tap: int = 0  # 0-125
    delay_center_level: int = 0
    delay_left_tap: int = 0
    delay_left_level: int = 0
    delay_right_tap: int = 0
    delay_right_level: int = 0
    delay_feedback: int = 0

    chorus_rate: int = 0
    chorus_depth: int = 0
    chorus_delay_time: int = 0
    chorus_feedback: int = 0
    chorus_level: int = 0

    reverb_type: int = 0
    reverb_pre_delay: int = 0
    reverb_early_ref_level: int = 0
    reverb_hf_damp: int = 0
    reverb_time: int = 0
    reverb_level: int = 0
    dummy: int = 0


@dataclass
class Patch800:
    common: PatchCommon800 = field(default_factory=PatchCommon800)
    eq: Eq = field(default_factory=Eq)
    midi_tx: MidiTx800 = field(default_factory=MidiTx800)
    effect: Effect800 = field(default_factory=Effect800)
    tone_a: Tone800 = field(default_factory=Tone800)
    tone_b: Tone800 = field(default_factory=Tone800)
    tone_c: Tone800 = field(default_factory=Tone800)
    tone_d: Tone800 = field(default_factory=Tone800)

    @property
    def tones(self) -> List[Tone800]:
        return [self.tone_a, self.tone_b, self.tone_c, self.tone_d]


@dataclass
class SetupCommon800:
    bender_range_down: int = 2
    bender_range_up: int = 2
    aftertouch_bend_sens: int = DEFAULT_AFTERTOUCH_BEND


@dataclass
class SetupKey800:
    name: str = field(default="", metadata={"length": NAME_LENGTH})
    mute_group: int = 0  # 0 = off, 1-8
    env_mode: int = 0
    pan: int = 30  # 0-60, 30 = center
    effect_mode: int = 0  # 0-3
    effect_level: int = 100
    dummy: int = 0
    tone: Tone800 = field(default_factory=Tone800)


def _default_setup_keys() -> List[SetupKey800]:
    return [SetupKey800() for _ in range(SETUP_KEY_COUNT)]


@dataclass
class SpecialSetup800:
    eq: Eq = field(default_factory=Eq)
    common: SetupCommon800 = field(default_factory=SetupCommon800)
    keys: List[SetupKey800] = field(
        default_factory=_default_setup_keys,
        metadata={"item": SetupKey800, "count": SETUP_KEY_COUNT},
    )
