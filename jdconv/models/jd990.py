"""
JD-990 parameter records (conversion source).

Every parameter is a single 7-bit value. Parameters marked "centered" use
50 as their neutral position (-50..+50 on the front panel).
"""

from dataclasses import dataclass, field
from typing import List

NAME_LENGTH = 16
SETUP_KEY_COUNT = 61
CONTROL_SLOTS = 4

# Defaults the JD-800 can represent without loss
NEUTRAL = 50
DEFAULT_ENV_DEPTH = 24
DEFAULT_PAN_KEY_FOLLOW = 7
DEFAULT_SETUP_LEVEL = 80


@dataclass
class ToneCommon990:
    velocity_curve: int = 0
    hold_control: int = 1


@dataclass
class Lfo990:
    """One of the two tone LFOs, including its three modulation depths."""

    rate: int = 50
    delay: int = 0
    fade: int = 50
    waveform: int = 0  # 0-7, see LFO_WAVEFORMS in the converter
    offset: int = 1
    key_trigger: int = 0
    depth_pitch: int = NEUTRAL  # centered
    depth_tvf: int = NEUTRAL  # centered
    depth_tva: int = NEUTRAL  # centered


@dataclass
class Wg990:
    """Wave generator."""

    wave_source: int = 0  # 0 = internal waveform ROM, otherwise card
    waveform_msb: int = 0
    waveform_lsb: int = 0
    fxm_color: int = 0
    fxm_depth: int = 0
    sync_slave_switch: int = 0
    tone_delay_mode: int = 0
    tone_delay_time: int = 0
    env_depth: int = DEFAULT_ENV_DEPTH
    pitch_coarse: int = 48
    pitch_fine: int = 50
    pitch_random: int = 0
    key_follow: int = 15
    bender_switch: int = 1


@dataclass
class PitchEnv990:
    velo: int = NEUTRAL
    time_velo: int = NEUTRAL
    time_kf: int = 10
    level0: int = NEUTRAL
    time1: int = 0
    level1: int = NEUTRAL
    time2: int = 0
    sustain_level: int = NEUTRAL
    time3: int = 0
    level3: int = NEUTRAL

    @property
    def is_flat(self) -> bool:
        """True if no envelope level deviates from neutral."""
        return all(
            level == NEUTRAL
            for level in (self.level0, self.level1, self.sustain_level, self.level3)
        )


@dataclass
class Tvf990:
    filter_mode: int = 0
    cutoff_freq: int = 100
    resonance: int = 0
    key_follow: int = 10
    env_depth: int = NEUTRAL


@dataclass
class TvfEnv990:
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
class Tva990:
    bias_direction: int = 0
    bias_point: int = 60
    bias_level: int = 10
    level: int = 100
    pan: int = NEUTRAL  # 0-100, 50 = center
    pan_key_follow: int = DEFAULT_PAN_KEY_FOLLOW


@dataclass
class TvaEnv990:
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
class ModMatrixEntry:
    """A single tone control routing: destination and centered depth."""

    destination: int = 0
    depth: int = NEUTRAL


def _default_entries() -> List[ModMatrixEntry]:
    return [ModMatrixEntry() for _ in range(CONTROL_SLOTS)]


@dataclass
class ToneControl990:
    """The four routings fed by one patch-level control source."""

    entries: List[ModMatrixEntry] = field(
        default_factory=_default_entries,
        metadata={"item": ModMatrixEntry, "count": CONTROL_SLOTS},
    )


@dataclass
class Tone990:
    common: ToneCommon990 = field(default_factory=ToneCommon990)
    lfo1: Lfo990 = field(default_factory=Lfo990)
    lfo2: Lfo990 = field(default_factory=Lfo990)
    wg: Wg990 = field(default_factory=Wg990)
    pitch_env: PitchEnv990 = field(default_factory=PitchEnv990)
    tvf: Tvf990 = field(default_factory=Tvf990)
    tvf_env: TvfEnv990 = field(default_factory=TvfEnv990)
    tva: Tva990 = field(default_factory=Tva990)
    tva_env: TvaEnv990 = field(default_factory=TvaEnv990)
    cs1: ToneControl990 = field(default_factory=ToneControl990)
    cs2: ToneControl990 = field(default_factory=ToneControl990)


@dataclass
class PatchCommon990:
    name: str = field(default="INIT PATCH", metadata={"length": NAME_LENGTH})
    patch_level: int = 80
    patch_pan: int = NEUTRAL
    analog_feel: int = 0
    voice_priority: int = 0
    bend_range_down: int = 2
    bend_range_up: int = 2
    tone_control_source1: int = 0  # 0 = mod wheel
    tone_control_source2: int = 1  # 1 = aftertouch
    layer_tone: int = 0x0F
    active_tone: int = 0x0F


@dataclass
class Eq:
    """Patch EQ. Identical on both models."""

    low_freq: int = 0
    low_gain: int = 15
    mid_freq: int = 0
    mid_q: int = 0
    mid_gain: int = 15
    high_freq: int = 0
    high_gain: int = 15


@dataclass
class Effect990:
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

    # Delay taps are 14-bit on the JD-990
    delay_mode: int = 0
    delay_center_tap_msb: int = 0
    delay_center_tap_lsb: int = 0
    delay_center_level: int = 0
    delay_left_tap_msb: int = 0
    delay_left_tap_lsb: int = 0
    delay_left_level: int = 0
    delay_right_tap_msb: int = 0
    delay_right_tap_lsb: int = 0
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


@dataclass
class KeyEffects990:
    portamento_sw: int = 0
    portamento_mode: int = 0
    portamento_type: int = 1
    portamento_time: int = 0
    solo_sw: int = 0
    solo_legato: int = 0
    solo_sync_master: int = 0


@dataclass
class StructureType990:
    """Structure type of the A/B and C/D tone pairs (0 = independent)."""

    structure_ab: int = 0
    structure_cd: int = 0


@dataclass
class KeyRanges990:
    key_range_low_a: int = 0
    key_range_high_a: int = 127
    key_range_low_b: int = 0
    key_range_high_b: int = 127
    key_range_low_c: int = 0
    key_range_high_c: int = 127
    key_range_low_d: int = 0
    key_range_high_d: int = 127


@dataclass
class Velocity990:
    """Velocity zone switches. The JD-800 has no velocity zones."""

    velocity_range1: int = 0
    velocity_range2: int = 0
    velocity_range3: int = 0
    velocity_range4: int = 0


@dataclass
class Patch990:
    common: PatchCommon990 = field(default_factory=PatchCommon990)
    eq: Eq = field(default_factory=Eq)
    effect: Effect990 = field(default_factory=Effect990)
    key_effects: KeyEffects990 = field(default_factory=KeyEffects990)
    octave_switch: int = 1
    structure: StructureType990 = field(default_factory=StructureType990)
    key_ranges: KeyRanges990 = field(default_factory=KeyRanges990)
    velocity: Velocity990 = field(default_factory=Velocity990)
    tone_a: Tone990 = field(default_factory=Tone990)
    tone_b: Tone990 = field(default_factory=Tone990)
    tone_c: Tone990 = field(default_factory=Tone990)
    tone_d: Tone990 = field(default_factory=Tone990)

    @property
    def tones(self) -> List[Tone990]:
        return [self.tone_a, self.tone_b, self.tone_c, self.tone_d]


@dataclass
class SetupCommon990:
    name: str = field(default="INIT SETUP", metadata={"length": NAME_LENGTH})
    level: int = DEFAULT_SETUP_LEVEL
    pan: int = NEUTRAL
    analog_feel: int = 0
    bender_range_down: int = 2
    bender_range_up: int = 2
    tone_control_source1: int = 0
    tone_control_source2: int = 1


@dataclass
class SetupKey990:
    """One key of a special setup: a single tone plus key settings."""

    name: str = field(default="", metadata={"length": NAME_LENGTH})
    mute_group: int = 0  # 0 = off, 1-26 on the JD-990
    env_mode: int = 0
    effect_mode: int = 0
    effect_level: int = 100
    tone: Tone990 = field(default_factory=Tone990)


def _default_setup_keys() -> List[SetupKey990]:
    return [SetupKey990() for _ in range(SETUP_KEY_COUNT)]


@dataclass
class SpecialSetup990:
    common: SetupCommon990 = field(default_factory=SetupCommon990)
    eq: Eq = field(default_factory=Eq)
    keys: List[SetupKey990] = field(
        default_factory=_default_setup_keys,
        metadata={"item": SetupKey990, "count": SETUP_KEY_COUNT},
    )
