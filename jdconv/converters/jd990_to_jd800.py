"""
JD-990 to JD-800 converter.

Converts JD-990 patches and special setups into their JD-800
counterparts. The JD-800 has a reduced parameter set, so the conversion
is lossy by nature: everything that cannot be represented exactly is
replaced by the closest neutral or achievable value and reported as a
diagnostic. A conversion never fails for a structurally valid record.

The conversion process for a patch:
1. Report patch-level features the JD-800 lacks
   (structure types, velocity zones, octave switch, ...)
2. Copy the common, EQ and effect blocks
3. Convert each of the four tones, resolving the modulation matrix
   into hardwired controller sensitivities
4. Normalize the A/B and C/D tone pairs according to their structure type
"""

import dataclasses
from typing import List, Optional, Tuple

from jdconv.converters.diagnostics import ConversionResult, DiagnosticLog
from jdconv.converters.tone_control import SOURCE_NAMES, resolve_tone_control
from jdconv.converters.waveforms import (
    LFO_WAVEFORMS,
    convert_lfo_waveform,
    substitute_waveform,
)
from jdconv.models.jd800 import (
    DEFAULT_AFTERTOUCH_BEND,
    INTERNAL_WAVEFORM_COUNT,
    Effect800,
    Lfo800,
    MidiTx800,
    Patch800,
    PatchCommon800,
    PitchEnv800,
    SetupCommon800,
    SetupKey800,
    SpecialSetup800,
    Tone800,
    ToneCommon800,
    Tva800,
    TvaEnv800,
    Tvf800,
    TvfEnv800,
    Wg800,
)
from jdconv.models.jd990 import (
    DEFAULT_ENV_DEPTH,
    DEFAULT_PAN_KEY_FOLLOW,
    DEFAULT_SETUP_LEVEL,
    NEUTRAL,
    Effect990,
    Lfo990,
    Patch990,
    SpecialSetup990,
    Tone990,
    Wg990,
)

STRUCTURE_INDEPENDENT = 0
STRUCTURE_SHARED_FILTER = 1
# Structure types 2 and above all involve ring modulation

# Highest delay tap the JD-800 accepts
MAX_DELAY_TAP = 0x7D

MAX_MUTE_GROUP = 8
MAX_EFFECT_MODE = 3

TONE_NAMES = "ABCD"


def rescale_setup_pan(pan: int) -> int:
    """Map a JD-990 key pan (0-100) onto the JD-800 key pan range (0-60)."""
    return (pan * 3 + 2) // 5


def fixup_structure(structure_type: int, tone1: Tone800, tone2: Tone800) -> None:
    """
    Normalize a converted tone pair for its JD-990 structure type.

    Args:
        structure_type: JD-990 structure type of the pair
        tone1: First tone of the pair (A or C), modified in place
        tone2: Second tone of the pair (B or D), modified in place
    """
    if structure_type == STRUCTURE_SHARED_FILTER:
        # Only the second tone's amplifier is audible
        tone1.tva = dataclasses.replace(tone2.tva)
        tone1.tva_env = dataclasses.replace(tone2.tva_env)
    elif structure_type > STRUCTURE_SHARED_FILTER:
        # Pitch envelopes feeding the ring modulator would only produce odd pitches
        tone2.pitch_env.level0 = NEUTRAL
        tone2.pitch_env.level1 = NEUTRAL
        tone2.pitch_env.level2 = NEUTRAL


class JD990ToJD800Converter:
    """
    Converter from JD-990 records to JD-800 records.

    Each call to convert_patch(), convert_setup() or convert_tone() starts
    a new diagnostic log; the converter keeps no other state between calls.

    Example:
        converter = JD990ToJD800Converter()
        result = converter.convert_patch(patch990)
        for diagnostic in result.diagnostics:
            print(diagnostic)
    """

    def __init__(self) -> None:
        self.log = DiagnosticLog()

    # ------------------------------------------------------------------
    # Patch
    # ------------------------------------------------------------------

    def convert_patch(self, patch: Patch990) -> ConversionResult[Patch800]:
        """
        Convert a JD-990 patch.

        Args:
            patch: Source patch (not modified)

        Returns:
            Converted JD-800 patch and the diagnostics collected on the way
        """
        self.log = DiagnosticLog()
        ctx = "patch"
        common = patch.common

        if patch.structure.structure_ab != STRUCTURE_INDEPENDENT and common.active_tone & 0x03:
            self.log.lossy(
                ctx,
                "structure_ab",
                "Tones AB have unsupported structure type",
                patch.structure.structure_ab,
            )
        if patch.structure.structure_cd != STRUCTURE_INDEPENDENT and common.active_tone & 0x0C:
            self.log.lossy(
                ctx,
                "structure_cd",
                "Tones CD have unsupported structure type",
                patch.structure.structure_cd,
            )

        velocity = dataclasses.asdict(patch.velocity)
        for index in range(1, 5):
            name = f"velocity_range{index}"
            if velocity[name] != 0:
                self.log.lossy(ctx, name, f"Velocity range {index} is enabled", velocity[name])

        ranges = patch.key_ranges
        keys = patch.key_effects
        target_common = PatchCommon800(
            name=common.name,
            patch_level=common.patch_level,
            key_range_low_a=ranges.key_range_low_a,
            key_range_high_a=ranges.key_range_high_a,
            key_range_low_b=ranges.key_range_low_b,
            key_range_high_b=ranges.key_range_high_b,
            key_range_low_c=ranges.key_range_low_c,
            key_range_high_c=ranges.key_range_high_c,
            key_range_low_d=ranges.key_range_low_d,
            key_range_high_d=ranges.key_range_high_d,
            bender_range_down=common.bend_range_down,
            bender_range_up=common.bend_range_up,
            aftertouch_bend=DEFAULT_AFTERTOUCH_BEND,  # set by tone control resolution
            solo_sw=keys.solo_sw,
            solo_legato=keys.solo_legato,
            portamento_sw=keys.portamento_sw,
            portamento_mode=keys.portamento_mode,
            portamento_time=keys.portamento_time,
            layer_tone=common.layer_tone,
            active_tone=common.active_tone,
        )

        if common.patch_pan != NEUTRAL:
            self.log.lossy(ctx, "patch_pan", "Patch has pan != 50", common.patch_pan)
        if common.analog_feel != 0:
            self.log.lossy(ctx, "analog_feel", "Patch has analog feel != 0", common.analog_feel)
        if common.voice_priority != 0:
            self.log.lossy(
                ctx, "voice_priority", "Patch has voice priority != 0", common.voice_priority
            )
        if keys.portamento_type != 1 and keys.portamento_sw != 0:
            self.log.lossy(
                ctx, "portamento_type", "Patch has portamento type != 1", keys.portamento_type
            )
        if keys.solo_sync_master != 0:
            self.log.lossy(
                ctx, "solo_sync_master", "Patch has solo sync master != 0", keys.solo_sync_master
            )
        if patch.octave_switch != 1:
            self.log.lossy(
                ctx, "octave_switch", "Patch has octave switch != 1", patch.octave_switch
            )

        effect = self._convert_effect(patch.effect)

        sources = (common.tone_control_source1, common.tone_control_source2)
        self._check_control_sources(ctx, sources)

        bend_code = target_common.aftertouch_bend
        tones: List[Tone800] = []
        for name, tone in zip(TONE_NAMES, patch.tones):
            converted, bend_code = self._convert_tone(
                tone, sources, bend_code, False, f"tone {name}"
            )
            tones.append(converted)
        target_common.aftertouch_bend = bend_code

        fixup_structure(patch.structure.structure_ab, tones[0], tones[1])
        fixup_structure(patch.structure.structure_cd, tones[2], tones[3])

        target = Patch800(
            common=target_common,
            eq=dataclasses.replace(patch.eq),
            midi_tx=MidiTx800(
                key_mode=0,
                split_point=36,
                lower_channel=1,
                upper_channel=0,
                lower_program_change=0,
                upper_program_change=0,
                hold_mode=2,
                dummy=0,
            ),
            effect=effect,
            tone_a=tones[0],
            tone_b=tones[1],
            tone_c=tones[2],
            tone_d=tones[3],
        )
        return ConversionResult(target, list(self.log))

    def _convert_effect(self, effect: Effect990) -> Effect800:
        ctx = "patch"
        # Everything but the delay taps is stored identically
        values = {
            f.name: getattr(effect, f.name)
            for f in dataclasses.fields(Effect800)
            if hasattr(effect, f.name)
        }
        values["delay_center_tap"] = self._convert_delay_tap(
            "center", effect.delay_center_tap_msb, effect.delay_center_tap_lsb
        )
        values["delay_left_tap"] = self._convert_delay_tap(
            "left", effect.delay_left_tap_msb, effect.delay_left_tap_lsb
        )
        values["delay_right_tap"] = self._convert_delay_tap(
            "right", effect.delay_right_tap_msb, effect.delay_right_tap_lsb
        )
        values["dummy"] = 0

        if effect.delay_mode != 0:
            self.log.lossy(ctx, "delay_mode", "Patch has delay effect mode != 0", effect.delay_mode)

        return Effect800(**values)

    def _convert_delay_tap(self, tap: str, msb: int, lsb: int) -> int:
        if msb != 0 or lsb > MAX_DELAY_TAP:
            self.log.lossy(
                "patch",
                f"delay_{tap}_tap",
                f"Patch has unsupported delay {tap} tap (MSB {msb}, LSB {lsb})",
                (msb << 7) | lsb,
            )
        return min(lsb, MAX_DELAY_TAP)

    def _check_control_sources(self, ctx: str, sources: Tuple[int, int]) -> None:
        for index, source in enumerate(sources, start=1):
            if source not in SOURCE_NAMES:
                self.log.lossy(
                    ctx,
                    f"tone_control_source{index}",
                    f"Tone control source {index} is neither mod wheel nor aftertouch",
                    source,
                )

    # ------------------------------------------------------------------
    # Special setup
    # ------------------------------------------------------------------

    def convert_setup(self, setup: SpecialSetup990) -> ConversionResult[SpecialSetup800]:
        """
        Convert a JD-990 special setup.

        Args:
            setup: Source setup (not modified)

        Returns:
            Converted JD-800 special setup and its diagnostics
        """
        self.log = DiagnosticLog()
        ctx = "setup"
        common = setup.common

        self.log.info(ctx, "name", "Setup name and effect settings cannot be converted")

        if common.level != DEFAULT_SETUP_LEVEL:
            self.log.lossy(ctx, "level", "Setup has level != 80", common.level)
        if common.pan != NEUTRAL:
            self.log.lossy(ctx, "pan", "Setup has pan != 50", common.pan)
        if common.analog_feel != 0:
            self.log.lossy(ctx, "analog_feel", "Setup has analog feel != 0", common.analog_feel)

        sources = (common.tone_control_source1, common.tone_control_source2)
        self._check_control_sources(ctx, sources)

        bend_code = DEFAULT_AFTERTOUCH_BEND
        keys: List[SetupKey800] = []
        for index, key in enumerate(setup.keys):
            key_ctx = f"key {index}"

            mute_group = key.mute_group
            if mute_group > MAX_MUTE_GROUP:
                self.log.out_of_range(
                    key_ctx, "mute_group", "Unsupported mute group, using off", mute_group
                )
                mute_group = 0

            effect_mode = key.effect_mode
            if effect_mode > MAX_EFFECT_MODE:
                self.log.out_of_range(
                    key_ctx, "effect_mode", "Unsupported effect mode, using 0", effect_mode
                )
                effect_mode = 0

            tone, bend_code = self._convert_tone(
                key.tone, sources, bend_code, True, key_ctx
            )
            keys.append(
                SetupKey800(
                    name=key.name,
                    mute_group=mute_group,
                    env_mode=key.env_mode,
                    pan=rescale_setup_pan(key.tone.tva.pan),
                    effect_mode=effect_mode,
                    effect_level=key.effect_level,
                    dummy=0,
                    tone=tone,
                )
            )

        target = SpecialSetup800(
            eq=dataclasses.replace(setup.eq),
            common=SetupCommon800(
                bender_range_down=common.bender_range_down,
                bender_range_up=common.bender_range_up,
                aftertouch_bend_sens=bend_code,
            ),
            keys=keys,
        )
        return ConversionResult(target, list(self.log))

    # ------------------------------------------------------------------
    # Tone
    # ------------------------------------------------------------------

    def convert_tone(
        self,
        tone: Tone990,
        control_sources: Tuple[int, int],
        bend_code: int = DEFAULT_AFTERTOUCH_BEND,
        setup: bool = False,
        context: str = "tone",
    ) -> Tuple[ConversionResult[Tone800], int]:
        """
        Convert a single tone.

        Starts a new diagnostic log, like convert_patch() and convert_setup().

        Args:
            tone: Source tone (not modified)
            control_sources: The two patch-level tone control sources
            bend_code: Current patch-level aftertouch bend code
            setup: True when converting a special setup key
            context: Label used for diagnostics

        Returns:
            (converted tone and its diagnostics, updated aftertouch bend code)
        """
        self.log = DiagnosticLog()
        target, bend_code = self._convert_tone(tone, control_sources, bend_code, setup, context)
        return ConversionResult(target, list(self.log)), bend_code

    def _convert_tone(
        self,
        tone: Tone990,
        control_sources: Tuple[int, int],
        bend_code: int,
        setup: bool,
        context: str,
    ) -> Tuple[Tone800, int]:
        wg = tone.wg
        pitch_env = tone.pitch_env

        lfo1 = self._convert_lfo(context, "LFO1", tone.lfo1)
        lfo2 = self._convert_lfo(context, "LFO2", tone.lfo2)
        msb, lsb = self._convert_waveform(context, wg)

        if wg.fxm_color != 0 or wg.fxm_depth != 0:
            if wg.fxm_depth != 0:
                self.log.lossy(context, "fxm_depth", "Tone has FXM enabled", wg.fxm_depth)
            else:
                self.log.lossy(context, "fxm_color", "Tone has FXM enabled", wg.fxm_color)
        if wg.sync_slave_switch != 0:
            self.log.lossy(
                context,
                "sync_slave_switch",
                "Tone has sync slave switch enabled",
                wg.sync_slave_switch,
            )
        if wg.tone_delay_time != 0:
            self.log.lossy(
                context, "tone_delay_time", "Tone has tone delay enabled", wg.tone_delay_time
            )
        if wg.env_depth != DEFAULT_ENV_DEPTH and not pitch_env.is_flat:
            self.log.lossy(
                context, "env_depth", "Tone has pitch envelope depth != 24", wg.env_depth
            )
        if pitch_env.sustain_level != NEUTRAL:
            self.log.lossy(
                context,
                "sustain_level",
                "Tone has pitch envelope sustain level != 50",
                pitch_env.sustain_level,
            )

        tvf_select, tvf_depth = self._consolidate_lfo_depth(
            context, "TVF", tone.lfo1.depth_tvf, tone.lfo2.depth_tvf
        )
        tva_select, tva_depth = self._consolidate_lfo_depth(
            context, "TVA", tone.lfo1.depth_tva, tone.lfo2.depth_tva
        )

        if tone.tva.pan != NEUTRAL and not setup:
            self.log.lossy(context, "pan", "Tone has pan position != 50", tone.tva.pan)
        if tone.tva.pan_key_follow != DEFAULT_PAN_KEY_FOLLOW:
            self.log.lossy(
                context, "pan_key_follow", "Tone uses pan key follow", tone.tva.pan_key_follow
            )

        tvf_env = tone.tvf_env
        tva_env = tone.tva_env
        target = Tone800(
            common=ToneCommon800(
                velocity_curve=tone.common.velocity_curve,
                hold_control=tone.common.hold_control,
            ),
            lfo1=lfo1,
            lfo2=lfo2,
            wg=Wg800(
                wave_source=wg.wave_source,
                waveform_msb=msb,
                waveform_lsb=lsb,
                pitch_coarse=wg.pitch_coarse,
                pitch_fine=wg.pitch_fine,
                pitch_random=wg.pitch_random,
                key_follow=wg.key_follow,
                bender_switch=wg.bender_switch,
                aftertouch_bend=0,
                lfo1_sens=tone.lfo1.depth_pitch,
                lfo2_sens=tone.lfo2.depth_pitch,
                lever_sens=NEUTRAL,
                aftertouch_mod_sens=NEUTRAL,
            ),
            pitch_env=PitchEnv800(
                velo=pitch_env.velo,
                time_velo=pitch_env.time_velo,
                time_kf=pitch_env.time_kf,
                level0=pitch_env.level0,
                time1=pitch_env.time1,
                level1=pitch_env.level1,
                time2=pitch_env.time2,
                time3=pitch_env.time3,
                level2=pitch_env.level3,
            ),
            tvf=Tvf800(
                filter_mode=tone.tvf.filter_mode,
                cutoff_freq=tone.tvf.cutoff_freq,
                resonance=tone.tvf.resonance,
                key_follow=tone.tvf.key_follow,
                aftertouch_sens=NEUTRAL,
                lfo_select=tvf_select,
                lfo_depth=tvf_depth,
                env_depth=tone.tvf.env_depth,
            ),
            tvf_env=TvfEnv800(
                velo=tvf_env.velo,
                time_velo=tvf_env.time_velo,
                time_kf=tvf_env.time_kf,
                time1=tvf_env.time1,
                level1=tvf_env.level1,
                time2=tvf_env.time2,
                level2=tvf_env.level2,
                time3=tvf_env.time3,
                sustain_level=tvf_env.sustain_level,
                time4=tvf_env.time4,
                level4=tvf_env.level4,
            ),
            tva=Tva800(
                bias_direction=tone.tva.bias_direction,
                bias_point=tone.tva.bias_point,
                bias_level=tone.tva.bias_level,
                level=tone.tva.level,
                aftertouch_sens=NEUTRAL,
                lfo_select=tva_select,
                lfo_depth=tva_depth,
            ),
            tva_env=TvaEnv800(
                velo=tva_env.velo,
                time_velo=tva_env.time_velo,
                time_kf=tva_env.time_kf,
                time1=tva_env.time1,
                level1=tva_env.level1,
                time2=tva_env.time2,
                level2=tva_env.level2,
                time3=tva_env.time3,
                sustain_level=tva_env.sustain_level,
                time4=tva_env.time4,
            ),
        )

        for source, control in zip(control_sources, (tone.cs1, tone.cs2)):
            for entry in control.entries:
                update = resolve_tone_control(source, entry.destination, entry.depth)
                if update.warning and update.out_of_range:
                    self.log.out_of_range(context, "tone_control", update.warning, entry.depth)
                elif update.warning:
                    self.log.lossy(context, "tone_control", update.warning, entry.depth)
                bend_code = update.apply(target, bend_code)

        return target, bend_code

    def _convert_lfo(self, context: str, name: str, lfo: Lfo990) -> Lfo800:
        if 0 <= lfo.waveform < len(LFO_WAVEFORMS):
            waveform, exact = convert_lfo_waveform(lfo.waveform)
            if not exact:
                self.log.lossy(
                    context,
                    f"{name.lower()}.waveform",
                    f"{name} has unsupported waveform",
                    lfo.waveform,
                )
        else:
            self.log.out_of_range(
                context, f"{name.lower()}.waveform", f"{name} has invalid waveform", lfo.waveform
            )
            waveform = LFO_WAVEFORMS[0]

        return Lfo800(
            rate=lfo.rate,
            delay=lfo.delay,
            fade=lfo.fade,
            waveform=waveform,
            offset=lfo.offset,
            key_trigger=lfo.key_trigger,
        )

    def _convert_waveform(self, context: str, wg: Wg990) -> Tuple[int, int]:
        if wg.wave_source != 0:
            # Card waveforms are addressed the same way on both models
            return wg.waveform_msb, wg.waveform_lsb

        msb = wg.waveform_msb
        if msb > 1:
            # Seen in files produced by a third-party conversion tool
            msb = 0
        waveform = (msb << 7) | wg.waveform_lsb
        if waveform < INTERNAL_WAVEFORM_COUNT:
            return msb, wg.waveform_lsb

        substitute: Optional[int] = substitute_waveform(waveform)
        if substitute is None:
            self.log.out_of_range(
                context,
                "waveform",
                "Tone uses unknown internal waveform, using waveform 1",
                waveform,
            )
            substitute = 0
        else:
            self.log.lossy(context, "waveform", "Tone uses unsupported internal waveform", waveform)
        return 0, substitute

    def _consolidate_lfo_depth(
        self, context: str, section: str, lfo1_depth: int, lfo2_depth: int
    ) -> Tuple[int, int]:
        """The JD-800 has a single LFO select and depth per TVF/TVA."""
        if lfo2_depth != NEUTRAL:
            if lfo1_depth != NEUTRAL:
                self.log.lossy(
                    context,
                    f"lfo1.depth_{section.lower()}",
                    f"Tone has both LFOs controlling {section}",
                    lfo1_depth,
                )
            return 1, lfo2_depth
        return 0, lfo1_depth


def convert_patch_990_to_800(patch: Patch990) -> ConversionResult[Patch800]:
    """Convert a JD-990 patch to a JD-800 patch."""
    return JD990ToJD800Converter().convert_patch(patch)


def convert_setup_990_to_800(setup: SpecialSetup990) -> ConversionResult[SpecialSetup800]:
    """Convert a JD-990 special setup to a JD-800 special setup."""
    return JD990ToJD800Converter().convert_setup(setup)
