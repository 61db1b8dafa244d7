"""
Tone control resolution.

The JD-990 routes its two patch-level control sources (usually mod wheel
and aftertouch) through a small modulation matrix: four (destination,
depth) entries per source and tone. The JD-800 instead has a fixed set of
controller sensitivities per tone plus one patch-wide aftertouch bend
range. This module maps a single matrix entry onto those sensitivities.

Routing table:

    source      destination      JD-800 parameter
    ---------   --------------   -----------------------------------
    mod wheel   pitch via LFO1   WG lever sens (+)
    mod wheel   pitch via LFO2   WG lever sens (-)
    aftertouch  pitch via LFO1   WG aftertouch mod sens (+)
    aftertouch  pitch via LFO2   WG aftertouch mod sens (-)
    aftertouch  pitch            WG aftertouch bend + patch bend code
    aftertouch  cutoff           TVF aftertouch sens
    aftertouch  level            TVA aftertouch sens

Anything else cannot be expressed and is reported unless its depth is
neutral.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, Optional, Tuple

from jdconv.models.jd800 import Tone800
from jdconv.models.jd990 import NEUTRAL


class ControlSource(IntEnum):
    MOD_WHEEL = 0
    AFTERTOUCH = 1


class Destination(IntEnum):
    PITCH = 0
    CUTOFF = 1
    LEVEL = 3
    PITCH_LFO1 = 4
    PITCH_LFO2 = 5


SOURCE_NAMES = {
    ControlSource.MOD_WHEEL: "Mod wheel",
    ControlSource.AFTERTOUCH: "Aftertouch",
}

# Aftertouch bend depths the JD-800 can reproduce exactly, as
# (first depth, last depth, first code). Depth is centered on 50.
AFTERTOUCH_BEND_STEPS = (
    (50 - 36, 50 - 36, 0),
    (50 - 24, 50 - 24, 1),
    (50 - 12, 50 + 12, 2),
)


@dataclass
class ToneControlUpdate:
    """
    Result of resolving one matrix entry.

    Fields left at None are not touched when the update is applied.
    out_of_range marks a warning about a depth outside 0-100.
    """

    lever_sens: Optional[int] = None
    aftertouch_mod_sens: Optional[int] = None
    aftertouch_bend: Optional[int] = None
    aftertouch_bend_code: Optional[int] = None
    tvf_aftertouch_sens: Optional[int] = None
    tva_aftertouch_sens: Optional[int] = None
    warning: Optional[str] = None
    out_of_range: bool = False

    @property
    def is_empty(self) -> bool:
        return self == ToneControlUpdate()

    def apply(self, tone: Tone800, bend_code: int) -> int:
        """
        Write the update into a JD-800 tone.

        Args:
            tone: Target tone
            bend_code: Current patch-level aftertouch bend code

        Returns:
            The (possibly updated) patch-level aftertouch bend code
        """
        if self.lever_sens is not None:
            tone.wg.lever_sens = self.lever_sens
        if self.aftertouch_mod_sens is not None:
            tone.wg.aftertouch_mod_sens = self.aftertouch_mod_sens
        if self.aftertouch_bend is not None:
            tone.wg.aftertouch_bend = self.aftertouch_bend
        if self.tvf_aftertouch_sens is not None:
            tone.tvf.aftertouch_sens = self.tvf_aftertouch_sens
        if self.tva_aftertouch_sens is not None:
            tone.tva.aftertouch_sens = self.tva_aftertouch_sens
        if self.aftertouch_bend_code is not None:
            return self.aftertouch_bend_code
        return bend_code


def aftertouch_bend_code(depth: int) -> Optional[int]:
    """
    Discretize an aftertouch-to-pitch depth into a JD-800 bend code.

    Returns:
        The bend code, or None if the depth has no JD-800 equivalent
    """
    for first, last, code in AFTERTOUCH_BEND_STEPS:
        if first <= depth <= last:
            return code + depth - first
    return None


def _pitch_lfo_depth(depth: int, lfo: int, label: str) -> Tuple[int, Optional[str], bool]:
    # The JD-800 sensitivity has a single sign: negative LFO depth becomes
    # positive depth on the other polarity.
    warning = None
    clamped = False
    if depth < NEUTRAL:
        warning = f"{label} to LFO{lfo} mod matrix routing with negative modulation"
        depth = 100 - depth
    elif depth > 100:
        warning = f"{label} to LFO{lfo} mod matrix depth {depth} clamped to 100"
        clamped = True
        depth = 100
    if lfo == 1:
        return NEUTRAL + (depth - NEUTRAL), warning, clamped
    return NEUTRAL - (depth - NEUTRAL), warning, clamped


def _lever_lfo(lfo: int) -> Callable[[int], ToneControlUpdate]:
    def resolve(depth: int) -> ToneControlUpdate:
        sens, warning, clamped = _pitch_lfo_depth(
            depth, lfo, SOURCE_NAMES[ControlSource.MOD_WHEEL]
        )
        return ToneControlUpdate(lever_sens=sens, warning=warning, out_of_range=clamped)

    return resolve


def _aftertouch_lfo(lfo: int) -> Callable[[int], ToneControlUpdate]:
    def resolve(depth: int) -> ToneControlUpdate:
        sens, warning, clamped = _pitch_lfo_depth(
            depth, lfo, SOURCE_NAMES[ControlSource.AFTERTOUCH]
        )
        return ToneControlUpdate(aftertouch_mod_sens=sens, warning=warning, out_of_range=clamped)

    return resolve


def _aftertouch_pitch(depth: int) -> ToneControlUpdate:
    if depth == NEUTRAL:
        return ToneControlUpdate()
    code = aftertouch_bend_code(depth)
    if code is None:
        return ToneControlUpdate(
            aftertouch_bend=1,
            warning=f"Aftertouch to pitch bend modulation has incompatible value: {depth}",
        )
    return ToneControlUpdate(aftertouch_bend=1, aftertouch_bend_code=code)


def _aftertouch_cutoff(depth: int) -> ToneControlUpdate:
    return ToneControlUpdate(tvf_aftertouch_sens=depth)


def _aftertouch_level(depth: int) -> ToneControlUpdate:
    return ToneControlUpdate(tva_aftertouch_sens=depth)


ROUTES: Dict[Tuple[int, int], Callable[[int], ToneControlUpdate]] = {
    (ControlSource.MOD_WHEEL, Destination.PITCH_LFO1): _lever_lfo(1),
    (ControlSource.MOD_WHEEL, Destination.PITCH_LFO2): _lever_lfo(2),
    (ControlSource.AFTERTOUCH, Destination.PITCH_LFO1): _aftertouch_lfo(1),
    (ControlSource.AFTERTOUCH, Destination.PITCH_LFO2): _aftertouch_lfo(2),
    (ControlSource.AFTERTOUCH, Destination.PITCH): _aftertouch_pitch,
    (ControlSource.AFTERTOUCH, Destination.CUTOFF): _aftertouch_cutoff,
    (ControlSource.AFTERTOUCH, Destination.LEVEL): _aftertouch_level,
}


def resolve_tone_control(source: int, destination: int, depth: int) -> ToneControlUpdate:
    """
    Resolve one modulation matrix entry.

    Args:
        source: Patch control source (0 = mod wheel, 1 = aftertouch, ...)
        destination: Matrix destination of the entry
        depth: Centered depth (50 = no effect)

    Returns:
        The JD-800 parameter changes, possibly carrying a warning
    """
    route = ROUTES.get((source, destination))
    if route is not None:
        return route(depth)
    if depth != NEUTRAL:
        return ToneControlUpdate(
            warning=f"Unknown mod matrix routing: source = {source}, dest = {destination}"
        )
    return ToneControlUpdate()
