import logging
import operator
from functools import reduce
from typing import Iterable

import slider

from .exceptions import UnsupportedModeError

logger = logging.getLogger(__name__)

STANDARD_MULTIPLIERS = {
    slider.Mod.no_fail: 0.5,
    slider.Mod.easy: 0.5,
    slider.Mod.half_time: 0.3,
    slider.Mod.hidden: 1.06,
    slider.Mod.hard_rock: 1.06,
    slider.Mod.double_time: 1.12,
    slider.Mod.nightcore: 1.12,
    slider.Mod.flashlight: 1.12,
    slider.Mod.spun_out: 0.9,
    slider.Mod.relax: 0.1,
    slider.Mod.auto_pilot: 0.1,
}

CATCH_MULTIPLIERS = {
    slider.Mod.no_fail: 0.5,
    slider.Mod.easy: 0.5,
    slider.Mod.half_time: 0.3,
    slider.Mod.hidden: 1.06,
    slider.Mod.hard_rock: 1.12,
    slider.Mod.double_time: 1.06,
    slider.Mod.nightcore: 1.06,
    slider.Mod.flashlight: 1.12,
    slider.Mod.relax: 0.1,
}

MULTIPLIERS = {
    slider.GameMode.standard: STANDARD_MULTIPLIERS,
    slider.GameMode.ctb: CATCH_MULTIPLIERS,
}


class LegacyMod:
    """A stable mod combination, as stored on legacy scores.

    ``mods`` is either the bitmask or an acronym string such as ``"hdhr"``.
    """

    def __init__(self, mods=0, mode=slider.GameMode.standard):
        if isinstance(mods, str):
            mods = slider.Mod.parse(mods) if mods else 0
        self.mods = int(mods)
        self.mode = slider.GameMode(mode)
        if self.mode not in MULTIPLIERS:
            raise UnsupportedModeError(f"No legacy mod multipliers for {self.mode.name}")

    @property
    def _effective_mods(self):
        mods = self.mods
        # nightcore is always sent together with double time
        if mods & slider.Mod.nightcore:
            mods &= ~slider.Mod.double_time
        return mods

    @property
    def score_multiplier(self) -> float:
        mods = self._effective_mods
        return reduce(operator.mul,
                      (v for k, v in MULTIPLIERS[self.mode].items() if mods & k),
                      1.0)

    def split(self):
        """One ``LegacyMod`` per set bit, the implied double time of nightcore excluded."""
        mods = self._effective_mods
        bit = 1
        while bit <= mods:
            if mods & bit:
                yield type(self)(bit, self.mode)
            bit <<= 1

    def adjust(self, difficulty):
        """Apply the difficulty-changing mods (easy, hard rock) to a ``BeatmapDifficulty``."""
        if self.mods & slider.Mod.hard_rock:
            return difficulty._replace(
                drain_rate=min(difficulty.drain_rate * 1.4, 10),
                overall_difficulty=min(difficulty.overall_difficulty * 1.4, 10),
                circle_size=min(difficulty.circle_size * 1.3, 10),
                approach_rate=min(difficulty.approach_rate * 1.4, 10),
            )
        if self.mods & slider.Mod.easy:
            return difficulty._replace(
                drain_rate=difficulty.drain_rate / 2,
                overall_difficulty=difficulty.overall_difficulty / 2,
                circle_size=difficulty.circle_size / 2,
                approach_rate=difficulty.approach_rate / 2,
            )
        return difficulty

    def __eq__(self, other):
        if not isinstance(other, LegacyMod):
            return NotImplemented
        return (self.mods, self.mode) == (other.mods, other.mode)

    def __hash__(self):
        return hash((self.mods, self.mode))

    def __repr__(self):
        return f"<{type(self).__qualname__}: {slider.Mod.serialize(self.mods).upper() or 'NM'}, {self.mode.name}>"


def combined_multiplier(mods: Iterable) -> float:
    return reduce(operator.mul, (mod.score_multiplier for mod in mods), 1.0)


def adjusted_difficulty(difficulty, mods: Iterable):
    for mod in mods:
        if isinstance(mod, LegacyMod):
            difficulty = mod.adjust(difficulty)
    return difficulty
