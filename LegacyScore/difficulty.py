import logging
import math
from collections import namedtuple
from typing import Iterable

from .mods import combined_multiplier

logger = logging.getLogger(__name__)


class BeatmapDifficulty(namedtuple('BeatmapDifficulty',
                                   'drain_rate overall_difficulty circle_size approach_rate')):
    __slots__ = ()

    def __new__(cls, drain_rate, overall_difficulty, circle_size, approach_rate=5.0):
        return super().__new__(cls, drain_rate, overall_difficulty, circle_size, approach_rate)


class ObjectCounts(namedtuple('ObjectCounts', 'normal slider spinner')):
    __slots__ = ()

    @property
    def total(self):
        return self.normal + self.slider + self.spinner


def difficulty_range(difficulty: float, min_: float, mid: float, max_: float) -> float:
    """Map a 0-10 difficulty value onto ``min_``-``mid``-``max_``, linear on either side of 5."""
    if difficulty > 5:
        return mid + (max_ - mid) * (difficulty - 5) / 5
    if difficulty < 5:
        return mid + (mid - min_) * (difficulty - 5) / 5
    return mid


def round_half_away_from_zero(value: float) -> int:
    magnitude = abs(value)
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1
    return -rounded if value < 0 else rounded


def count_objects(hit_objects: Iterable) -> ObjectCounts:
    normal = slider = spinner = 0
    for hit_object in hit_objects:
        if hit_object.has_path:
            slider += 1
        elif hit_object.has_duration:
            spinner += 1
        else:
            normal += 1
    return ObjectCounts(normal, slider, spinner)


def peppy_stars(difficulty: BeatmapDifficulty, counts: ObjectCounts) -> int:
    """The legacy integer difficulty rating used by ScoreV1.

    A zero drain rate is not guarded against; the division raises.
    """
    density_bonus = min(max(counts.total / difficulty.drain_rate * 8, 0), 16)
    raw_stars = (difficulty.drain_rate
                 + difficulty.overall_difficulty
                 + difficulty.circle_size
                 + density_bonus) / 38 * 5
    return round_half_away_from_zero(raw_stars)


def score_multiplier(difficulty: BeatmapDifficulty, counts: ObjectCounts, mods: Iterable) -> float:
    stars = peppy_stars(difficulty, counts)
    multiplier = stars * combined_multiplier(mods)
    logger.debug(f"score_multiplier | {counts}, peppy stars = {stars}, multiplier = {multiplier}")
    return multiplier
