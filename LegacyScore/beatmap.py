"""Conversion of ``slider`` beatmaps into hit object trees.

Only osu!standard beatmaps can be expanded here: catch juice streams need
the full droplet generation of the catch beatmap converter.
"""
import logging
from datetime import timedelta

import slider

from .difficulty import BeatmapDifficulty
from .exceptions import UnsupportedModeError
from .mods import LegacyMod, adjusted_difficulty
from .objects import HitObject, OsuHitType
from .processor import simulate
from .rulesets import OsuRuleset

logger = logging.getLogger(__name__)


def _milliseconds(delta: timedelta) -> float:
    return delta.total_seconds() * 1000


def _slider_nested(hit_object: slider.beatmap.Slider):
    span_count = max(1, hit_object.repeat)
    # slider counts its ticks as head + (ticks per span + 1) * spans
    ticks_per_span = max(0, (hit_object.ticks - 1 - span_count) // span_count)

    yield HitObject(OsuHitType.slider_head, time=_milliseconds(hit_object.time))
    for span in range(span_count):
        for __ in range(ticks_per_span):
            yield HitObject(OsuHitType.slider_tick)
        if span < span_count - 1:
            yield HitObject(OsuHitType.slider_repeat)
    yield HitObject(OsuHitType.slider_tail, time=_milliseconds(hit_object.end_time))


def convert_hit_object(hit_object) -> HitObject:
    time = _milliseconds(hit_object.time)
    if isinstance(hit_object, slider.beatmap.Slider):
        return HitObject(OsuHitType.slider, _slider_nested(hit_object),
                         duration=_milliseconds(hit_object.end_time - hit_object.time),
                         path=hit_object.curve, time=time)
    if isinstance(hit_object, slider.beatmap.Spinner):
        return HitObject(OsuHitType.spinner,
                         duration=_milliseconds(hit_object.end_time - hit_object.time), time=time)
    if isinstance(hit_object, slider.beatmap.Circle):
        return HitObject(OsuHitType.circle, time=time)
    raise UnsupportedModeError(f"{type(hit_object).__name__} is not an osu!standard hit object")


def convert_hit_objects(hit_objects):
    return [convert_hit_object(hit_object) for hit_object in hit_objects]


def beatmap_difficulty(beatmap) -> BeatmapDifficulty:
    return BeatmapDifficulty(
        drain_rate=beatmap.hp_drain_rate,
        overall_difficulty=beatmap.overall_difficulty,
        circle_size=beatmap.circle_size,
        approach_rate=beatmap.approach_rate,
    )


def legacy_mods(mods):
    """The osu!standard ``LegacyMod`` of each mod set in ``mods``."""
    return list(LegacyMod(mods, slider.GameMode.standard).split())


def from_beatmap(beatmap, mods=0):
    """Return ``(base_objects, playable_objects, difficulty, playable_difficulty)`` for ``beatmap``."""
    if slider.GameMode(beatmap.mode) != slider.GameMode.standard:
        raise UnsupportedModeError(f"Cannot expand a {slider.GameMode(beatmap.mode).name} beatmap")

    objects = convert_hit_objects(beatmap.hit_objects(stacking=False))
    difficulty = beatmap_difficulty(beatmap)
    playable_difficulty = adjusted_difficulty(difficulty, legacy_mods(mods))
    logger.debug(f"from_beatmap | {beatmap!r}: {len(objects)} objects, {playable_difficulty}")

    # nested objects are ignored when rating the beatmap, so both views can share one list
    return objects, objects, difficulty, playable_difficulty


def simulate_beatmap(beatmap, mods=0):
    base_objects, playable_objects, difficulty, playable_difficulty = from_beatmap(beatmap, mods)
    return simulate(base_objects, playable_objects, difficulty, legacy_mods(mods),
                    OsuRuleset(), playable_difficulty=playable_difficulty)
