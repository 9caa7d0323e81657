"""Spinner tick reconstruction.

Spinners in the current client are more lenient than they were in
osu!stable, so their nested ticks do not line up with what a legacy score
was awarded. The tick sequence is instead regenerated from the spinner's
length and the rotation speed stable required.
"""
from collections import namedtuple

from .difficulty import difficulty_range
from .objects import HitObject, OsuHitType

MAXIMUM_ROTATIONS_PER_SECOND = 477 / 60

HalfSpins = namedtuple('HalfSpins', 'total_possible required_for_completion required_before_bonus')


def half_spins(duration: float, overall_difficulty: float) -> HalfSpins:
    minimum_rotations_per_second = difficulty_range(overall_difficulty, 3, 5, 7.5)
    seconds_duration = duration / 1000

    total_possible = int(seconds_duration * MAXIMUM_ROTATIONS_PER_SECOND * 2)
    required_for_completion = int(seconds_duration * minimum_rotations_per_second)
    # bonus points only start after another one and a half rotations
    return HalfSpins(total_possible, required_for_completion, required_for_completion + 3)


def reconstruct_ticks(duration: float, overall_difficulty: float):
    """Yield the spinner ticks and bonus ticks stable would have judged, in order."""
    spins = half_spins(duration, overall_difficulty)
    before_bonus = spins.required_before_bonus

    for i in range(spins.total_possible + 1):
        if i > before_bonus and (i - before_bonus) % 2 == 0:
            yield HitObject(OsuHitType.spinner_bonus_tick)
        elif i > 1 and i % 2 == 0:
            yield HitObject(OsuHitType.spinner_tick)
