import logging
from collections import Counter

import pytest

from LegacyScore.objects import OsuHitType
from LegacyScore.spinner import HalfSpins, half_spins, reconstruct_ticks


@pytest.fixture(scope='module', autouse=True)
def logger_obj():
    logging.basicConfig(level=logging.DEBUG)


@pytest.mark.parametrize("duration, overall_difficulty, expected", [
    (2000, 5, HalfSpins(31, 10, 13)),
    (2000, 10, HalfSpins(31, 15, 18)),
    (2000, 0, HalfSpins(31, 6, 9)),
    (1000, 5, HalfSpins(15, 5, 8)),
    (0, 5, HalfSpins(0, 0, 3)),
])
def test_half_spins(duration, overall_difficulty, expected):
    assert half_spins(duration, overall_difficulty) == expected


@pytest.mark.parametrize("duration, overall_difficulty, ticks, bonus_ticks", [
    # bonus on odd i from 15 to 31, ticks on every even i from 2 to 30
    (2000, 5, 15, 9),
    # bonus on even i from 20 to 30, which takes them away from the ticks
    (2000, 10, 9, 6),
    (2000, 0, 15, 11),
    (0, 5, 0, 0),
])
def test_reconstruct_ticks_counts(duration, overall_difficulty, ticks, bonus_ticks):
    counts = Counter(tick.kind for tick in reconstruct_ticks(duration, overall_difficulty))
    assert counts[OsuHitType.spinner_tick] == ticks
    assert counts[OsuHitType.spinner_bonus_tick] == bonus_ticks


def test_reconstruct_ticks_order():
    kinds = [tick.kind for tick in reconstruct_ticks(1000, 5)]
    # i = 2, 4, 6, 8 are ticks; 10, 12 and 14 are past the bonus threshold of 8
    assert kinds == [OsuHitType.spinner_tick] * 4 + [OsuHitType.spinner_bonus_tick] * 3
