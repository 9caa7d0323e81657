import logging

import pytest

from LegacyScore import BeatmapDifficulty, HitObject, LegacyMod, OsuHitType, OsuRuleset, ScoreResult, simulate
from LegacyScore.exceptions import NestingTooDeepError
from LegacyScore.judgement import HitResult
from LegacyScore.processor import LegacyScoreProcessor

# peppy stars = 1 for up to four objects
ONE_STAR = BeatmapDifficulty(6, 0, 0)


class DummyMod:
    def __init__(self, score_multiplier):
        self.score_multiplier = score_multiplier


def circles(count):
    return [HitObject(OsuHitType.circle, time=i * 100) for i in range(count)]


def make_slider(tick_count, repeat_count=0):
    nested = [HitObject(OsuHitType.slider_head)]
    for span in range(repeat_count + 1):
        nested.extend(HitObject(OsuHitType.slider_tick) for __ in range(tick_count))
        if span < repeat_count:
            nested.append(HitObject(OsuHitType.slider_repeat))
    nested.append(HitObject(OsuHitType.slider_tail))
    return HitObject(OsuHitType.slider, nested, path="B|100:100", duration=1000)


def run(objects, difficulty=ONE_STAR, mods=(), **kwargs):
    return LegacyScoreProcessor(objects, objects, difficulty, mods, OsuRuleset(), **kwargs)


@pytest.fixture(scope='module', autouse=True)
def logger_obj():
    logging.basicConfig(level=logging.DEBUG)


def test_empty_beatmap():
    assert simulate([], [], ONE_STAR, [], OsuRuleset()) == ScoreResult(0, 0, 0)


@pytest.mark.parametrize("count", [0, 1, 2, 3, 4])
def test_circles_one_star(count):
    processor = run(circles(count))
    assert processor.score_multiplier == 1
    assert processor.accuracy_score == 300 * count
    # the first two circles are hit at combo 0 and 1, which earn no combo bonus
    assert processor.combo_score == 12 * max(0, count - 1) * max(0, count - 2) // 2
    assert processor.bonus_score_ratio == 0
    assert isinstance(processor.bonus_score_ratio, float)


def test_many_circles():
    # (5 + 5 + 4 + 16) / 38 * 5 rounds to four stars
    processor = run(circles(100), BeatmapDifficulty(5, 5, 4))
    assert processor.score_multiplier == 4
    assert processor.accuracy_score == 30000
    assert processor.combo_score == 48 * 98 * 99 // 2


@pytest.mark.parametrize("tick_count", [0, 1, 3, 8])
def test_slider(tick_count):
    processor = run([make_slider(tick_count)])
    assert processor.accuracy_score == 30 + 10 * tick_count + 30 + 300
    # combo is counted by head, ticks and tail only
    assert processor.combo_score == 12 * (tick_count + 1)
    assert processor._combo == tick_count + 2


def test_slider_with_repeats():
    processor = run([make_slider(2, repeat_count=2)])
    # head + 3 spans of 2 ticks + 2 repeats + tail
    assert processor.accuracy_score == 30 + 60 + 60 + 30 + 300
    assert processor._combo == 10
    assert processor.combo_score == 12 * 9


def test_slider_then_circle():
    processor = run([make_slider(3), HitObject(OsuHitType.circle)])
    assert processor.accuracy_score == 390 + 300
    assert processor.combo_score == 48 + 12 * 4
    assert processor._combo == 6


def test_spinner():
    spinner = HitObject(OsuHitType.spinner, duration=2000)
    processor = run([spinner], BeatmapDifficulty(6, 5, 0))
    # 15 spinner ticks and 9 bonus ticks
    assert processor._legacy_bonus_score == 15 * 100 + 9 * 1100
    assert processor._modern_bonus_score == 15 * 10 + 9 * 50
    assert processor.bonus_score_ratio == 600 / 11400
    assert processor.accuracy_score == 300
    assert processor.combo_score == 0
    assert processor._combo == 1


def test_spinner_ignores_nested_ticks():
    plain = HitObject(OsuHitType.spinner, duration=2000)
    nested = HitObject(OsuHitType.spinner, [HitObject(OsuHitType.spinner_bonus_tick)] * 50, duration=2000)
    difficulty = BeatmapDifficulty(6, 5, 0)
    assert run([plain], difficulty).result == run([nested], difficulty).result


def test_spinner_uses_playable_difficulty():
    spinner = HitObject(OsuHitType.spinner, duration=2000)
    processor = run([spinner], BeatmapDifficulty(6, 5, 0), playable_difficulty=BeatmapDifficulty(6, 10, 0))
    assert processor._legacy_bonus_score == 9 * 100 + 6 * 1100
    assert processor._modern_bonus_score == 9 * 10 + 6 * 50


def test_spinner_combo_bonus():
    objects = circles(3) + [HitObject(OsuHitType.spinner, duration=2000)]
    # (6 + 5 + 0 + 32 / 6) / 38 * 5 = 2.149
    processor = run(objects, BeatmapDifficulty(6, 5, 0))
    assert processor.score_multiplier == 2
    assert processor.accuracy_score == 1200
    assert processor.combo_score == 24 + 48
    assert processor._combo == 4


def test_combo_bonus_truncates_each_hit():
    # 12 * 1.06 = 12.72 per combo; hits at combo 2 and 3 give int(12.72) + int(25.44)
    processor = run(circles(4), mods=[LegacyMod("hd")])
    assert processor.combo_score == 12 + 25


def test_combo_bonus_multiplies_combo_last():
    # 12 * 0.3 is taken before the combo multiplies it: at combo 16, int(15 * 3.5999999999999996) == 53
    processor = LegacyScoreProcessor([], circles(17), BeatmapDifficulty(6, 0, 2), [LegacyMod("ht")], OsuRuleset())
    assert processor.score_multiplier == pytest.approx(0.3)
    assert processor.combo_score == 425


def test_linear_in_mod_multiplier():
    objects = circles(50) + [make_slider(4)] + circles(10)
    difficulty = BeatmapDifficulty(5, 5, 4)
    single = run(objects, difficulty, [DummyMod(1.0)])
    double = run(objects, difficulty, [DummyMod(2.0), DummyMod(1.0)])
    assert double.combo_score == 2 * single.combo_score
    assert double.accuracy_score == single.accuracy_score


def test_unknown_kind_is_ignored():
    objects = [HitObject(OsuHitType.circle), HitObject("hold_note", circles(5)), HitObject(OsuHitType.circle),
               HitObject(OsuHitType.circle)]
    processor = run(objects)
    assert processor.accuracy_score == 900
    assert processor.combo_score == 12
    assert processor._combo == 3


def test_deterministic():
    objects = circles(20) + [make_slider(2, 1), HitObject(OsuHitType.spinner, duration=3500)] + circles(5)
    difficulty = BeatmapDifficulty(5, 7, 4)
    mods = [LegacyMod("hdhr")]
    assert simulate(objects, objects, difficulty, mods, OsuRuleset()) == \
           simulate(objects, objects, difficulty, mods, OsuRuleset())


def test_ruleset_by_name():
    assert simulate(circles(4), circles(4), ONE_STAR, [], "osu") == ScoreResult(1200, 36, 0)


def test_injected_numeric_result():
    spinner = HitObject(OsuHitType.spinner, duration=2000)
    values = {HitResult.small_bonus: 1, HitResult.large_bonus: 2}
    processor = run([spinner], BeatmapDifficulty(6, 5, 0), numeric_result=values.__getitem__)
    assert processor._modern_bonus_score == 15 * 1 + 9 * 2


def test_nesting_too_deep():
    hit_object = HitObject(OsuHitType.circle)
    for __ in range(10):
        hit_object = HitObject(OsuHitType.slider, [hit_object], path="L|0:0")
    with pytest.raises(NestingTooDeepError):
        run([hit_object])
    assert run([hit_object], max_nesting_depth=10).accuracy_score == 300 * 11


def test_input_not_mutated():
    slider_object = make_slider(3)
    nested = slider_object.nested
    run([slider_object])
    assert slider_object.nested is nested
    assert len(slider_object.nested) == 5
