import slider

from .ruleset import HitValue, Ruleset
from ..judgement import HitResult
from ..objects import OsuHitType
from ..spinner import reconstruct_ticks


class OsuRuleset(Ruleset):
    name = "osu"
    game_mode = slider.GameMode.standard

    hit_values = {
        OsuHitType.slider_head: HitValue(30),
        OsuHitType.slider_tail: HitValue(30),
        OsuHitType.slider_repeat: HitValue(30),
        OsuHitType.slider_tick: HitValue(10),
        OsuHitType.spinner_bonus_tick: HitValue(1100, increases_combo=False, bonus_result=HitResult.large_bonus),
        OsuHitType.spinner_tick: HitValue(100, increases_combo=False, bonus_result=HitResult.small_bonus),
        OsuHitType.circle: HitValue(300, adds_combo_bonus=True),
        # the slider's own combo was already counted by its head, ticks, repeats and tail
        OsuHitType.slider: HitValue(300, increases_combo=False, adds_combo_bonus=True),
        OsuHitType.spinner: HitValue(300, adds_combo_bonus=True),
    }

    composite_kinds = frozenset({OsuHitType.slider})

    def nested_objects(self, hit_object, difficulty):
        if hit_object.kind is OsuHitType.spinner:
            return reconstruct_ticks(hit_object.duration, difficulty.overall_difficulty)
        return super().nested_objects(hit_object, difficulty)
