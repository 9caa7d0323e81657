import slider

from .ruleset import HitValue, Ruleset
from ..judgement import HitResult
from ..objects import CatchHitType


class CatchRuleset(Ruleset):
    name = "catch"
    game_mode = slider.GameMode.ctb

    # juice streams and banana showers are only worth what they contain
    hit_values = {
        CatchHitType.tiny_droplet: HitValue(10, increases_combo=False),
        CatchHitType.droplet: HitValue(100),
        CatchHitType.fruit: HitValue(300, adds_combo_bonus=True),
        CatchHitType.banana: HitValue(1100, increases_combo=False, bonus_result=HitResult.large_bonus),
    }

    composite_kinds = frozenset({CatchHitType.juice_stream, CatchHitType.banana_shower})
