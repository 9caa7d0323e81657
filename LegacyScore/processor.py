import logging
from collections import namedtuple
from typing import Callable, Iterable, Optional

from .difficulty import BeatmapDifficulty, count_objects, score_multiplier
from .exceptions import NestingTooDeepError
from .judgement import HitResult, numeric_result_from_config
from .logger import logger_deco_factory
from .rulesets import Ruleset, get_ruleset
from .utils import default_config

logger = logging.getLogger(__name__)
logged = logger_deco_factory(logger)

ScoreResult = namedtuple('ScoreResult', 'accuracy_score combo_score bonus_score_ratio')


class LegacyScoreProcessor:
    """Replays a beatmap through the ScoreV1 judgement model, assuming a full combo.

    ``base_objects`` are the beatmap's objects as placed and only decide the
    difficulty rating; ``playable_objects`` are the same objects with their
    nested objects resolved, and are the ones scored.
    ``playable_difficulty`` is the mod-adjusted difficulty, defaulting to
    ``difficulty``. ``numeric_result`` maps a bonus ``HitResult`` to the
    modern score it is worth, read from the ``judgement`` config section by default.
    """

    def __init__(self, base_objects: Iterable, playable_objects: Iterable, difficulty: BeatmapDifficulty,
                 mods: Iterable, ruleset: Ruleset, *, playable_difficulty: Optional[BeatmapDifficulty] = None,
                 numeric_result: Optional[Callable[[HitResult], int]] = None,
                 max_nesting_depth: Optional[int] = None):
        self.ruleset = ruleset if isinstance(ruleset, Ruleset) else get_ruleset(ruleset)
        self.playable_difficulty = difficulty if playable_difficulty is None else playable_difficulty
        config = default_config()()
        self.numeric_result = numeric_result_from_config(config) if numeric_result is None else numeric_result
        self.max_nesting_depth = config.simulation.max_nesting_depth if max_nesting_depth is None else max_nesting_depth

        self.score_multiplier = score_multiplier(difficulty, count_objects(base_objects), list(mods))

        self._accuracy_score = 0
        self._combo_score = 0
        self._legacy_bonus_score = 0
        self._modern_bonus_score = 0
        self._combo = 0

        self._playable_objects = tuple(playable_objects)
        self.run()

    @property
    def accuracy_score(self) -> int:
        """The accuracy portion of the legacy total score."""
        return self._accuracy_score

    @property
    def combo_score(self) -> int:
        """The combo-multiplied portion of the legacy total score."""
        return self._combo_score

    @property
    def bonus_score_ratio(self) -> float:
        """``modern_bonus_score / legacy_bonus_score``, for converting the bonus of legacy scores
        onto the current scale. Zero when the beatmap awards no bonus."""
        if self._legacy_bonus_score == 0:
            return 0.0
        return self._modern_bonus_score / self._legacy_bonus_score

    @property
    def result(self) -> ScoreResult:
        return ScoreResult(self.accuracy_score, self.combo_score, self.bonus_score_ratio)

    @logged
    def run(self):
        for hit_object in self._playable_objects:
            self.simulate_hit(hit_object)
        return self.result

    def simulate_hit(self, hit_object, depth=0):
        if depth > self.max_nesting_depth:
            raise NestingTooDeepError(f"{hit_object!r} is nested more than {self.max_nesting_depth} levels deep")

        for nested in self.ruleset.nested_objects(hit_object, self.playable_difficulty):
            self.simulate_hit(nested, depth + 1)

        value = self.ruleset.hit_value(hit_object)
        if value is None:
            return

        if value.adds_combo_bonus:
            # score // 25 truncates before the multiplier is applied, as stable did
            self._combo_score += int(max(0, self._combo - 1) * (value.score // 25 * self.score_multiplier))

        if value.bonus_result.is_bonus:
            self._legacy_bonus_score += value.score
            self._modern_bonus_score += self.numeric_result(value.bonus_result)
        else:
            self._accuracy_score += value.score

        if value.increases_combo:
            self._combo += 1

    def __repr__(self):
        return f"<{type(self).__qualname__}: {self.ruleset.name}, multiplier {self.score_multiplier}>"


def simulate(base_objects, playable_objects, difficulty, mods, ruleset, **kwargs) -> ScoreResult:
    return LegacyScoreProcessor(base_objects, playable_objects, difficulty, mods, ruleset, **kwargs).result
