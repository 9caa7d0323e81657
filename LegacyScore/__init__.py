from .difficulty import BeatmapDifficulty, difficulty_range
from .exceptions import LegacyScoreError
from .judgement import HitResult, to_numeric_result
from .mods import LegacyMod
from .objects import CatchHitType, HitObject, OsuHitType
from .processor import LegacyScoreProcessor, ScoreResult, simulate
from .rulesets import CatchRuleset, OsuRuleset, get_ruleset

__version__ = '0.1'
