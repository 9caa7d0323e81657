import enum

SMALL_BONUS_SCORE = 10
LARGE_BONUS_SCORE = 50


class HitResult(enum.Enum):
    none = "none"
    small_bonus = "small_bonus"
    large_bonus = "large_bonus"

    @property
    def is_bonus(self):
        return self is not HitResult.none


_NUMERIC_RESULTS = {
    HitResult.none: 0,
    HitResult.small_bonus: SMALL_BONUS_SCORE,
    HitResult.large_bonus: LARGE_BONUS_SCORE,
}


def to_numeric_result(result: HitResult) -> int:
    """The score the modern scoring system awards for ``result``."""
    return _NUMERIC_RESULTS[result]


def numeric_result_from_config(config):
    """Build a ``to_numeric_result`` replacement from the ``judgement`` section of a config box."""
    table = {
        HitResult.none: 0,
        HitResult.small_bonus: int(config.judgement.small_bonus),
        HitResult.large_bonus: int(config.judgement.large_bonus),
    }
    return table.__getitem__
