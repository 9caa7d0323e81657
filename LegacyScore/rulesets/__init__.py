import slider

from .catch import CatchRuleset
from .osu import OsuRuleset
from .ruleset import HitValue, Ruleset
from ..exceptions import UnsupportedModeError

RULESETS = (OsuRuleset, CatchRuleset)

_ALIASES = {
    "osu": OsuRuleset,
    "standard": OsuRuleset,
    "catch": CatchRuleset,
    "fruits": CatchRuleset,
    "ctb": CatchRuleset,
}


def get_ruleset(mode) -> Ruleset:
    """Look a ruleset up by name (``"osu"``, ``"fruits"``, ...) or by ``slider.GameMode``."""
    if isinstance(mode, str):
        try:
            return _ALIASES[mode.lower()]()
        except KeyError:
            raise UnsupportedModeError(f"No legacy score simulation for mode {mode!r}") from None

    try:
        game_mode = slider.GameMode(mode)
    except ValueError:
        raise UnsupportedModeError(f"No legacy score simulation for mode {mode!r}") from None
    for ruleset in RULESETS:
        if ruleset.game_mode == game_mode:
            return ruleset()
    raise UnsupportedModeError(f"No legacy score simulation for {game_mode.name}")
