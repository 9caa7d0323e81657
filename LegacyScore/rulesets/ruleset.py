from abc import ABC
from collections import namedtuple

from ..judgement import HitResult

HitValue = namedtuple('HitValue', 'score increases_combo adds_combo_bonus bonus_result')
HitValue.__new__.__defaults__ = (True, False, HitResult.none)


class Ruleset(ABC):
    """The per-mode half of the legacy score simulation.

    ``hit_values`` maps each hit type to what hitting it was worth; kinds
    missing from it are worth nothing and do not count towards combo.
    Only kinds in ``composite_kinds`` have their nested objects simulated.
    """
    name = None
    game_mode = None
    hit_values = {}
    composite_kinds = frozenset()

    def hit_value(self, hit_object):
        return self.hit_values.get(hit_object.kind)

    def nested_objects(self, hit_object, difficulty):
        if hit_object.kind in self.composite_kinds:
            return hit_object.nested
        return ()

    def __repr__(self):
        return f"<{type(self).__qualname__}: {self.name}>"
