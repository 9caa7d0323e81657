import enum
from typing import Iterable, Optional


class OsuHitType(enum.Enum):
    circle = "circle"
    slider = "slider"
    slider_head = "slider_head"
    slider_tick = "slider_tick"
    slider_repeat = "slider_repeat"
    slider_tail = "slider_tail"
    spinner = "spinner"
    spinner_tick = "spinner_tick"
    spinner_bonus_tick = "spinner_bonus_tick"


class CatchHitType(enum.Enum):
    fruit = "fruit"
    droplet = "droplet"
    tiny_droplet = "tiny_droplet"
    banana = "banana"
    juice_stream = "juice_stream"
    banana_shower = "banana_shower"


class HitObject:
    """A resolved hit object and the nested objects it owns.

    ``path`` and ``duration`` are only inspected for their presence when
    classifying base objects; spinners additionally read ``duration`` in
    milliseconds.
    """

    __slots__ = ('_kind', '_nested', '_duration', '_path', '_time')

    def __init__(self, kind, nested: Iterable["HitObject"] = (), *, duration: Optional[float] = None,
                 path=None, time: Optional[float] = None):
        self._kind = kind
        self._nested = tuple(nested)
        self._duration = duration
        self._path = path
        self._time = time

    @property
    def kind(self):
        return self._kind

    @property
    def nested(self):
        return self._nested

    @property
    def duration(self):
        return self._duration

    @property
    def path(self):
        return self._path

    @property
    def time(self):
        return self._time

    @property
    def has_path(self) -> bool:
        return self._path is not None

    @property
    def has_duration(self) -> bool:
        return self._duration is not None

    def __repr__(self):
        kind = str(getattr(self._kind, 'name', self._kind))
        extra = [f"{len(self._nested)} nested"] if self._nested else []
        if self._time is not None:
            extra.append(f"{self._time:g}ms")
        if self._duration is not None:
            extra.append(f"duration {self._duration:g}ms")
        return f"<{type(self).__qualname__}: {', '.join([kind, *extra])}>"
