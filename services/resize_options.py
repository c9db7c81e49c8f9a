from collections import namedtuple
from enum import Enum

ResizeStrategy = namedtuple("ResizeStrategy", ["fit", "position"])


class ResizeOption(str, Enum):
    FILL   = "fill"
    TOP    = "top"
    BOTTOM = "bottom"
    FIT    = "fit"

    @classmethod
    def parse(cls, value):
        """
        Maps a raw query value to an option. Anything unrecognized, including
        None, falls back to FIT rather than being rejected.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.FIT


DEFAULT_OPTION = ResizeOption.FIT

# One row per option: cover crops overflow at `position`, inside never crops
resize_strategies = {
    ResizeOption.FILL:   ResizeStrategy(fit="cover",  position="centre"),
    ResizeOption.TOP:    ResizeStrategy(fit="cover",  position="top"),
    ResizeOption.BOTTOM: ResizeStrategy(fit="cover",  position="bottom"),
    ResizeOption.FIT:    ResizeStrategy(fit="inside", position="entropy"),
}


def strategy_for(option):
    return resize_strategies[ResizeOption.parse(option)]
