from __future__ import annotations

import random
from typing import Iterable, Optional, Sequence

from .config import palette_from_cfg
from .constants import QUADRANTS
from .errors import PaletteTooSmall
from .models import Color


class ColorPicker:
    """Draws palette colours that none of the quadrants currently show.

    The palette must hold more distinct colours than can ever be excluded
    at once (``max_excluded``), otherwise rejection sampling could not
    terminate. That is checked here, at construction.
    """

    def __init__(
        self,
        palette: Optional[Sequence[Color]] = None,
        *,
        rng: Optional[random.Random] = None,
        max_excluded: int = QUADRANTS,
    ) -> None:
        source = palette if palette is not None else palette_from_cfg()
        self.palette: tuple[Color, ...] = tuple(tuple(c) for c in source)
        distinct = len(set(self.palette))
        if distinct <= max_excluded:
            raise PaletteTooSmall(distinct, max_excluded)
        self.rng = rng or random.Random()
        self.max_excluded = max_excluded

    def pick(self, excluding: Iterable[Optional[Color]] = ()) -> Color:
        banned = {c for c in excluding if c is not None}
        if banned.issuperset(self.palette):
            raise PaletteTooSmall(len(set(self.palette)), len(banned))
        while True:
            color = self.palette[self.rng.randrange(len(self.palette))]
            if color not in banned:
                return color


__all__ = ["ColorPicker"]
