"""
Exceptions raised by the colour-walk core.

The round engine itself is total over well-formed state; the only error
path is a palette that cannot satisfy a reroll.
"""


class ColorWalkException(Exception):
    """Base class for all colour-walk errors."""
    pass


class PaletteTooSmall(ColorWalkException):
    """The palette cannot provide a colour outside the exclusion set."""
    def __init__(self, size, excluded):
        self.size = size
        self.excluded = excluded
        super().__init__(
            f"Palette of {size} colours cannot avoid {excluded} excluded colours"
        )
