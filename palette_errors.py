"""
Exceptions raised for malformed palette and colour input.
"""


class PaletteError(ValueError):
    """Base class for palette generation errors."""


class InvalidColorInput(PaletteError):
    """Hex, RGB, HSL or luminance input that does not describe a colour."""


class InvalidRatio(PaletteError):
    """Target contrast ratio that is not a finite number >= 1."""


class InvalidPaletteSize(PaletteError):
    """Requested palette size that cannot hold the seed colours."""
