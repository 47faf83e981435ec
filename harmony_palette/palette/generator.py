"""Palette generation by scheme with perceptual-distance rejection sampling.

A palette shares one base hue. Candidates come from the scheme formulas and
are kept only when they are far enough (in LAB) from every color already
accepted. When the scheme cannot fill the palette within its attempt budget,
the remaining slots are filled with unconstrained random colors that still
pass the distance filter; if even that fails, the last slots are filled
without the distance check and the shortfall is reported.
"""

import random
import warnings
from collections import namedtuple

from ..color import create_color_from_hsv, random_color
from .distance import is_too_similar
from .schemes import color_at

MAX_ATTEMPTS = 100
MAX_FALLBACK_ATTEMPTS = 1000


class PaletteShortfallWarning(UserWarning):
    """Some palette colors could not be kept apart by the distance filter."""


class PaletteResult(
    namedtuple(
        "PaletteResult",
        ["colors", "base_hue", "scheme", "mask_index", "fallback_count", "shortfall"],
    )
):
    """A generated palette with the bookkeeping of how it was built.

    fallback_count: colors taken from the unconstrained random fallback;
        they always sit at the end of colors.
    shortfall: colors (among the fallback ones) added without the
        distance check.
    """

    __slots__ = ()

    @property
    def hexes(self):
        return [c.hex for c in self.colors]


def build_palette(count, scheme, mask_index=0, rand=None, base_hue=None):
    """Generate a palette and report how it was assembled.

    Args:
        count: Number of colors, >= 0
        scheme: One of SCHEMES
        mask_index: Gamut mask for the gamutMask scheme
        rand: Zero-argument callable returning floats in [0, 1).
            Defaults to random.random.
        base_hue: Fixed base hue in degrees. Drawn from rand if None.

    Returns:
        PaletteResult
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if count == 0:
        return PaletteResult([], base_hue, scheme, mask_index, 0, 0)

    if rand is None:
        rand = random.random
    if base_hue is None:
        base_hue = rand() * 360

    colors = []
    attempts = 0
    while len(colors) < count and attempts < MAX_ATTEMPTS:
        hsv = color_at(base_hue, scheme, len(colors), rand, mask_index=mask_index)
        candidate = create_color_from_hsv(*hsv)
        if not is_too_similar(candidate, colors):
            colors.append(candidate)
        attempts += 1

    scheme_count = len(colors)

    # Relax the scheme, keep the distance filter
    attempts = 0
    while len(colors) < count and attempts < MAX_FALLBACK_ATTEMPTS:
        candidate = random_color(rand)
        if not is_too_similar(candidate, colors):
            colors.append(candidate)
        attempts += 1

    shortfall = count - len(colors)
    if shortfall:
        colors.extend(random_color(rand) for _ in range(shortfall))
        warnings.warn(
            f"could not guarantee distinctness for {shortfall} of {count} colors",
            PaletteShortfallWarning,
            stacklevel=2,
        )

    return PaletteResult(
        colors,
        base_hue,
        scheme,
        mask_index,
        len(colors) - scheme_count,
        shortfall,
    )


def generate_palette(count, scheme, mask_index=0, rand=None, base_hue=None):
    """Generate a palette as a list of "#rrggbb" strings.

    See build_palette for the arguments.
    """
    return build_palette(
        count, scheme, mask_index=mask_index, rand=rand, base_hue=base_hue
    ).hexes
