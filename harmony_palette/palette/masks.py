"""Gamut masks: regions of the hue wheel a palette is allowed to use.

Each mask is a predicate over the hue angle measured from the palette's base
hue, so the shape rotates with the base hue.
"""

from collections import namedtuple

GamutMask = namedtuple("GamutMask", ["name", "predicate"])

MAX_MASK_ATTEMPTS = 100


def relative_angle(hue, base_hue):
    """Angle of hue relative to base_hue, in [0, 360)."""
    return (hue - base_hue + 360) % 360


GAMUT_MASKS = (
    # A narrow wedge plus the region across the wheel
    GamutMask(
        "Complementary Split",
        lambda angle: angle < 60 or 170 < angle < 230,
    ),
    # Three areas spaced roughly 120 degrees apart
    GamutMask(
        "Triadic Split",
        lambda angle: angle < 40 or 115 < angle < 155 or 235 < angle < 275,
    ),
    GamutMask(
        "Y-Shape Split",
        lambda angle: angle < 50 or 150 < angle < 190 or 200 < angle < 240,
    ),
    GamutMask(
        "Analogous Slice",
        lambda angle: angle < 90,
    ),
)


def select_mask(mask_index):
    """Return the mask for any integer index, wrapping around the catalog."""
    return GAMUT_MASKS[mask_index % len(GAMUT_MASKS)]


def in_mask(hue, base_hue, mask_index):
    return select_mask(mask_index).predicate(relative_angle(hue, base_hue))


def sample_masked_hue(base_hue, mask_index, rand, max_attempts=MAX_MASK_ATTEMPTS):
    """Draw a random hue that falls inside the selected mask.

    Args:
        base_hue: Palette base hue in degrees
        mask_index: Index into GAMUT_MASKS (normalized modulo its size)
        rand: Zero-argument callable returning floats in [0, 1)
        max_attempts: Number of draws before giving up

    Returns:
        The first accepted hue, or base_hue if every draw missed the mask
    """
    mask = select_mask(mask_index)
    for _ in range(max_attempts):
        test_hue = rand() * 360
        if mask.predicate(relative_angle(test_hue, base_hue)):
            return test_hue

    return base_hue
