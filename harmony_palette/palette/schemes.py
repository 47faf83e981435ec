from .masks import sample_masked_hue, select_mask

SCHEMES = ("complementary", "monochromatic", "analogous", "triadic", "gamutMask")


def color_at(base_hue, scheme, index, rand, mask_index=0):
    """Compute the HSV of the color at a palette position for a scheme.

    Saturation and brightness are returned as the raw formula values; the
    monochromatic formula grows with index and can exceed 1.0, so callers
    clamp at conversion time (see create_color_from_hsv).

    Args:
        base_hue: Palette base hue in degrees
        scheme: One of SCHEMES; anything else gets a flat default color
        index: 0-based position of the color within the palette
        rand: Zero-argument callable returning floats in [0, 1)
        mask_index: Gamut mask used by the gamutMask scheme

    Returns:
        tuple: (hue in degrees, saturation, brightness)
    """
    if scheme == "complementary":
        # Opposite hue, fanning out 30 degrees per extra color
        offset = (index - 1) * 30 if index > 1 else 0
        hue = (base_hue + 180 + offset) % 360
        saturation = 0.85 + 0.15 * rand()
        brightness = 0.75 + 0.25 * rand()
    elif scheme == "monochromatic":
        hue = base_hue
        saturation = 0.3 + 0.2 * index + 0.2 * rand()
        brightness = 0.4 + 0.15 * index + 0.2 * rand()
    elif scheme == "analogous":
        hue = (base_hue + 30 * (index - 1)) % 360
        saturation = 0.7 + 0.3 * rand()
        brightness = 0.7 + 0.3 * rand()
    elif scheme == "triadic":
        hue = (base_hue + 120 * index) % 360
        saturation = 0.75 + 0.25 * rand()
        brightness = 0.75 + 0.25 * rand()
    elif scheme == "gamutMask":
        hue = sample_masked_hue(base_hue, mask_index, rand)
        saturation = 0.7 + 0.3 * rand()
        brightness = 0.7 + 0.3 * rand()
    else:
        hue = base_hue
        saturation = 0.75
        brightness = 0.75

    return hue, saturation, brightness


def scheme_display_name(scheme, mask_index=0):
    """Human-readable scheme label, naming the mask for gamutMask."""
    if scheme == "gamutMask":
        return f"Gamut Mask: {select_mask(mask_index).name}"
    return scheme[:1].upper() + scheme[1:]
