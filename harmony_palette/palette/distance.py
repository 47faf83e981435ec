import numpy as np

from ..color import as_color, rgb_to_lab

# Minimum CIE76 distance between any two colors of a palette
MIN_DISTANCE = 50


def is_too_similar(candidate, accepted, min_distance=MIN_DISTANCE):
    """Check whether a candidate is perceptually too close to accepted colors.

    Args:
        candidate: Color or hex string
        accepted: Sequence of Color or hex strings already in the palette
        min_distance: LAB distance below which two colors count as too similar

    Returns:
        bool: True if any accepted color is closer than min_distance
    """
    if not accepted:
        return False

    labs = rgb_to_lab([as_color(candidate).rgb] + [as_color(c).rgb for c in accepted])
    distances = np.linalg.norm(labs[1:] - labs[0], axis=1)
    return bool((distances < min_distance).any())
