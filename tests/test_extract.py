import numpy as np
import pytest
from PIL import Image

from harmony_palette.palette.extract import dominant_hue, extract_colors


def _two_tone_image(path, main, accent):
    """60x40 image, left three quarters in main, the rest in accent."""
    pixels = np.zeros((40, 60, 3), dtype=np.uint8)
    pixels[:, :45] = main
    pixels[:, 45:] = accent
    Image.fromarray(pixels).save(path)
    return path


def test_extract_colors_sorted_by_coverage(tmp_path):
    path = _two_tone_image(tmp_path / "blue.png", (40, 40, 200), (200, 40, 40))
    colors = extract_colors(path, n_colors=2)

    assert [c.rgb for c, _ in colors] == [(40, 40, 200), (200, 40, 40)]
    assert [count for _, count in colors] == [1800, 600]


def test_extract_colors_caps_clusters_at_distinct_pixels(tmp_path):
    path = _two_tone_image(tmp_path / "two.png", (40, 40, 200), (200, 40, 40))
    assert len(extract_colors(path, n_colors=8)) == 2


def test_dominant_hue(tmp_path):
    path = _two_tone_image(tmp_path / "blue.png", (40, 40, 200), (200, 40, 40))
    assert dominant_hue(path) == pytest.approx(240)


def test_dominant_hue_skips_grey(tmp_path):
    path = _two_tone_image(tmp_path / "grey.png", (128, 128, 128), (200, 40, 40))
    assert dominant_hue(path) == pytest.approx(0, abs=1e-6)
