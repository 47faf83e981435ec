from harmony_palette.color import create_color, lab_distance
from harmony_palette.palette.distance import MIN_DISTANCE, is_too_similar


def test_threshold():
    assert MIN_DISTANCE == 50


def test_empty_accepted_is_never_too_similar():
    assert not is_too_similar("#ff0000", [])


def test_identical_color_is_too_similar():
    assert is_too_similar("#ff0000", ["#ff0000"])


def test_close_and_far_colors():
    assert is_too_similar("#ff0000", ["#ee1111"])
    assert not is_too_similar("#ff0000", ["#0000ff"])
    assert not is_too_similar("#000000", ["#ffffff"])


def test_any_close_color_rejects():
    assert is_too_similar("#ff0000", ["#0000ff", "#00ff00", "#f01010"])


def test_accepts_color_tuples_and_hex():
    red = create_color(255, 0, 0)
    assert is_too_similar(red, ["#FF0000"])
    assert is_too_similar("#ff0000", [red])


def test_boundary_distance_is_not_too_similar():
    c1, c2 = "#336699", "#6699cc"
    d = lab_distance(c1, c2)
    assert not is_too_similar(c1, [c2], min_distance=d)
    assert is_too_similar(c1, [c2], min_distance=d + 1e-9)


def test_threshold_matches_lab_distance():
    pairs = [("#336699", "#6699cc"), ("#ff0000", "#00ff00"), ("#808080", "#a0a0a0")]
    for c1, c2 in pairs:
        assert is_too_similar(c1, [c2]) == (lab_distance(c1, c2) < 50)
