import json

import pytest
from PIL import Image

from harmony_palette.export import (
    create_html_preview,
    export_json,
    print_palette,
    render_swatch,
)
from harmony_palette.palette import build_palette, load_palette_from_json


@pytest.fixture
def triadic(seq_rand):
    return build_palette(3, "triadic", rand=seq_rand(0.5), base_hue=12.3456)


def test_export_json(tmp_path, triadic):
    path = tmp_path / "palette.json"
    export_json(triadic, path, source_file="wallpaper.png")

    data = json.loads(path.read_text())
    assert data["colors"] == triadic.hexes
    assert data["_scheme"] == "triadic"
    assert data["_scheme_name"] == "Triadic"
    assert data["_base_hue"] == 12.35
    assert data["_fallback_count"] == 0
    assert data["_source"] == "wallpaper.png"


def test_load_exported_palette(tmp_path, triadic):
    path = tmp_path / "palette.json"
    export_json(triadic, path)

    colors, metadata = load_palette_from_json(path)
    assert [c.hex for c in colors] == triadic.hexes
    assert metadata["scheme"] == "triadic"
    assert metadata["mask_index"] == 0
    assert "source" not in metadata


def test_load_rejects_bad_hex(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"colors": ["#ff0000", "red"]}))
    with pytest.raises(ValueError, match="red"):
        load_palette_from_json(path)


def test_html_preview(tmp_path, triadic):
    path = tmp_path / "preview.html"
    create_html_preview(triadic.colors, path, badge="Gamut Mask: Analogous Slice")

    html = path.read_text()
    for hex_color in triadic.hexes:
        assert f"background: {hex_color}" in html
    assert "Gamut Mask: Analogous Slice" in html
    assert "#111827" in html
    assert "{cards}" not in html


def test_html_preview_light(tmp_path, triadic):
    path = tmp_path / "preview.html"
    create_html_preview(triadic.colors, path, dark=False)
    assert "#f9fafb" in path.read_text()


def test_render_swatch(tmp_path, triadic):
    path = tmp_path / "palette.png"
    render_swatch(triadic.colors, path, card_width=50, card_height=80)

    with Image.open(path) as img:
        assert img.size == (150, 80)
        assert img.getpixel((25, 10)) == triadic.colors[0].rgb
        assert img.getpixel((125, 10)) == triadic.colors[2].rgb


def test_render_swatch_rejects_empty(tmp_path):
    with pytest.raises(ValueError):
        render_swatch([], tmp_path / "empty.png")


def test_print_palette(capsys, triadic):
    print_palette(triadic)
    out = capsys.readouterr().out
    assert "COLOR PALETTE (TRIADIC)" in out
    assert "Base hue: 12.3" in out
    for hex_color in triadic.hexes:
        assert hex_color in out
    assert "fallback" not in out


def test_print_palette_reports_fallback(capsys, seq_rand):
    with pytest.warns(UserWarning):
        result = build_palette(3, "complementary", rand=seq_rand(0.5))
    print_palette(result)
    out = capsys.readouterr().out
    assert "(fallback)" in out
    assert "2 color(s) came from the random fallback" in out
    assert "could not guarantee distinctness for 1 of 3 colors" in out
