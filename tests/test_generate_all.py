import json

import generate_all


def test_generate_all(tmp_path, capsys):
    written = generate_all.generate_all(tmp_path, count=3, seed=0)

    assert [p.name for p in written] == [
        "complementary",
        "monochromatic",
        "analogous",
        "triadic",
        "gamut-complementary-split",
        "gamut-triadic-split",
        "gamut-y-shape-split",
        "gamut-analogous-slice",
    ]
    for palette_dir in written:
        data = json.loads((palette_dir / "palette.json").read_text())
        assert len(data["colors"]) == 3
        assert (palette_dir / "palette_preview.html").exists()
        assert (palette_dir / "palette.png").exists()

    data = json.loads((tmp_path / "gamut-y-shape-split" / "palette.json").read_text())
    assert data["_scheme_name"] == "Gamut Mask: Y-Shape Split"
    assert "Generating: Gamut Mask: Analogous Slice" in capsys.readouterr().out
