#!/usr/bin/env python3
"""
Generate one palette per scheme and per gamut mask.
Writes JSON, HTML and PNG previews into out/<scheme>/ folders.
"""

import argparse
import random
import warnings
from pathlib import Path

from harmony_palette.export import create_html_preview, export_json, render_swatch
from harmony_palette.palette import (
    GAMUT_MASKS,
    SCHEMES,
    PaletteShortfallWarning,
    build_palette,
    scheme_display_name,
)


def generate_all(out_dir, count=5, seed=None):
    """Render every scheme, and the gamutMask scheme once per mask.

    Args:
        out_dir: Root output directory
        count: Colors per palette
        seed: Optional seed shared by the whole run

    Returns:
        list: Directories written, in generation order
    """
    out_dir = Path(out_dir)
    rand = random.Random(seed).random if seed is not None else random.random

    jobs = [(scheme, 0, scheme) for scheme in SCHEMES if scheme != "gamutMask"]
    for i, mask in enumerate(GAMUT_MASKS):
        slug = "gamut-" + mask.name.lower().replace(" ", "-")
        jobs.append(("gamutMask", i, slug))

    written = []
    for scheme, mask_index, slug in jobs:
        name = scheme_display_name(scheme, mask_index)
        print(f"{'=' * 60}")
        print(f"Generating: {name}")
        print(f"{'=' * 60}")

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", PaletteShortfallWarning)
            result = build_palette(count, scheme, mask_index=mask_index, rand=rand)
        for warning in caught:
            print(f"Warning: {warning.message}")

        palette_dir = out_dir / slug
        palette_dir.mkdir(parents=True, exist_ok=True)

        export_json(result, palette_dir / "palette.json")
        create_html_preview(result.colors, palette_dir / "palette_preview.html", badge=name)
        if result.colors:
            render_swatch(result.colors, palette_dir / "palette.png")

        print("  " + "  ".join(result.hexes))
        print()
        written.append(palette_dir)

    return written


def main():
    parser = argparse.ArgumentParser(
        description="Generate one palette per scheme and per gamut mask"
    )
    parser.add_argument(
        "--out",
        default=str(Path(__file__).parent / "out"),
        help="Output directory (default: out/ next to this script)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=5,
        help="Colors per palette (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible output",
    )
    args = parser.parse_args()

    if args.count < 0:
        parser.error("--count must be >= 0")

    written = generate_all(args.out, count=args.count, seed=args.seed)

    print(f"{'=' * 60}")
    print(f"Done! {len(written)} palettes written to:")
    print(f"  {args.out}")
    print(f"{'=' * 60}")


if __name__ == "__main__":
    main()
