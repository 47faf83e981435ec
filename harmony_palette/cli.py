import argparse
import os
import random
import time
import warnings

from .palette import (
    GAMUT_MASKS,
    SCHEMES,
    PaletteResult,
    PaletteShortfallWarning,
    build_palette,
    dominant_hue,
    load_palette_from_json,
    scheme_display_name,
)
from .export import create_html_preview, export_json, print_palette, render_swatch


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate palettes of distinct colors from a color-harmony scheme"
    )
    parser.add_argument(
        "--count", "-n",
        type=int,
        default=3,
        help="Number of colors (default: 3)",
    )
    parser.add_argument(
        "--scheme", "-s",
        choices=SCHEMES,
        default="complementary",
        help="Color-harmony scheme (default: complementary)",
    )
    parser.add_argument(
        "--mask", "-m",
        type=int,
        default=0,
        help="Gamut mask index for the gamutMask scheme, wraps around (see --list-masks)",
    )
    parser.add_argument(
        "--list-masks",
        action="store_true",
        help="List the available gamut masks and exit",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible palettes",
    )
    parser.add_argument(
        "--image",
        metavar="PATH",
        default=None,
        help="Use the dominant hue of an image as the base hue",
    )
    parser.add_argument(
        "--from-palette",
        metavar="JSON",
        help="Load a previously exported palette JSON instead of generating one",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Write JSON, HTML and PNG previews to this directory",
    )
    parser.add_argument(
        "--name",
        default="palette",
        help="File name stem for exported files (default: palette)",
    )
    parser.add_argument(
        "--light",
        action="store_true",
        help="Light page background in the HTML preview",
    )
    parser.add_argument(
        "--refresh",
        type=float,
        metavar="SECONDS",
        default=None,
        help="Generate a new palette every SECONDS until interrupted",
    )
    parser.add_argument(
        "--cycles",
        type=int,
        default=None,
        help="With --refresh, stop after this many palettes",
    )

    args = parser.parse_args(argv)

    if args.list_masks:
        for i, mask in enumerate(GAMUT_MASKS):
            print(f"  {i}  {mask.name}")
        return

    # Validate arguments
    if args.count < 0:
        parser.error("--count must be >= 0")
    if args.refresh is not None and args.refresh <= 0:
        parser.error("--refresh must be positive")
    if args.cycles is not None and args.cycles < 1:
        parser.error("--cycles must be >= 1")
    if args.cycles is not None and args.refresh is None:
        parser.error("--cycles requires --refresh")

    if args.from_palette:
        if args.image:
            parser.error("Cannot use both --image and --from-palette")
        if args.refresh is not None:
            parser.error("Cannot use --refresh with --from-palette")
        _run_from_palette(args)
    elif args.refresh is not None:
        _run_refresh(args)
    else:
        _run_generate(args, _make_rand(args.seed))


def _make_rand(seed):
    if seed is None:
        return random.random
    return random.Random(seed).random


def _export(result, args, source_file=None):
    """Write the JSON, HTML and PNG previews of a palette, returning the paths."""
    output_dir = args.output
    os.makedirs(output_dir, exist_ok=True)

    json_path = os.path.join(output_dir, f"{args.name}.json")
    html_path = os.path.join(output_dir, f"{args.name}_preview.html")
    png_path = os.path.join(output_dir, f"{args.name}.png")

    export_json(result, json_path, source_file=source_file)
    create_html_preview(
        result.colors,
        html_path,
        badge=scheme_display_name(result.scheme, result.mask_index),
        dark=not args.light,
    )
    paths = [json_path, html_path]

    # Nothing to draw for an empty palette
    if result.colors:
        render_swatch(result.colors, png_path)
        paths.append(png_path)

    return paths


def _print_exported(paths):
    print("\n" + "=" * 60)
    print("Exported:")
    for path in paths:
        print(f"  - {path}")
    print("=" * 60)


def _generate(args, rand, base_hue):
    with warnings.catch_warnings():
        # print_palette reports the shortfall itself
        warnings.simplefilter("ignore", PaletteShortfallWarning)
        return build_palette(
            args.count, args.scheme, mask_index=args.mask, rand=rand, base_hue=base_hue
        )


def _seed_hue(args):
    if not args.image:
        return None, None
    print(f"Analyzing: {args.image}")
    hue = dominant_hue(args.image)
    print(f"Dominant hue: {hue:.1f}")
    return hue, os.path.basename(args.image)


def _run_generate(args, rand):
    """Generate one palette, print it and optionally export it."""
    base_hue, source_file = _seed_hue(args)
    result = _generate(args, rand, base_hue)
    print_palette(result)

    if args.output:
        _print_exported(_export(result, args, source_file=source_file))

    return result


def _run_refresh(args):
    """Regenerate a palette every --refresh seconds, like a flash-card timer."""
    rand = _make_rand(args.seed)
    base_hue, source_file = _seed_hue(args)
    cycle = 0

    try:
        while True:
            result = _generate(args, rand, base_hue)
            print_palette(result)
            if args.output:
                _export(result, args, source_file=source_file)
            cycle += 1

            if args.cycles is not None and cycle >= args.cycles:
                break

            remaining = args.refresh
            while remaining > 0:
                print(f"Next palette in {remaining:.0f}s", end="\r", flush=True)
                step = min(1, remaining)
                time.sleep(step)
                remaining -= step
    except KeyboardInterrupt:
        print("\nStopped.")

    print(f"\nGenerated {cycle} palette(s).")


def _run_from_palette(args):
    """Print and re-render a palette from an exported JSON file."""
    palette_path = args.from_palette
    print(f"Loading palette: {palette_path}")

    colors, metadata = load_palette_from_json(palette_path)
    result = PaletteResult(
        colors,
        metadata.get("base_hue"),
        metadata.get("scheme", args.scheme),
        metadata.get("mask_index", args.mask),
        metadata.get("fallback_count", 0),
        metadata.get("shortfall", 0),
    )
    print_palette(result)

    if args.output:
        _print_exported(_export(result, args, source_file=metadata.get("source")))


if __name__ == "__main__":
    main()
