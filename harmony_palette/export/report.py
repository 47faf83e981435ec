from ..palette.schemes import scheme_display_name


def print_palette(result):
    """Print palette info"""
    print("\n" + "=" * 60)
    print(f"COLOR PALETTE ({scheme_display_name(result.scheme, result.mask_index).upper()})")
    print("=" * 60)

    if result.base_hue is not None:
        print(f"Base hue: {result.base_hue:.1f}")

    scheme_count = len(result.colors) - result.fallback_count
    for i, c in enumerate(result.colors):
        h, s, v = c.hsv
        marker = "  (fallback)" if i >= scheme_count else ""
        print(f"  {i + 1:2}  {c.hex}  hsv({h:5.1f}, {s:.2f}, {v:.2f}){marker}")

    if result.fallback_count:
        print(
            f"\nNote: {result.fallback_count} color(s) came from the random fallback "
            "and do not follow the scheme."
        )
    if result.shortfall:
        print(
            f"Warning: could not guarantee distinctness for {result.shortfall} "
            f"of {len(result.colors)} colors."
        )
