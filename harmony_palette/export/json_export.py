import json

from ..palette.schemes import scheme_display_name


def export_json(result, filepath, source_file=None):
    """Export a generated palette as JSON with generation metadata.

    Args:
        result: PaletteResult from build_palette
        filepath: Output file path
        source_file: Source image filename for metadata, if the base hue was
            seeded from an image
    """
    data = {"colors": result.hexes}

    data["_scheme"] = result.scheme
    data["_scheme_name"] = scheme_display_name(result.scheme, result.mask_index)
    data["_base_hue"] = round(result.base_hue, 2) if result.base_hue is not None else None
    data["_mask_index"] = result.mask_index
    data["_fallback_count"] = result.fallback_count
    data["_shortfall"] = result.shortfall

    if source_file:
        data["_source"] = source_file

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
