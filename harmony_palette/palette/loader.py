import json

from ..color import hex_to_rgb, create_color


def load_palette_from_json(json_path):
    """Load a palette exported by export_json, converting hex strings to Color objects.

    Args:
        json_path: Path to palette JSON file

    Returns:
        tuple: (list of Color objects, metadata dict with the leading "_" stripped)
    """
    with open(json_path) as f:
        data = json.load(f)

    colors = []
    metadata = {}

    for key, value in data.items():
        # Metadata keys
        if key.startswith("_"):
            metadata[key[1:]] = value
            continue

        if key == "colors":
            for hex_color in value:
                colors.append(create_color(*hex_to_rgb(hex_color)))

    return colors, metadata
