from PIL import Image, ImageDraw

CARD_WIDTH = 400
CARD_HEIGHT = 600
LABEL_HEIGHT = 40


def render_swatch(colors, output_path, card_width=CARD_WIDTH, card_height=CARD_HEIGHT):
    """Render colors as full-height cards side by side, labeled with their hex code.

    Args:
        colors: Non-empty sequence of Color objects
        output_path: Path of the image to write (format from the extension)
        card_width: Width of each card in pixels
        card_height: Height of each card in pixels
    """
    if not colors:
        raise ValueError("Cannot render an empty palette")

    img = Image.new("RGB", (card_width * len(colors), card_height))
    draw = ImageDraw.Draw(img)

    for i, color in enumerate(colors):
        x = i * card_width
        draw.rectangle([x, 0, x + card_width - 1, card_height - 1], fill=color.rgb)

        # Label strip
        label_top = card_height - LABEL_HEIGHT
        draw.rectangle(
            [x, label_top, x + card_width - 1, card_height - 1], fill=(0, 0, 0)
        )
        text = color.hex.upper()
        bbox = draw.textbbox((0, 0), text)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        draw.text(
            (x + (card_width - text_width) // 2, label_top + (LABEL_HEIGHT - text_height) // 2),
            text,
            fill=(255, 255, 255),
        )

    img.save(output_path)
