HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{title}</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: 'SF Mono', 'Fira Code', monospace;
            background: {page_bg};
            color: {page_fg};
            padding: 40px;
            min-height: 100vh;
        }
        h1 { margin-bottom: 10px; font-weight: 400; }
        .scheme-badge {
            display: inline-block;
            padding: 4px 12px;
            border-radius: 4px;
            font-size: 12px;
            margin-bottom: 30px;
            background: {badge_bg};
        }
        .cards {
            display: flex;
            flex-wrap: wrap;
            gap: 24px;
            justify-content: center;
        }
        .color-card {
            width: {card_width}px;
            height: 60vh;
            border-radius: 8px;
            position: relative;
            box-shadow: 0 10px 25px rgba(0, 0, 0, 0.25);
        }
        .color-hex {
            position: absolute;
            bottom: 0;
            left: 0;
            right: 0;
            padding: 12px;
            text-align: center;
            font-size: 14px;
            letter-spacing: 2px;
            text-transform: uppercase;
        }
    </style>
</head>
<body>
    <h1>{title}</h1>
    <div class="scheme-badge">{badge}</div>
    <div class="cards">
        {cards}
    </div>
</body>
</html>"""


def make_card(color):
    text_color = "#ffffff" if color.luminance < 0.5 else "#000000"
    return f"""<div class="color-card" style="background: {color.hex}">
            <div class="color-hex" style="color: {text_color}">{color.hex}</div>
        </div>"""


def create_html_preview(colors, output_path, title="Color Flash Cards", badge="", dark=True, card_width=400):
    """Create an HTML page showing each color as a card.

    Args:
        colors: Sequence of Color objects
        output_path: Output file path
        title: Page heading
        badge: Text of the badge under the heading (scheme name)
        dark: Dark or light page background
        card_width: Card width in pixels
    """
    replacements = {
        "{title}": title,
        "{badge}": badge,
        "{page_bg}": "#111827" if dark else "#f9fafb",
        "{page_fg}": "#e5e7eb" if dark else "#1f2937",
        "{badge_bg}": "#1f2937" if dark else "#e5e7eb",
        "{card_width}": str(card_width),
    }

    html = HTML_TEMPLATE
    for old, new in replacements.items():
        html = html.replace(old, new)

    html = html.replace("{cards}", "\n        ".join(make_card(c) for c in colors))

    with open(output_path, "w") as f:
        f.write(html)
