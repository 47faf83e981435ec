from .html_preview import create_html_preview
from .json_export import export_json
from .report import print_palette
from .swatch import render_swatch

__all__ = ["create_html_preview", "export_json", "print_palette", "render_swatch"]
