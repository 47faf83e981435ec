from .palette import build_palette, generate_palette

__all__ = ["build_palette", "generate_palette"]
