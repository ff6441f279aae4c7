"""Signed distance field fonts: SDFF files, text measurement and glyph mesh layout."""

__version__ = "0.1.0"

__all__ = ["vector", "font", "font_store", "text", "text_box", "text_labels"]