"""A registry of loaded fonts, keyed by family name."""

from __future__ import annotations

import logging

from .font import Font, FontError, Source

logger = logging.getLogger(__name__)


class FontStore:
    """Holds fonts by family; the first font of a family wins."""

    def __init__(self) -> None:
        self._fonts: dict[str, Font] = {}

    def has_font(self, family: str) -> bool:
        return family in self._fonts

    def get_font(self, family: str) -> Font | None:
        return self._fonts.get(family)

    def add_font(self, font: Font | None) -> bool:
        """Register a font; False if it is missing or its family is taken."""
        if font is None:
            return False
        if self.has_font(font.family):
            return False
        self._fonts[font.family] = font
        return True

    def list_fonts(self) -> list[str]:
        """All known families in sorted order."""
        return sorted(self._fonts)

    def load_font(self, source: Source) -> Font | None:
        """Read an SDFF font and register it; None if it cannot be read."""
        try:
            font = Font()
            font.read(source)
        except FontError as exc:
            logger.error("Error loading font: %s", exc)
            return None
        self.add_font(font)
        return font


_store = FontStore()


def fonts() -> FontStore:
    """The shared font store."""
    return _store