"""Lay out text with a signed distance field font and build a textured quad mesh."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto

from .font import Font, Rect
from .vector import Vec3

_WHITESPACE = frozenset(
    (
        0x0009, 0x000A, 0x000B, 0x000C, 0x000D,
        0x0020, 0x0085, 0x00A0, 0x1680, 0x180E,
        0x2000, 0x2001, 0x2002, 0x2003, 0x2004,
        0x2005, 0x2006, 0x2007, 0x2008, 0x2009,
        0x200A, 0x2028, 0x2029, 0x202F, 0x205F, 0x3000,
    )
)

_MANDATORY_BREAKS = frozenset("\n\x0b\x0c\x85\u2028\u2029")
# Spaces after which a line may be broken (no-break spaces are left out).
_BREAK_SPACES = frozenset(
    " \t\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2008\u2009\u200a\u205f\u3000\u200b"
)
_HYPHENS = frozenset("-\u2010\u2012\u2013")


class Alignment(Enum):
    """Horizontal placement of each line."""

    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


class Boundary(Enum):
    """Where text may be broken when it is wrapped."""

    LINE = auto()
    WORD = auto()


@dataclass(frozen=True)
class Mesh:
    """Triangles of textured glyph quads: four vertices and six indices per glyph."""

    vertices: tuple[Vec3, ...]
    texcoords: tuple[tuple[float, float], ...]
    indices: tuple[int, ...]


def is_whitespace(ch: str | int) -> bool:
    """True for Unicode whitespace characters, given as a character or a code."""
    code = ord(ch) if isinstance(ch, str) else ch
    return code in _WHITESPACE


def _is_break_context(ch: str) -> bool:
    return ch in _BREAK_SPACES or ch in _MANDATORY_BREAKS or ch == "\r"


def find_breaks(text: str) -> tuple[list[int], list[int]]:
    """Line break opportunities in text.

    Returns (must, allow): indices of the characters after which a line must
    or may be broken. Every mandatory break is also an allowed one, and the
    last character always ends with a mandatory break.
    """
    must: list[int] = []
    allow: list[int] = []
    last = len(text) - 1
    for i, ch in enumerate(text):
        if i == last:
            must.append(i)
            allow.append(i)
            continue
        following = text[i + 1]
        if ch in _MANDATORY_BREAKS or (ch == "\r" and following != "\n"):
            must.append(i)
            allow.append(i)
        elif ch in _BREAK_SPACES:
            if not _is_break_context(following):
                allow.append(i)
        elif ch in _HYPHENS:
            preceding = text[i - 1] if i > 0 else " "
            if (
                not _is_break_context(following)
                and not following.isdigit()
                and not _is_break_context(preceding)
            ):
                allow.append(i)
    return must, allow


class Text:
    """Text set in a font, wrapped into lines and turned into a glyph mesh.

    The base class places no limits on width or height; subclasses override
    width_at and max_height to shape the text area.
    """

    def __init__(self) -> None:
        self._invalid = True
        self._bounds_invalid = True
        self._bounds = Rect()
        self._alignment = Alignment.LEFT
        self._boundary = Boundary.WORD
        self._text = ""
        self._mesh: Mesh | None = None
        self._font: Font | None = None
        self._font_size = 14.0
        self._line_space = 1.0
        self._must: list[int] = []
        self._allow: list[int] = []
        self._vertices: list[Vec3] = []
        self._indices: list[int] = []
        self._texcoords: list[tuple[float, float]] = []

    @property
    def font(self) -> Font | None:
        return self._font

    @font.setter
    def font(self, font: Font | None) -> None:
        self._font = font
        self._invalid = True

    @property
    def font_size(self) -> float:
        return self._font_size

    @font_size.setter
    def font_size(self, size: float) -> None:
        self._font_size = size
        self._invalid = True

    @property
    def line_space(self) -> float:
        return self._line_space

    @line_space.setter
    def line_space(self, value: float) -> None:
        self._line_space = value
        self._invalid = True

    @property
    def alignment(self) -> Alignment:
        return self._alignment

    @alignment.setter
    def alignment(self, alignment: Alignment) -> None:
        self._alignment = alignment
        self._invalid = True

    @property
    def boundary(self) -> Boundary:
        return self._boundary

    @boundary.setter
    def boundary(self, boundary: Boundary) -> None:
        self._boundary = boundary
        self._invalid = True

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text
        self._must = []
        self._allow = []
        self._invalid = True

    def font_family(self) -> str:
        return self._font.family if self._font is not None else ""

    def leading(self) -> float:
        """Distance between baselines, rounded to whole units."""
        if self._font is None:
            return 0.0
        return float(math.floor(self._font.leading(self._font_size) * self._line_space + 0.5))

    def width_at(self, y: float) -> float:
        """Maximum line width at vertical position y; 0 means unlimited."""
        return 0.0

    def max_height(self) -> float:
        """Maximum height of the text; 0 means unlimited."""
        return 0.0

    def _next_line(self, y: float) -> tuple[float, bool]:
        y += self.leading()
        height = self.max_height()
        return y, height == 0.0 or y < height

    def clear_mesh(self) -> None:
        """Drop the mesh and its buffers."""
        self._mesh = None
        self._vertices.clear()
        self._indices.clear()
        self._texcoords.clear()
        self._invalid = True

    def build_mesh(self) -> Mesh | None:
        """The glyph mesh, rebuilt if anything changed; None if there is nothing to show."""
        if self._invalid:
            self.clear_mesh()
            self._render_mesh()
            self._create_mesh()
        return self._mesh

    def _render_mesh(self) -> None:
        if not self._invalid or self._font is None or not self._text:
            return

        font = self._font
        size = self._font_size
        text = self._text
        height = self.max_height() - font.descent(size) if self.max_height() > 0.0 else 0.0

        x = 0.0
        y = float(math.floor(font.ascent(size) + 0.5))

        if not self._must or not self._allow:
            self._must, self._allow = find_breaks(text)
        must, allow = self._must, self._allow

        index = 0
        trimmed = ""
        width = 0.0
        mi = 0
        ai = 0
        while ai < len(allow) and mi < len(must) and (height == 0.0 or y <= height):
            line_width = self.width_at(y)

            if self._boundary is Boundary.LINE:
                trimmed = text[index:must[mi] + 1].strip()
                width = font.measure_width(trimmed, size, True)
                index = must[mi]
                mi += 1
            else:
                chunk = text[index:allow[ai] + 1]
                width = font.measure_width(chunk, size, False)

                while line_width > 0.0 and width < line_width and allow[ai] != must[mi]:
                    ai += 1
                    if ai == len(allow):
                        break
                    chunk = text[allow[ai - 1] + 1:allow[ai] + 1]
                    width += font.measure_width(chunk, size, False)

                if ai == 0 or allow[ai - 1] <= index:
                    pass  # not a single chunk fits: set what there is
                elif line_width > 0.0 and width > line_width:
                    ai -= 1

                if ai != len(allow):
                    trimmed = text[index:allow[ai] + 1].strip()
                    width = font.measure_width(trimmed, size)
                    if allow[ai] == must[mi]:
                        mi += 1
                    index = allow[ai]
                    ai += 1

            if self._alignment is Alignment.CENTER:
                x = 0.5 * (line_width - width)
            elif self._alignment is Alignment.RIGHT:
                x = line_width - width

            self._render_string(trimmed, x, y)

            x = 0.0
            y, room_left = self._next_line(y)
            if not room_left:
                break

    def _render_string(self, text: str, x: float, y: float, stretch: float = 1.0) -> float:
        """Add quads for text set from (x, y) on one line; returns the pen's new x."""
        font = self._font
        if font is None:
            return x
        for ch in text:
            code = ord(ch)
            if not font.contains(code):
                continue
            glyph = font.metrics(code)

            if not is_whitespace(code):
                base = len(self._vertices)
                quad = font.metrics_bounds(glyph, self._font_size)
                for cx, cy in (quad.upper_left(), quad.upper_right(), quad.lower_right(), quad.lower_left()):
                    self._vertices.append(Vec3(x + cx, y + cy, 0.0))
                tex = font.metrics_texcoords(glyph)
                self._texcoords.extend(
                    (tex.upper_left(), tex.upper_right(), tex.lower_right(), tex.lower_left())
                )
                self._indices.extend(
                    (base + 0, base + 3, base + 1, base + 1, base + 3, base + 2)
                )

            advance = font.metrics_advance(glyph, self._font_size)
            x += stretch * advance if code == 32 else advance

        self._bounds_invalid = True
        return x

    def _create_mesh(self) -> None:
        if not self._vertices or not self._indices:
            return
        self._mesh = Mesh(tuple(self._vertices), tuple(self._texcoords), tuple(self._indices))
        self._invalid = False

    def bounds(self) -> Rect:
        """Rectangle around the vertices of the last built mesh and the origin."""
        if self._bounds_invalid:
            xs = [0.0, *(v.x for v in self._vertices)]
            ys = [0.0, *(v.y for v in self._vertices)]
            self._bounds = Rect(min(xs), min(ys), max(xs), max(ys))
            self._bounds_invalid = False
        return self._bounds