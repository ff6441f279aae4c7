"""Signed distance field fonts: glyph metrics, measuring and the SDFF file format."""

from __future__ import annotations

import io
import os
import re
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union

from PIL import Image

Source = Union[bytes, bytearray, memoryview, str, os.PathLike, BinaryIO]
Target = Union[str, os.PathLike, BinaryIO]

_MAGIC = b"SDFF"
_VERSION = 2
_U16 = struct.Struct("<H")
_FONT_DATA = struct.Struct("<4f")
_GLYPH = struct.Struct("<H7f")

_METRIC_KEYS = {
    "x": "x1",
    "y": "y1",
    "width": "w",
    "height": "h",
    "xoffset": "dx",
    "yoffset": "dy",
    "xadvance": "d",
}


class FontError(Exception):
    """Base class for font errors."""

    default_message = "Font exception"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class FontInvalidSourceError(FontError):
    """A font could not be loaded from the given source."""

    default_message = "Font exception: could not load from the specified source"


class FontInvalidTargetError(FontError):
    """A font could not be written to the given target."""

    default_message = "Font exception: could not write to the specified target"


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its upper left and lower right corners."""

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    def width(self) -> float:
        return self.x2 - self.x1

    def height(self) -> float:
        return self.y2 - self.y1

    def upper_left(self) -> tuple[float, float]:
        return (self.x1, self.y1)

    def upper_right(self) -> tuple[float, float]:
        return (self.x2, self.y1)

    def lower_right(self) -> tuple[float, float]:
        return (self.x2, self.y2)

    def lower_left(self) -> tuple[float, float]:
        return (self.x1, self.y2)

    def include(self, other: Rect) -> Rect:
        """Smallest rectangle holding this one and both corners of other."""
        return Rect(
            min(self.x1, other.x1, other.x2),
            min(self.y1, other.y1, other.y2),
            max(self.x2, other.x1, other.x2),
            max(self.y2, other.y1, other.y2),
        )

    def scaled(self, factor: float) -> Rect:
        return Rect(self.x1 * factor, self.y1 * factor, self.x2 * factor, self.y2 * factor)


@dataclass(frozen=True)
class Metrics:
    """Metrics of one glyph: its place in the texture and how it is positioned."""

    x1: float = 0.0
    y1: float = 0.0
    w: float = 0.0
    h: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    d: float = 0.0

    @property
    def x2(self) -> float:
        return self.x1 + self.w

    @property
    def y2(self) -> float:
        return self.y1 + self.h


def _load_bytes(source: Source) -> bytes:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    try:
        if isinstance(source, (str, os.PathLike)):
            return Path(source).read_bytes()
        if hasattr(source, "read"):
            data = source.read()
            if isinstance(data, str):
                return data.encode("utf-8", errors="surrogateescape")
            return bytes(data)
    except OSError as exc:
        raise FontInvalidSourceError() from exc
    raise FontInvalidSourceError()


def _store_bytes(target: Target, data: bytes) -> None:
    try:
        if isinstance(target, (str, os.PathLike)):
            Path(target).write_bytes(data)
            return
        if hasattr(target, "write"):
            target.write(data)
            return
    except OSError as exc:
        raise FontInvalidTargetError() from exc
    raise FontInvalidTargetError()


def _open_image(data: bytes) -> Image.Image:
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except Exception as exc:
        raise FontInvalidSourceError() from exc
    return image


def _utf16_units(text: str) -> tuple[int, ...]:
    data = text.encode("utf-16-le", errors="surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise FontInvalidSourceError()
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def unpack(self, layout: struct.Struct) -> tuple:
        return layout.unpack(self.take(layout.size))

    def take_cstring(self) -> bytes:
        end = self._data.find(b"\0", self._pos)
        if end < 0:
            raise FontInvalidSourceError()
        chunk = self._data[self._pos:end]
        self._pos = end + 1
        return chunk

    def rest(self) -> bytes:
        return self._data[self._pos:]


class Font:
    """A signed distance field font: a glyph image plus per-glyph metrics."""

    def __init__(self) -> None:
        self._family = "Unknown"
        self._font_size = 12.0
        self._leading = 0.0
        self._ascent = 0.0
        self._descent = 0.0
        self._space_width = 0.0
        self._image: Image.Image | None = None
        self._texture_size: tuple[float, float] = (0.0, 0.0)
        self._metrics: dict[int, Metrics] = {}

    @property
    def family(self) -> str:
        return self._family

    @property
    def image(self) -> Image.Image | None:
        return self._image

    @property
    def texture_size(self) -> tuple[float, float]:
        return self._texture_size

    def create(self, png: Source, txt: Source) -> None:
        """Build the font from a glyph image and its text metrics file."""
        image = _open_image(_load_bytes(png))
        text = _load_bytes(txt).decode("utf-8", errors="surrogateescape")

        try:
            family, metrics = self._parse_metrics_file(text)
        except FontError:
            raise
        except (ValueError, IndexError) as exc:
            raise FontInvalidSourceError() from exc

        ascent = 0.0
        descent = 0.0
        for charcode in range(33, 127):
            glyph = metrics.get(charcode)
            if glyph is not None:
                ascent = max(ascent, glyph.dy)
                descent = max(descent, glyph.h - glyph.dy)

        self._family = family
        self._metrics = metrics
        self._ascent = ascent
        self._descent = descent
        self._leading = ascent + descent
        self._font_size = ascent + descent
        self._space_width = metrics[32].d if 32 in metrics else 0.0
        self._image = image
        self._texture_size = (float(image.width), float(image.height))

    @staticmethod
    def _parse_metrics_file(text: str) -> tuple[str, dict[int, Metrics]]:
        lines = re.split(r"[\n\r]+", text)
        if len(lines) < 2:
            raise FontInvalidSourceError()

        tokens = re.split(r"=+", lines[0])
        if len(tokens) < 2:
            raise FontInvalidSourceError()
        family = tokens[1].replace('"', "")

        tokens = re.split(r"=+", lines[1])
        if len(tokens) < 2:
            raise FontInvalidSourceError()
        count = int(tokens[1])
        if count < 1:
            raise FontInvalidSourceError()

        metrics: dict[int, Metrics] = {}
        charcode = 0
        for line in lines[2:count + 2] if len(lines) >= count + 2 else [lines[count + 1]]:
            values: dict[str, float] = {}
            for token in re.split(r" +", line):
                pair = re.split(r"=+", token)
                if len(pair) < 2:
                    continue
                key, value = pair[0], pair[1]
                if key == "id":
                    charcode = int(value) & 0xFFFFFFFF
                elif key in _METRIC_KEYS:
                    values[_METRIC_KEYS[key]] = float(value)
            metrics[charcode & 0xFFFF] = Metrics(**values)
        return family, metrics

    def read(self, source: Source) -> None:
        """Load the font from SDFF data."""
        reader = _Reader(_load_bytes(source))

        if reader.take(len(_MAGIC)) != _MAGIC:
            raise FontInvalidSourceError()
        (version,) = reader.unpack(_U16)

        family = self._family
        if version > 0x0001:
            family = reader.take_cstring().decode("utf-8", errors="surrogateescape")

        leading, ascent, descent, space_width = reader.unpack(_FONT_DATA)

        metrics: dict[int, Metrics] = {}
        (count,) = reader.unpack(_U16)
        for _ in range(count):
            charcode, x1, y1, w, h, dx, dy, d = reader.unpack(_GLYPH)
            metrics[charcode] = Metrics(x1=x1, y1=y1, w=w, h=h, dx=dx, dy=dy, d=d)

        image = _open_image(reader.rest())

        self._family = family
        self._leading = leading
        self._ascent = ascent
        self._descent = descent
        self._space_width = space_width
        self._font_size = ascent + descent
        self._metrics = metrics
        self._image = image
        self._texture_size = (float(image.width), float(image.height))

    def write(self, target: Target) -> None:
        """Write the font as SDFF data, keeping the red channel of its image."""
        if target is None:
            raise FontInvalidTargetError()
        if self._image is None:
            raise FontError("Font exception: font has no image to write")

        out = io.BytesIO()
        out.write(_MAGIC)
        out.write(_U16.pack(_VERSION))
        out.write(self._family.encode("utf-8", errors="surrogateescape") + b"\0")
        out.write(_FONT_DATA.pack(self._leading, self._ascent, self._descent, self._space_width))
        out.write(_U16.pack(len(self._metrics) & 0xFFFF))
        for charcode in sorted(self._metrics):
            glyph = self._metrics[charcode]
            out.write(
                _GLYPH.pack(charcode, glyph.x1, glyph.y1, glyph.w, glyph.h, glyph.dx, glyph.dy, glyph.d)
            )
        self._image.convert("RGB").getchannel("R").save(out, format="PNG")

        _store_bytes(target, out.getvalue())

    def _scale(self, font_size: float) -> float:
        return font_size / self._font_size

    def ascent(self, font_size: float = 12.0) -> float:
        return self._ascent * self._scale(font_size)

    def descent(self, font_size: float = 12.0) -> float:
        return self._descent * self._scale(font_size)

    def leading(self, font_size: float = 12.0) -> float:
        return self._leading * self._scale(font_size)

    def space_width(self, font_size: float = 12.0) -> float:
        return self._space_width * self._scale(font_size)

    def contains(self, charcode: int) -> bool:
        return charcode in self._metrics

    def metrics(self, charcode: int) -> Metrics:
        """Metrics of a glyph; all zero if the font lacks it."""
        return self._metrics.get(charcode, Metrics())

    def bounds(self, charcode: int, font_size: float = 12.0) -> Rect:
        glyph = self._metrics.get(charcode)
        if glyph is None:
            return Rect()
        return self.metrics_bounds(glyph, font_size)

    def metrics_bounds(self, metrics: Metrics, font_size: float = 12.0) -> Rect:
        """Glyph rectangle relative to the pen position on the baseline."""
        scale = self._scale(font_size)
        return Rect(
            metrics.dx * scale,
            -metrics.dy * scale,
            (metrics.dx + metrics.w) * scale,
            (metrics.h - metrics.dy) * scale,
        )

    def texcoords(self, charcode: int) -> Rect:
        glyph = self._metrics.get(charcode)
        if glyph is None:
            return Rect()
        return self.metrics_texcoords(glyph)

    def metrics_texcoords(self, metrics: Metrics) -> Rect:
        """Glyph rectangle in normalised texture coordinates."""
        width, height = self._texture_size
        return Rect(metrics.x1 / width, metrics.y1 / height, metrics.x2 / width, metrics.y2 / height)

    def advance(self, charcode: int, font_size: float = 12.0) -> float:
        glyph = self._metrics.get(charcode)
        if glyph is None:
            return 0.0
        return self.metrics_advance(glyph, font_size)

    def metrics_advance(self, metrics: Metrics, font_size: float = 12.0) -> float:
        return metrics.d * font_size / self._font_size

    def measure(self, text: str, font_size: float = 12.0) -> Rect:
        """Bounding rectangle of text set on one line from the origin."""
        offset = 0.0
        result = Rect()
        for charcode in _utf16_units(text):
            glyph = self._metrics.get(charcode)
            if glyph is None:
                continue
            result = result.include(
                Rect(offset + glyph.dx, -glyph.dy, offset + glyph.dx + glyph.w, glyph.h - glyph.dy)
            )
            offset += glyph.d
        return result.scaled(self._scale(font_size))

    def measure_width(self, text: str, font_size: float = 12.0, precise: bool = True) -> float:
        """Width of text on one line.

        A precise measurement counts the last glyph by its drawn width
        rather than by its advance.
        """
        offset = 0.0
        adjust = 0.0
        for charcode in _utf16_units(text):
            glyph = self._metrics.get(charcode)
            if glyph is None:
                continue
            offset += glyph.d
            if precise:
                adjust = glyph.dx + glyph.w - glyph.d
        return (offset + adjust) * self._scale(font_size)