# sdftext

Signed distance field (SDF) fonts for Python. The package loads and saves
compact SDFF font files, measures strings, and lays text out as glyph quads:
vertices, texture coordinates and triangle indices that a renderer can use
as they are.

## Installation

```
pip install sdftext
```

Pillow is the only dependency. It is used to read and write the glyph atlas
image.

## Modules

- `sdftext.vector`: `Vec3`, an immutable 3D vector. It supports `+`, `-`,
  unary `-`, `*` and `/` with a vector or a number, and component-wise `<=`
  and `>=`. Its methods are `equals` (with a tolerance for rounding), `length`,
  `length_sq`, `dot`, `cross`, `distance_from`, `distance_from_sq`,
  `is_between_points`, `normalized`, `with_length`, `inverted`, `rotated_xz`,
  `rotated_xy`, `rotated_yz` (rotation by degrees about a centre),
  `interpolated`, `horizontal_angle` and `as_4_values`.
- `sdftext.font`:
  - `Font` holds glyph metrics and an atlas image. `Font.create(png, txt)`
    builds a font from an SDF atlas image and its text metrics file, which
    starts with `info face=...` and `chars count=...` lines and then has one
    line per glyph. `Font.read(source)` loads a binary SDFF file, and
    `Font.write(target)` saves one. Sources can be bytes, a path or a binary
    file object. Targets can be a path or a writable file object.
  - Metric queries: `ascent`, `descent`, `leading`, `space_width`, `contains`,
    `metrics`, `bounds`, `texcoords` and `advance`, plus the `metrics_*`
    variants that take a `Metrics` value directly. `measure` returns the
    bounding `Rect` of a string and `measure_width` returns its width. All
    sizes are scaled to the requested font size, which defaults to 12.
  - `Rect` and `Metrics` are small frozen dataclasses.
  - Errors: unreadable or malformed input raises `FontInvalidSourceError`.
    Writing to a `None` target raises `FontInvalidTargetError`. Writing a font
    that has no image raises `FontError`. Both of the other errors derive from
    `FontError`.
- `sdftext.font_store`: `FontStore` keeps fonts by family name. If two fonts
  have the same family, the first one added is kept. Its methods are
  `has_font`, `get_font`, `add_font`, `list_fonts` (sorted) and `load_font`.
  `load_font` logs a failure and returns `None` instead of raising. `fonts()`
  returns a shared store.
- `sdftext.text`:
  - `Text` lays text out line by line. You set its properties `font`,
    `font_size` (default 14), `line_space`, `alignment` (`Alignment.LEFT`,
    `CENTER`, `RIGHT`) and `boundary` (`Boundary.LINE` for whole paragraphs,
    `Boundary.WORD` for word wrapping), and give it text with `set_text`.
  - `build_mesh()` returns a `Mesh`, or `None` when there is nothing to show.
    The mesh is rebuilt only after something has changed. `bounds()` returns
    the rectangle around the mesh vertices and the origin.
  - `find_breaks(text)` returns the positions after which a line must break
    and after which it may break: newlines, spaces and hyphens.
  - `is_whitespace(ch)` tests a character or a code point.
- `sdftext.text_box`: `TextBox(width, height)` wraps text to the box width and
  stops adding lines at the box height. A size of 0 leaves that direction
  unlimited. `size` can be changed after creation. `outline(offset)` returns
  the box as a `Rect`.
- `sdftext.text_labels`: `TextLabels` holds many short labels, each added with
  `add_label(position, text)` at a `Vec3` position. Every label is laid out
  from the origin with a line width of 1000. All labels go into one mesh.
  `offsets` gives, for each vertex, the position of the label it belongs to.
  The labels can be counted with `len()` and iterated, and `clear()` removes
  them all.

## Example

```python
from sdftext.font_store import fonts
from sdftext.text import Alignment, Boundary
from sdftext.text_box import TextBox

with open("Walter Turncoat Regular.sdff", "rb") as source:
    font = fonts().load_font(source)

box = TextBox(400, 500)
box.font = font
box.font_size = 14.0
box.boundary = Boundary.WORD
box.alignment = Alignment.CENTER
box.line_space = 1.5
box.set_text("The quick brown fox jumps over the lazy dog.")

mesh = box.build_mesh()
if mesh is not None:
    print(len(mesh.vertices), "vertices,", len(mesh.indices) // 3, "triangles")
print("bounds:", box.bounds())
```

The next example turns an atlas image and its metrics file into a single SDFF
file. When the font is written, only the red channel of the atlas is stored.

```python
from sdftext.font import Font

font = Font()
with open("atlas.png", "rb") as png, open("atlas.txt", "rb") as txt:
    font.create(png, txt)
with open(f"{font.family}.sdff", "wb") as target:
    font.write(target)
```

## What it does not do

sdftext does not draw anything. It has no window, no OpenGL calls, no shaders
and no texture upload. It produces mesh data and the atlas image (`Font.image`)
for your own renderer to use. It has no command-line tool, and it does not
generate SDF atlases from ordinary font files.

## Running the tests

```
pip install -e ".[test]"
pytest
```