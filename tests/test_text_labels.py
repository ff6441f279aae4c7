import io

import pytest
from PIL import Image

from sdftext.font import Font
from sdftext.text_labels import TextLabels
from sdftext.vector import Vec3

METRICS = "\n".join(
    [
        'info face="TestFace"',
        "chars count=3",
        "char id=65 x=0 y=0 width=10 height=20 xoffset=0 yoffset=15 xadvance=12",
        "char id=66 x=10 y=0 width=8 height=20 xoffset=1 yoffset=15 xadvance=10",
        "char id=32 x=0 y=0 width=0 height=0 xoffset=0 yoffset=0 xadvance=5",
    ]
)


def _png_bytes() -> bytes:
    out = io.BytesIO()
    Image.new("L", (64, 64)).save(out, format="PNG")
    return out.getvalue()


@pytest.fixture
def labels() -> TextLabels:
    font = Font()
    font.create(_png_bytes(), METRICS.encode("utf-8"))
    result = TextLabels()
    result.font = font
    result.font_size = 20.0
    return result


def test_empty_labels_build_no_mesh(labels):
    assert len(labels) == 0
    assert labels.build_mesh() is None
    assert labels.offsets == ()


def test_labels_keep_insertion_order(labels):
    p = Vec3(1.0, 2.0, 3.0)
    labels.add_label(p, "B")
    labels.add_label(p, "A")
    labels.add_label(Vec3(), "AB")
    assert list(labels) == [(p, "B"), (p, "A"), (Vec3(), "AB")]
    assert len(labels) == 3


def test_width_at_is_fixed(labels):
    assert labels.width_at(0.0) == 1000.0
    assert labels.width_at(500.0) == 1000.0


def test_two_labels_mesh_and_offsets(labels):
    first = Vec3(1.0, 2.0, 3.0)
    second = Vec3(-4.0, 5.0, 6.0)
    labels.add_label(first, "A")
    labels.add_label(second, "B")
    mesh = labels.build_mesh()
    assert mesh is not None
    assert len(mesh.vertices) == 8
    assert len(mesh.texcoords) == 8
    assert mesh.indices == (0, 3, 1, 1, 3, 2, 4, 7, 5, 5, 7, 6)
    assert labels.offsets == (first,) * 4 + (second,) * 4


def test_each_label_starts_at_origin(labels):
    labels.add_label(Vec3(10.0, 0.0, 0.0), "A")
    labels.add_label(Vec3(20.0, 0.0, 0.0), "A")
    mesh = labels.build_mesh()
    assert mesh.vertices[:4] == mesh.vertices[4:]
    assert mesh.vertices[0] == Vec3(0.0, 0.0, 0.0)


def test_whitespace_gets_no_quad(labels):
    labels.add_label(Vec3(), "A A")
    mesh = labels.build_mesh()
    assert len(mesh.vertices) == 8
    assert len(labels.offsets) == len(mesh.vertices)
    assert mesh.vertices[4].x > mesh.vertices[0].x


def test_adding_label_rebuilds(labels):
    labels.add_label(Vec3(), "A")
    first = labels.build_mesh()
    labels.add_label(Vec3(0.0, 1.0, 0.0), "B")
    second = labels.build_mesh()
    assert len(second.vertices) == len(first.vertices) + 4
    assert len(labels.offsets) == len(second.vertices)


def test_clear_removes_labels_and_mesh(labels):
    labels.add_label(Vec3(), "AB")
    assert labels.build_mesh() is not None
    labels.clear()
    assert len(labels) == 0
    assert labels.build_mesh() is None
    assert labels.offsets == ()


def test_clear_mesh_drops_offsets(labels):
    labels.add_label(Vec3(1.0, 1.0, 1.0), "AB")
    labels.build_mesh()
    assert len(labels.offsets) == 8
    labels.clear_mesh()
    assert labels.offsets == ()
    rebuilt = labels.build_mesh()
    assert len(rebuilt.vertices) == 8
    assert len(labels.offsets) == 8


def test_unknown_characters_are_ignored(labels):
    labels.add_label(Vec3(), "xyz")
    assert labels.build_mesh() is None
    assert labels.offsets == ()