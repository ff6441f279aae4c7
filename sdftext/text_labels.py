"""Many short text labels, each anchored at its own position in 3D space."""

from __future__ import annotations

from typing import Iterator

from .text import Mesh, Text
from .vector import Vec3


class TextLabels(Text):
    """A set of labels laid out with one font, combined into a single mesh.

    Each label is set from the origin as if it were the only text. Every
    vertex carries the 3D position of the label it belongs to, available
    through ``offsets``, so a renderer can move the glyphs to their anchor.
    """

    def __init__(self) -> None:
        super().__init__()
        self._labels: list[tuple[Vec3, str]] = []
        self._offset = Vec3()
        self._offsets: list[Vec3] = []

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[tuple[Vec3, str]]:
        return iter(list(self._labels))

    @property
    def offsets(self) -> tuple[Vec3, ...]:
        """Label position of every vertex in the last built mesh."""
        return tuple(self._offsets)

    def clear(self) -> None:
        """Remove all labels."""
        self._labels.clear()
        self._invalid = True

    def add_label(self, position: Vec3, text: str) -> None:
        """Append a label; labels keep the order in which they were added."""
        self._labels.append((position, text))
        self._invalid = True

    def width_at(self, y: float) -> float:
        return 1000.0

    def clear_mesh(self) -> None:
        """Drop the mesh, its buffers and the per-vertex offsets."""
        super().clear_mesh()
        self._offsets.clear()

    def build_mesh(self) -> Mesh | None:
        """The mesh of all labels, rebuilt if anything changed; None if empty."""
        if self._invalid:
            self.clear_mesh()
            for position, text in self._labels:
                self._offset = position
                self.set_text(text)
                self._render_mesh()
            self._create_mesh()
        return self._mesh

    def _render_string(self, text: str, x: float, y: float, stretch: float = 1.0) -> float:
        before = len(self._vertices)
        x = super()._render_string(text, x, y, stretch)
        self._offsets.extend([self._offset] * (len(self._vertices) - before))
        return x