# objscene/geometry/dedup.py
"""
Дедупликация вершин: (position, texcoord, normal) → слот в vertex‑буфере.

Сравнение точное (float ==, без epsilon): две вершины, отличающиеся
в последнем бите, получат разные слоты. Это осознанная политика.
"""

from __future__ import annotations

from objscene.geometry.attributes import ABSENT3, AttributeTable, Vector3, Vector4
from objscene.geometry.face_index import FaceIndex


class Vertex:
    """Неизменяемая составная вершина; равенство и хэш – по всем трём частям."""

    __slots__ = ("position", "texture_coordinate", "normal", "_key")

    def __init__(self, position: Vector4,
                 texture_coordinate: Vector3 = ABSENT3,
                 normal: Vector3 = ABSENT3):
        object.__setattr__(self, "position", tuple(position))
        object.__setattr__(self, "texture_coordinate", tuple(texture_coordinate))
        object.__setattr__(self, "normal", tuple(normal))
        object.__setattr__(self, "_key", (self.position, self.texture_coordinate, self.normal))

    def __setattr__(self, name, value):
        raise AttributeError("Vertex is immutable")

    @property
    def has_texture_coordinate(self) -> bool:
        return self.texture_coordinate != ABSENT3

    @property
    def has_normal(self) -> bool:
        return self.normal != ABSENT3

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        tex = self.texture_coordinate if self.has_texture_coordinate else None
        nrm = self.normal if self.has_normal else None
        return f"Vertex(position={self.position}, texture_coordinate={tex}, normal={nrm})"


class VertexDeduplicator:
    """Интернирует вершины в общий для всего файла vertex‑буфер."""

    def __init__(self, attributes: AttributeTable):
        self.attributes = attributes
        self.vertex_buffer: list[Vertex] = []
        self._slots: dict[Vertex, int] = {}

    def resolve(self, index: FaceIndex) -> Vertex:
        """Подставить значения из таблиц атрибутов (IndexOutOfRange при промахе)."""
        return Vertex(
            self.attributes.position(index.geometry),
            self.attributes.texture_coordinate(index.texture),
            self.attributes.normal(index.normal),
        )

    def intern(self, index: FaceIndex) -> int:
        return self.intern_vertex(self.resolve(index))

    def intern_vertex(self, vertex: Vertex) -> int:
        slot = self._slots.get(vertex)
        if slot is None:
            slot = len(self.vertex_buffer)
            self._slots[vertex] = slot
            self.vertex_buffer.append(vertex)
        return slot

    def __len__(self) -> int:
        return len(self.vertex_buffer)

    def clear(self):
        self.vertex_buffer.clear()
        self._slots.clear()
