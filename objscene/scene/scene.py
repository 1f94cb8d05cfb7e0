"""
Результат разбора OBJ: vertex‑буфер, дерево групп, полилинии.
"""

from __future__ import annotations

import numpy as np

from objscene.geometry.dedup import Vertex
from objscene.scene.groups import IndexGroup, SubObject


class Scene:
    """Всё, что собрал ObjParser за один проход."""

    def __init__(self):
        self.sub_objects: list[SubObject] = []
        self.line_indices: list[int] = []
        self.vertex_buffer: list[Vertex] = []
        self.material_library = ""

    def index_groups(self):
        for sub in self.sub_objects:
            yield from sub.index_groups()

    def material_names(self) -> list[str]:
        """Имена материалов в порядке первого использования."""
        names = []
        for group in self.index_groups():
            if group.material_name and group.material_name not in names:
                names.append(group.material_name)
        return names

    def to_arrays(self):
        """
        Vertex‑буфер как numpy‑массивы float32:
        (positions N×4, texcoords N×3, normals N×3).
        Отсутствующие texcoord/нормали заполняются нулями.
        """
        count = len(self.vertex_buffer)
        positions = np.zeros((count, 4), dtype=np.float32)
        texcoords = np.zeros((count, 3), dtype=np.float32)
        normals = np.zeros((count, 3), dtype=np.float32)
        for i, vertex in enumerate(self.vertex_buffer):
            positions[i] = vertex.position
            if vertex.has_texture_coordinate:
                texcoords[i] = vertex.texture_coordinate
            if vertex.has_normal:
                normals[i] = vertex.normal
        return positions, texcoords, normals

    def triangles(self, group: IndexGroup) -> np.ndarray:
        return group.triangles()

    def triangle_indices(self) -> np.ndarray:
        """Все грани сцены (веером) одним uint32‑массивом T×3."""
        parts = [group.triangles() for group in self.index_groups()]
        if not parts:
            return np.zeros((0, 3), dtype=np.uint32)
        return np.concatenate(parts, axis=0)

    def clear(self):
        self.sub_objects.clear()
        self.line_indices.clear()
        self.vertex_buffer.clear()
        self.material_library = ""
