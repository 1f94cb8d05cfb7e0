# objscene/scene/groups.py
"""
Иерархия группировки граней: SubObject → MeshGroup → IndexGroup.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

MATERIAL = "material_name"
SMOOTHING = "smooth_shading"


class IndexGroup:
    """
    Серия граней с одинаковым материалом и режимом сглаживания.

    ``material_name == ""`` и ``smooth_shading is None`` – «не задано»;
    такое значение ещё можно дописать в группу, не открывая новую.
    """

    def __init__(self, material_name: str = "", smooth_shading: Optional[bool] = None):
        self.material_name = material_name
        self.smooth_shading = smooth_shading
        self.indices: list[int] = []
        self.face_sizes: list[int] = []

    # -----------------------------------------------------------------
    # правило «переиспользовать или открыть новую»
    # -----------------------------------------------------------------
    def is_set(self, attribute: str) -> bool:
        return getattr(self, attribute) not in (None, "")

    def accepts(self, attribute: str, value) -> bool:
        """Можно ли записать ``value`` в эту группу без открытия новой."""
        return not self.is_set(attribute) or getattr(self, attribute) == value

    # -----------------------------------------------------------------
    @property
    def is_smooth_shading(self) -> bool:
        return True if self.smooth_shading is None else self.smooth_shading

    @property
    def face_count(self) -> int:
        return len(self.face_sizes)

    def add_face(self, indices: list[int]):
        self.indices.extend(indices)
        self.face_sizes.append(len(indices))

    def faces(self):
        """Итератор по граням (списки индексов vertex‑буфера)."""
        start = 0
        for size in self.face_sizes:
            yield self.indices[start:start + size]
            start += size

    def triangles(self) -> np.ndarray:
        """Веерная триангуляция всех граней группы → uint32 (T×3)."""
        tris = []
        for face in self.faces():
            v0 = face[0]
            for i in range(1, len(face) - 1):
                tris.append((v0, face[i], face[i + 1]))
        return np.array(tris, dtype=np.uint32).reshape(-1, 3)

    def __repr__(self):
        return (f"IndexGroup(material={self.material_name!r}, "
                f"smooth={self.smooth_shading}, indices={len(self.indices)})")


class MeshGroup:
    """Именованный набор IndexGroup (директива ``g``)."""

    def __init__(self, name: str):
        self.name = name
        self.index_groups: list[IndexGroup] = []

    def __repr__(self):
        return f"MeshGroup({self.name!r}, index_groups={len(self.index_groups)})"


class SubObject:
    """Именованный набор MeshGroup (директива ``o``)."""

    def __init__(self, name: str):
        self.name = name
        self.mesh_groups: list[MeshGroup] = []

    def index_groups(self):
        for mesh_group in self.mesh_groups:
            yield from mesh_group.index_groups

    def __repr__(self):
        return f"SubObject({self.name!r}, mesh_groups={len(self.mesh_groups)})"
