# objscene/geometry/attributes.py
"""
Таблицы «сырых» атрибутов: позиции (v), texcoords (vt), нормали (vn).

Только добавление, индексация с 1 (как в формате OBJ). Индекс 0 для
texcoord/нормали означает «отсутствует» и возвращает ABSENT3.
"""

from __future__ import annotations

import sys
from typing import Tuple

import numpy as np

from objscene.errors import IndexOutOfRange, WrongComponentCount
from objscene.utils.tokenizer import read_components

Vector3 = Tuple[float, float, float]
Vector4 = Tuple[float, float, float, float]

# Зарезервированное значение «нет компоненты» – одно на весь процесс,
# поэтому все вершины без texcoord сравниваются между собой как равные.
FLOAT_MAX = sys.float_info.max
ABSENT3: Vector3 = (FLOAT_MAX, FLOAT_MAX, FLOAT_MAX)


class AttributeTable:
    """Три независимые таблицы атрибутов одного OBJ‑файла."""

    def __init__(self):
        self.positions: list[Vector4] = []
        self.texture_coordinates: list[Vector3] = []
        self.normals: list[Vector3] = []

    # -----------------------------------------------------------------
    # добавление
    # -----------------------------------------------------------------
    def append_position(self, text: str) -> Vector4:
        values = read_components(text, float)
        if len(values) not in (3, 4):
            raise WrongComponentCount(f"'v' expects 3 or 4 components, got {len(values)}")
        if len(values) == 3:
            values.append(1.0)
        position = tuple(values)
        self.positions.append(position)
        return position

    def append_texture_coordinate(self, text: str) -> Vector3:
        values = read_components(text, float)
        if len(values) not in (2, 3):
            raise WrongComponentCount(f"'vt' expects 2 or 3 components, got {len(values)}")
        if len(values) == 2:
            values.append(0.0)
        texcoord = tuple(values)
        self.texture_coordinates.append(texcoord)
        return texcoord

    def append_normal(self, text: str) -> Vector3:
        values = read_components(text, float)
        if len(values) != 3:
            raise WrongComponentCount(f"'vn' expects 3 components, got {len(values)}")
        normal = tuple(values)
        self.normals.append(normal)
        return normal

    # -----------------------------------------------------------------
    # поиск (1‑based)
    # -----------------------------------------------------------------
    def position(self, index: int) -> Vector4:
        if not 1 <= index <= len(self.positions):
            raise IndexOutOfRange(
                f"Position index {index} out of range (1..{len(self.positions)})"
            )
        return self.positions[index - 1]

    def texture_coordinate(self, index: int) -> Vector3:
        if index == 0:
            return ABSENT3
        if not 1 <= index <= len(self.texture_coordinates):
            raise IndexOutOfRange(
                f"Texture coordinate index {index} out of range "
                f"(1..{len(self.texture_coordinates)})"
            )
        return self.texture_coordinates[index - 1]

    def normal(self, index: int) -> Vector3:
        if index == 0:
            return ABSENT3
        if not 1 <= index <= len(self.normals):
            raise IndexOutOfRange(
                f"Normal index {index} out of range (1..{len(self.normals)})"
            )
        return self.normals[index - 1]

    def clear(self):
        self.positions.clear()
        self.texture_coordinates.clear()
        self.normals.clear()

    def to_arrays(self):
        """(positions N×4, texcoords M×3, normals K×3) – float32."""
        return (
            np.array(self.positions, dtype=np.float32).reshape(-1, 4),
            np.array(self.texture_coordinates, dtype=np.float32).reshape(-1, 3),
            np.array(self.normals, dtype=np.float32).reshape(-1, 3),
        )
