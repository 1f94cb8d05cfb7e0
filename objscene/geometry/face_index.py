# objscene/geometry/face_index.py
"""
Нормализация токена вершины грани к тройке (geometry, texture, normal).

Форматы: ``g``, ``g/t``, ``g//n``, ``g/t/n``. Отсутствующие texcoord и
нормаль кодируются нулём. Границы индексов здесь не проверяются –
это делает AttributeTable в момент использования.
"""

from __future__ import annotations

from typing import NamedTuple

from objscene.errors import MalformedFaceIndex


class FaceIndex(NamedTuple):
    geometry: int
    texture: int = 0
    normal: int = 0


def _read_index(field: str, token: str) -> int:
    # только беззнаковые десятичные числа, без знаков и пробелов
    if not (field.isascii() and field.isdigit()):
        raise MalformedFaceIndex(f"Malformed face index '{token}'")
    return int(field)


def normalize_face_token(token: str) -> FaceIndex:
    fields = token.split("/")
    if len(fields) == 1:
        return FaceIndex(_read_index(fields[0], token))
    if len(fields) == 2:
        g, t = fields
        return FaceIndex(_read_index(g, token), _read_index(t, token))
    if len(fields) == 3:
        g, t, n = fields
        if t == "":
            # g//n
            return FaceIndex(_read_index(g, token), 0, _read_index(n, token))
        return FaceIndex(_read_index(g, token), _read_index(t, token), _read_index(n, token))
    raise MalformedFaceIndex(f"Malformed face index '{token}'")
