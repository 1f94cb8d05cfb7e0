"""
Геометрический суб‑пакет: таблицы атрибутов, индексы граней,
дедупликация вершин, автомат группировки.
"""

from objscene.geometry.attributes import ABSENT3, AttributeTable
from objscene.geometry.face_index import FaceIndex, normalize_face_token
from objscene.geometry.dedup import Vertex, VertexDeduplicator
from objscene.geometry.grouping import GroupingStateMachine

__all__ = ["ABSENT3", "AttributeTable", "FaceIndex", "normalize_face_token",
           "Vertex", "VertexDeduplicator", "GroupingStateMachine"]
