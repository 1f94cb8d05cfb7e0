# objscene/geometry/grouping.py
"""
Автомат группировки граней.

Состояния: нет SubObject → SubObject без MeshGroup → MeshGroup без
IndexGroup → IndexGroup открыт. Активные материал и сглаживание живут
здесь же; каждая новая IndexGroup получает их как стартовые значения.

Правило «переиспользовать или открыть» одно на оба атрибута
(см. IndexGroup.accepts): замыкающая группа переиспользуется, если
атрибут в ней ещё не задан (дописываем) или уже равен новому значению;
иначе открывается новая группа.
"""

from __future__ import annotations

from typing import Optional

from objscene.errors import InvalidSmoothingOption
from objscene.scene.groups import MATERIAL, SMOOTHING, IndexGroup, MeshGroup, SubObject
from objscene.utils.logger import logger

SMOOTHING_OPTIONS = {"1": True, "off": False}


class GroupingStateMachine:

    def __init__(self, sub_objects: list[SubObject], default_name: str = "Unnamed"):
        self.sub_objects = sub_objects
        self.default_name = default_name
        self.active_material = ""
        self.active_smoothing: Optional[bool] = None

    # -----------------------------------------------------------------
    # текущие узлы цепочки
    # -----------------------------------------------------------------
    @property
    def current_sub_object(self) -> Optional[SubObject]:
        return self.sub_objects[-1] if self.sub_objects else None

    @property
    def current_mesh_group(self) -> Optional[MeshGroup]:
        sub = self.current_sub_object
        if sub is None or not sub.mesh_groups:
            return None
        return sub.mesh_groups[-1]

    @property
    def current_index_group(self) -> Optional[IndexGroup]:
        mesh = self.current_mesh_group
        if mesh is None or not mesh.index_groups:
            return None
        return mesh.index_groups[-1]

    # -----------------------------------------------------------------
    # синтез недостающих уровней
    # -----------------------------------------------------------------
    def ensure_sub_object(self) -> SubObject:
        if not self.sub_objects:
            logger.debug(f"[Grouping] Synthesizing sub-object '{self.default_name}'")
            self.sub_objects.append(SubObject(self.default_name))
        return self.sub_objects[-1]

    def ensure_mesh_group(self) -> MeshGroup:
        sub = self.ensure_sub_object()
        if not sub.mesh_groups:
            logger.debug(f"[Grouping] Synthesizing mesh group '{self.default_name}'")
            sub.mesh_groups.append(MeshGroup(self.default_name))
        return sub.mesh_groups[-1]

    def ensure_index_group(self) -> IndexGroup:
        mesh = self.ensure_mesh_group()
        if not mesh.index_groups:
            return self._open_index_group(mesh)
        return mesh.index_groups[-1]

    def _open_index_group(self, mesh: MeshGroup) -> IndexGroup:
        group = IndexGroup(self.active_material, self.active_smoothing)
        mesh.index_groups.append(group)
        return group

    def _reuse_or_open(self, attribute: str, value) -> IndexGroup:
        mesh = self.ensure_mesh_group()
        trailing = mesh.index_groups[-1] if mesh.index_groups else None
        if trailing is None or not trailing.accepts(attribute, value):
            trailing = self._open_index_group(mesh)
        setattr(trailing, attribute, value)
        return trailing

    # -----------------------------------------------------------------
    # директивы
    # -----------------------------------------------------------------
    def open_sub_object(self, name: str) -> SubObject:
        sub = SubObject(name)
        self.sub_objects.append(sub)
        return sub

    def open_mesh_group(self, name: str) -> MeshGroup:
        sub = self.ensure_sub_object()
        mesh = MeshGroup(name)
        sub.mesh_groups.append(mesh)
        return mesh

    def use_material(self, name: str) -> IndexGroup:
        self.active_material = name
        return self._reuse_or_open(MATERIAL, name)

    def set_smoothing(self, option: str) -> IndexGroup:
        if option not in SMOOTHING_OPTIONS:
            raise InvalidSmoothingOption(
                f"'s' expects '1' or 'off', got '{option}'"
            )
        self.active_smoothing = SMOOTHING_OPTIONS[option]
        return self._reuse_or_open(SMOOTHING, self.active_smoothing)

    def add_face(self, indices: list[int]) -> IndexGroup:
        group = self.ensure_index_group()
        group.add_face(indices)
        return group

    def reset(self):
        self.sub_objects.clear()
        self.active_material = ""
        self.active_smoothing = None
