"""
Пакет scene – результат разбора OBJ: Scene и иерархия групп.
"""

from objscene.scene.groups import IndexGroup, MeshGroup, SubObject
from objscene.scene.scene import Scene

__all__ = ["IndexGroup", "MeshGroup", "SubObject", "Scene"]
