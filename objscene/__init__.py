"""
objscene – разбор Wavefront OBJ/MTL в структуры сцены для рендера
или asset‑пайплайна.
"""

from objscene.utils import logger
from objscene.utils.config import Config
from objscene.utils.loader import ObjAsset, load_obj
from objscene.parsers import ObjParser, MtlParser, ParserPhase
from objscene.scene import Scene, SubObject, MeshGroup, IndexGroup
from objscene.geometry import Vertex, FaceIndex, ABSENT3
from objscene.assets.material import Material
from objscene import errors

__version__ = "1.0.0"

__all__ = [
    "ObjParser",
    "MtlParser",
    "ParserPhase",
    "Scene",
    "SubObject",
    "MeshGroup",
    "IndexGroup",
    "Vertex",
    "FaceIndex",
    "ABSENT3",
    "Material",
    "Config",
    "ObjAsset",
    "load_obj",
    "errors",
]
