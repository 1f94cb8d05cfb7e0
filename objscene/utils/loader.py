# -*- coding: utf-8 -*-
"""
Загрузка OBJ «одной функцией»: геометрия + библиотека материалов,
лежащая рядом с OBJ‑файлом (если указана через ``mtllib``).
"""

from __future__ import annotations

from pathlib import Path

from objscene.assets.material import Material
from objscene.parsers.mtl_parser import MtlParser
from objscene.parsers.obj_parser import ObjParser
from objscene.scene.scene import Scene
from objscene.utils.config import Config
from objscene.utils.logger import logger, set_log_level


class ObjAsset:
    """Сцена и материалы, на которые она ссылается."""

    def __init__(self, scene: Scene, materials: dict[str, Material]):
        self.scene = scene
        self.materials = materials

    def material_for(self, name: str) -> Material:
        return self.materials.get(name) or Material()


def load_obj(path, with_materials: bool | None = None, config: Config | None = None) -> ObjAsset:
    if config is not None:
        set_log_level(config["log_level"])
    if with_materials is None:
        settings = config if config is not None else Config()
        with_materials = settings["load_material_library"]

    obj_parser = ObjParser(config)
    obj_parser.parse(path)
    scene = obj_parser.scene

    materials: dict[str, Material] = {}
    if with_materials and scene.material_library:
        mtl_path = Path(path).parent / scene.material_library
        if mtl_path.is_file():
            mtl_parser = MtlParser(config)
            mtl_parser.parse(mtl_path)
            materials = dict(mtl_parser.materials)
        else:
            logger.warning(f"[Loader] Material library not found: {mtl_path}")

    missing = [name for name in scene.material_names() if name not in materials]
    if with_materials and missing:
        logger.debug(f"[Loader] Materials without definition: {', '.join(missing)}")

    return ObjAsset(scene, materials)
