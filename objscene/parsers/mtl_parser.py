# objscene/parsers/mtl_parser.py
"""
Парсер MTL: плоский разбор «ключ → поле» текущего ``newmtl``.
"""

from __future__ import annotations

from objscene.assets.material import COLOR_FIELDS, MAP_FIELDS, SCALAR_FIELDS, Material
from objscene.errors import (
    EmptyDirectiveArgument,
    MissingMaterial,
    UnknownDirective,
    WrongComponentCount,
)
from objscene.parsers.base import BaseParser
from objscene.utils.config import Config
from objscene.utils.tokenizer import read_components


class MtlParser(BaseParser):
    extension = ".mtl"
    name = "MtlParser"

    def __init__(self, config: Config | None = None):
        super().__init__(config)
        self.materials: dict[str, Material] = {}
        self._current: Material | None = None

    def get_material(self, name: str) -> Material:
        """Поиск по имени; неизвестное имя → материал по‑умолчанию (без ошибки)."""
        material = self.materials.get(name)
        if material is None:
            return Material()
        return material

    # -----------------------------------------------------------------
    # BaseParser
    # -----------------------------------------------------------------
    def _reset(self) -> None:
        self.materials.clear()
        self._current = None

    def _summary(self) -> str:
        return f": {len(self.materials)} materials"

    def _dispatch(self, keyword: str, arguments: str) -> None:
        if keyword == "newmtl":
            name = arguments.strip()
            if not name:
                raise EmptyDirectiveArgument("'newmtl' with no material name")
            # повторное имя продолжает заполнять уже существующую запись
            self._current = self.materials.setdefault(name, Material(name))
            return

        if keyword in COLOR_FIELDS:
            values = self._numbers(keyword, arguments, 3, float)
            setattr(self._material(keyword), COLOR_FIELDS[keyword], tuple(values))
        elif keyword in SCALAR_FIELDS:
            value, = self._numbers(keyword, arguments, 1, float)
            setattr(self._material(keyword), SCALAR_FIELDS[keyword], value)
        elif keyword == "Tr":
            value, = self._numbers(keyword, arguments, 1, float)
            self._material(keyword).opacity = 1.0 - value
        elif keyword == "illum":
            value, = self._numbers(keyword, arguments, 1, int)
            self._material(keyword).illumination_model = value
        elif keyword in MAP_FIELDS:
            files = arguments.split()
            if len(files) != 1:
                raise WrongComponentCount(f"Texture map '{keyword}' expects 1 filename")
            setattr(self._material(keyword), MAP_FIELDS[keyword], files[0])
        else:
            raise UnknownDirective(f"Unknown keyword '{keyword}'")

    # -----------------------------------------------------------------
    def _material(self, keyword: str) -> Material:
        if self._current is None:
            raise MissingMaterial(f"'{keyword}' before any 'newmtl'")
        return self._current

    @staticmethod
    def _numbers(keyword: str, arguments: str, count: int, kind):
        values = read_components(arguments, kind)
        if len(values) != count:
            noun = "component" if count == 1 else "components"
            raise WrongComponentCount(f"'{keyword}' expects {count} {noun}, got {len(values)}")
        return values
