"""
Парсеры форматов: OBJ (геометрия) и MTL (материалы).
"""

from objscene.parsers.base import BaseParser, ParserPhase
from objscene.parsers.obj_parser import ObjParser
from objscene.parsers.mtl_parser import MtlParser

__all__ = ["BaseParser", "ParserPhase", "ObjParser", "MtlParser"]
