# objscene/parsers/obj_parser.py
"""
Парсер Wavefront OBJ.

Строки → директивы → таблицы атрибутов (v/vt/vn) либо автомат
группировки + нормализатор индексов + дедупликатор (f);
полилинии (l) – индексы таблицы позиций.
Результат – Scene: общий vertex‑буфер, дерево
SubObject → MeshGroup → IndexGroup и список индексов полилиний.
"""

from __future__ import annotations

from objscene.errors import (
    DegenerateFace,
    EmptyDirectiveArgument,
    MalformedFaceIndex,
    UnknownDirective,
)
from objscene.geometry.attributes import AttributeTable
from objscene.geometry.dedup import VertexDeduplicator
from objscene.geometry.face_index import normalize_face_token
from objscene.geometry.grouping import GroupingStateMachine
from objscene.parsers.base import BaseParser
from objscene.scene.scene import Scene
from objscene.utils.config import Config
from objscene.utils.logger import logger


class ObjParser(BaseParser):
    """Один экземпляр – один файл за раз; между разборами нужен clear()."""

    extension = ".obj"
    name = "ObjParser"

    def __init__(self, config: Config | None = None):
        super().__init__(config)
        self.scene = Scene()
        self.attributes = AttributeTable()
        self.deduplicator = VertexDeduplicator(self.attributes)
        self.scene.vertex_buffer = self.deduplicator.vertex_buffer
        self.grouping = GroupingStateMachine(
            self.scene.sub_objects, default_name=self.config["default_group_name"]
        )
        self._handlers = {
            "o": self._on_object,
            "mtllib": self._on_material_library,
            "g": self._on_group,
            "usemtl": self._on_use_material,
            "v": self._on_position,
            "vt": self._on_texture_coordinate,
            "vn": self._on_normal,
            "s": self._on_smoothing,
            "f": self._on_face,
            "l": self._on_line,
        }

    # -----------------------------------------------------------------
    # результат
    # -----------------------------------------------------------------
    @property
    def vertex_buffer(self):
        return self.scene.vertex_buffer

    @property
    def sub_objects(self):
        return self.scene.sub_objects

    @property
    def line_indices(self):
        return self.scene.line_indices

    @property
    def material_library(self) -> str:
        return self.scene.material_library

    # -----------------------------------------------------------------
    # BaseParser
    # -----------------------------------------------------------------
    def _reset(self) -> None:
        self.attributes.clear()
        self.deduplicator.clear()
        self.grouping.reset()
        self.scene.clear()

    def _dispatch(self, keyword: str, arguments: str) -> None:
        handler = self._handlers.get(keyword)
        if handler is None:
            raise UnknownDirective(f"Unknown keyword '{keyword}'")
        handler(arguments)

    def _summary(self) -> str:
        return (f": {len(self.vertex_buffer)} vertices, "
                f"{len(self.sub_objects)} sub-objects, "
                f"{len(self.line_indices)} line indices")

    # -----------------------------------------------------------------
    # директивы
    # -----------------------------------------------------------------
    @staticmethod
    def _require_name(keyword: str, arguments: str) -> str:
        name = arguments.strip()
        if not name:
            raise EmptyDirectiveArgument(f"'{keyword}' keyword with empty name")
        return name

    def _on_object(self, arguments: str):
        self.grouping.open_sub_object(self._require_name("o", arguments))

    def _on_material_library(self, arguments: str):
        self.scene.material_library = self._require_name("mtllib", arguments)

    def _on_group(self, arguments: str):
        mesh = self.grouping.open_mesh_group(self._require_name("g", arguments))
        logger.debug(f"[ObjParser] Mesh group '{mesh.name}'")

    def _on_use_material(self, arguments: str):
        self.grouping.use_material(self._require_name("usemtl", arguments))

    def _on_position(self, arguments: str):
        self.attributes.append_position(arguments)

    def _on_texture_coordinate(self, arguments: str):
        self.attributes.append_texture_coordinate(arguments)

    def _on_normal(self, arguments: str):
        self.attributes.append_normal(arguments)

    def _on_smoothing(self, arguments: str):
        self.grouping.set_smoothing(self._require_name("s", arguments))

    def _on_face(self, arguments: str):
        tokens = arguments.split()
        minimum = self.config["min_face_corners"]
        if len(tokens) < minimum:
            raise DegenerateFace(
                f"'f' expects at least {minimum} vertices, got {len(tokens)}"
            )
        # все ссылки проверяются до записи – грань либо целиком, либо никак
        vertices = [self.deduplicator.resolve(normalize_face_token(t)) for t in tokens]
        self.grouping.add_face([self.deduplicator.intern_vertex(v) for v in vertices])

    def _on_line(self, arguments: str):
        tokens = arguments.split()
        if not tokens:
            raise EmptyDirectiveArgument("'l' keyword with empty indices")
        # полилинии ссылаются на таблицу позиций (0‑based), vertex‑буфер граней не трогают
        indices = []
        for token in tokens:
            if not (token.isascii() and token.isdigit()):
                raise MalformedFaceIndex(f"Malformed line index '{token}'")
            index = int(token)
            self.attributes.position(index)   # IndexOutOfRange при промахе
            indices.append(index - 1)
        self.scene.line_indices.extend(indices)
