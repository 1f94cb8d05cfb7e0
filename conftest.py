# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: свежие парсеры и запись OBJ/MTL во временную папку.
"""

import textwrap

import pytest

from objscene.parsers import ObjParser, MtlParser


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip("\n")


@pytest.fixture
def obj_parser():
    return ObjParser()


@pytest.fixture
def mtl_parser():
    return MtlParser()


@pytest.fixture
def parse_obj(obj_parser):
    """Разобрать OBJ‑текст из строки, вернуть парсер."""
    def _parse(text: str) -> ObjParser:
        obj_parser.parse_lines(_dedent(text).splitlines(), source="inline.obj")
        return obj_parser
    return _parse


@pytest.fixture
def write_file(tmp_path):
    """Записать текст в tmp_path/<name> и вернуть путь."""
    def _write(name: str, text: str):
        path = tmp_path / name
        path.write_text(_dedent(text), encoding="utf-8")
        return path
    return _write
