# -*- coding: utf-8 -*-
import numpy as np
import pytest

from objscene.assets.material import Material
from objscene.errors import (
    AlreadyOpen,
    EmptyDirectiveArgument,
    MalformedAttribute,
    MissingMaterial,
    UnknownDirective,
    WrongComponentCount,
    WrongExtension,
)
from objscene.parsers import MtlParser, ParserPhase

MUG = """
# Mug materials
newmtl Ceramic
Ka 0.1 0.1 0.1
Kd 0.8 0.7 0.6
Ks 0.5 0.5 0.5
Ke 0 0 0
Ns 96.0
d 0.9
Ni 1.45
Tf 1 0.5 0.25
illum 2
map_Kd mug_diffuse.png
map_Bump mug_normal.png

newmtl Glass
Tr 0.75
Pr glass_rough.png
map_Pm glass_metal.png
bump glass_bump.png
disp glass_disp.png
map_Ka a.png
map_Ks s.png
map_Ns ns.png
map_d alpha.png
"""


def parse(parser, text):
    parser.parse_lines(text.splitlines(), source="inline.mtl")
    return parser


def test_parse_records(mtl_parser):
    parse(mtl_parser, MUG)
    assert sorted(mtl_parser.materials) == ["Ceramic", "Glass"]

    ceramic = mtl_parser.get_material("Ceramic")
    assert ceramic.name == "Ceramic"
    assert np.allclose(ceramic.ambient_color, (0.1, 0.1, 0.1))
    assert ceramic.diffuse_color == (0.8, 0.7, 0.6)
    assert ceramic.specular_color == (0.5, 0.5, 0.5)
    assert ceramic.emissive_color == (0.0, 0.0, 0.0)
    assert ceramic.specular_exponent == 96.0
    assert ceramic.opacity == 0.9
    assert ceramic.optical_density == 1.45
    assert ceramic.transmission_filter == (1.0, 0.5, 0.25)
    assert ceramic.illumination_model == 2
    assert ceramic.diffuse_map == "mug_diffuse.png"
    assert ceramic.bump_map == "mug_normal.png"
    assert ceramic.texture_maps() == {"diffuse_map": "mug_diffuse.png",
                                      "bump_map": "mug_normal.png"}


def test_texture_map_aliases(mtl_parser):
    glass = parse(mtl_parser, MUG).get_material("Glass")
    assert glass.roughness_map == "glass_rough.png"
    assert glass.metallic_map == "glass_metal.png"
    assert glass.bump_map == "glass_bump.png"
    assert glass.displacement_map == "glass_disp.png"
    assert glass.ambient_map == "a.png"
    assert glass.specular_map == "s.png"
    assert glass.specular_highlight_map == "ns.png"
    assert glass.alpha_map == "alpha.png"


def test_transparency_writes_opacity(mtl_parser):
    glass = parse(mtl_parser, MUG).get_material("Glass")
    assert glass.opacity == pytest.approx(0.25)


def test_last_opacity_writer_wins(mtl_parser):
    material = parse(mtl_parser, "newmtl m\nTr 0.2\nd 0.4").get_material("m")
    assert material.opacity == 0.4


def test_unknown_name_returns_default(mtl_parser):
    parse(mtl_parser, MUG)
    missing = mtl_parser.get_material("Nope")
    assert isinstance(missing, Material)
    assert missing.name == ""
    assert missing.diffuse_map == ""
    assert "Nope" not in mtl_parser.materials


def test_repeated_newmtl_continues_record(mtl_parser):
    parse(mtl_parser, "newmtl m\nNs 10\nnewmtl m\nd 0.5")
    material = mtl_parser.get_material("m")
    assert len(mtl_parser.materials) == 1
    assert material.specular_exponent == 10.0
    assert material.opacity == 0.5


@pytest.mark.parametrize("text, error", [
    ("newmtl", EmptyDirectiveArgument),
    ("Kd 1 1 1", MissingMaterial),
    ("newmtl m\nKd 1 1", WrongComponentCount),
    ("newmtl m\nNs 1 2", WrongComponentCount),
    ("newmtl m\nillum 2.5", MalformedAttribute),
    ("newmtl m\nKd 1 one 1", MalformedAttribute),
    ("newmtl m\nmap_Kd -bm 1 tex.png", WrongComponentCount),
    ("newmtl m\nmap_Kd", WrongComponentCount),
    ("newmtl m\nsharpness 60", UnknownDirective),
])
def test_errors(mtl_parser, text, error):
    with pytest.raises(error):
        parse(mtl_parser, text)


def test_file_contract(write_file):
    parser = MtlParser()
    with pytest.raises(WrongExtension):
        parser.parse(write_file("mug.txt", MUG))

    parser.clear()
    parser.parse(write_file("mug.mtl", MUG))
    assert parser.phase is ParserPhase.CLOSED
    with pytest.raises(AlreadyOpen):
        parser.parse(write_file("mug.mtl", MUG))

    parser.clear()
    assert parser.materials == {}
    assert parser.phase is ParserPhase.IDLE
