# examples/inspect_obj.py
"""
Разобрать OBJ (и его mtllib) и вывести дерево групп и материалы.

    python examples/inspect_obj.py model.obj [--config config.json] [--debug]
"""

import sys
from argparse import ArgumentParser

import objscene as osc
from objscene.utils import logger, set_log_level


def print_scene(asset: osc.ObjAsset) -> None:
    scene = asset.scene
    print(f"Vertex Count: {len(scene.vertex_buffer)}")
    print(f"SubObjects: {len(scene.sub_objects)}")
    for sub in scene.sub_objects:
        print(f"  SubObject: {sub.name}")
        for mesh in sub.mesh_groups:
            print(f"    MeshGroup: {mesh.name}")
            for group in mesh.index_groups:
                smooth = "Yes" if group.is_smooth_shading else "No"
                print(f"      IndexGroup - MTL: {group.material_name}, Smooth: {smooth}, "
                      f"Faces: {group.face_count}, Indices: {len(group.indices)}")
    if scene.line_indices:
        print(f"Line indices: {len(scene.line_indices)}")

    print(f"Parsed {len(asset.materials)} materials.")
    for name, material in asset.materials.items():
        print(f"Material: {name}")
        print(f"  Ambient: {material.ambient_color}")
        print(f"  Diffuse: {material.diffuse_color}")
        print(f"  Specular: {material.specular_color}")
        print(f"  Specular Exponent: {material.specular_exponent}")
        print(f"  Alpha (opaque): {material.opacity}")
        print(f"  Illumination Model: {material.illumination_model}")
        for slot, path in material.texture_maps().items():
            print(f"  {slot}: {path}")


def main(argv=None) -> int:
    parser = ArgumentParser(description="Inspect a Wavefront OBJ file")
    parser.add_argument("path", help="path to the .obj file")
    parser.add_argument("--config", help="JSON config file", default=None)
    parser.add_argument("--no-materials", action="store_true", help="skip the mtllib")
    parser.add_argument("--debug", action="store_true", help="verbose diagnostics")
    args = parser.parse_args(argv)

    config = osc.Config(args.config)
    if args.debug:
        config["log_level"] = "DEBUG"
        set_log_level("DEBUG")

    try:
        asset = osc.load_obj(args.path, with_materials=not args.no_materials, config=config)
    except osc.errors.ParseError:
        logger.error("Failed to parse OBJ file.")
        return 1

    print_scene(asset)
    return 0


if __name__ == "__main__":
    sys.exit(main())
