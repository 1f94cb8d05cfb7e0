# -*- coding: utf-8 -*-
"""
Запись материала из MTL‑файла – только данные, без загрузки текстур.

Пути к картам хранятся как есть (строкой из файла); пустая строка –
карта не задана.
"""

from __future__ import annotations

# директива → имя атрибута Material
COLOR_FIELDS = {
    "Ka": "ambient_color",
    "Kd": "diffuse_color",
    "Ks": "specular_color",
    "Ke": "emissive_color",
    "Tf": "transmission_filter",
}

SCALAR_FIELDS = {
    "Ns": "specular_exponent",
    "d": "opacity",
    "Ni": "optical_density",
}

MAP_FIELDS = {
    "map_Ka": "ambient_map",
    "map_Kd": "diffuse_map",
    "map_Ks": "specular_map",
    "map_Ns": "specular_highlight_map",
    "map_d": "alpha_map",
    "map_Bump": "bump_map",
    "bump": "bump_map",
    "disp": "displacement_map",
    "Pr": "roughness_map",
    "map_Pr": "roughness_map",
    "Pm": "metallic_map",
    "map_Pm": "metallic_map",
}


class Material:
    """Параметры одного ``newmtl``."""

    def __init__(self, name: str = ""):
        self.name = name

        # цвета (RGB)
        self.ambient_color: tuple[float, float, float] = (0.0, 0.0, 0.0)
        self.diffuse_color: tuple[float, float, float] = (1.0, 1.0, 1.0)
        self.specular_color: tuple[float, float, float] = (0.0, 0.0, 0.0)
        self.emissive_color: tuple[float, float, float] = (0.0, 0.0, 0.0)
        self.transmission_filter: tuple[float, float, float] = (1.0, 1.0, 1.0)

        # скаляры
        self.specular_exponent = 0.0
        self.opacity = 1.0        # alpha; 'Tr' пишет сюда 1 - value
        self.optical_density = 1.0
        self.illumination_model = 0

        # карты
        self.ambient_map = ""
        self.diffuse_map = ""
        self.specular_map = ""
        self.specular_highlight_map = ""
        self.alpha_map = ""
        self.bump_map = ""
        self.displacement_map = ""
        self.roughness_map = ""
        self.metallic_map = ""

    def texture_maps(self) -> dict[str, str]:
        """Только заданные карты: {атрибут: путь}."""
        names = dict.fromkeys(MAP_FIELDS.values())
        return {name: getattr(self, name) for name in names if getattr(self, name)}

    def __repr__(self):
        return f"Material({self.name!r}, diffuse={self.diffuse_color}, opacity={self.opacity})"
