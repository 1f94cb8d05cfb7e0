"""
Ассеты: записи материалов MTL.
"""

from objscene.assets.material import Material

__all__ = ["Material"]
