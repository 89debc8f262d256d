"""
Математический суб‑пакет: Vec2, Vec3, Mat3x3 и протоколы‑возможности.
"""

from vecmat.math.traits import (
    Dot, Cross, Norm, Invert, PieceWiseMul, PieceWiseDiv, Sqrt
)
from vecmat.math.vec2 import Vec2
from vecmat.math.vec3 import Vec3
from vecmat.math.mat3x3 import Mat3x3

__all__ = [
    "Vec2", "Vec3", "Mat3x3",
    "Dot", "Cross", "Norm", "Invert", "PieceWiseMul", "PieceWiseDiv", "Sqrt",
]
