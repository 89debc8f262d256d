"""
vecmat – маленькая библиотека линейной алгебры для Python:
векторы Vec2/Vec3 и матрица Mat3x3 над произвольным типом элементов.
"""

from vecmat.utils import logger, Config
from vecmat.math import (
    Vec2,
    Vec3,
    Mat3x3,
    Dot,
    Cross,
    Norm,
    Invert,
    PieceWiseMul,
    PieceWiseDiv,
    Sqrt,
)

__version__ = "1.0.0"

__all__ = [
    "Vec2",
    "Vec3",
    "Mat3x3",
    "Dot",
    "Cross",
    "Norm",
    "Invert",
    "PieceWiseMul",
    "PieceWiseDiv",
    "Sqrt",
    "Config",
    "logger",
]
