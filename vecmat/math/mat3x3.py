# vecmat/math/mat3x3.py
import numpy as np

from vecmat.math.vec3 import Vec3, check_index
from vecmat.utils.config import Config
from vecmat.utils.logger import logger


class Mat3x3:
    """Матрица 3×3, хранится построчно (3 строки по 3 элемента)."""

    __slots__ = ("_m",)
    __array_ufunc__ = None

    def __init__(self, grid, dtype=None):
        m = np.array(grid, dtype=dtype)
        if m.shape != (3, 3):
            logger.debug(f"[Mat3x3] rejected grid of shape {m.shape}")
            raise ValueError(f"Mat3x3 needs a 3x3 grid, got shape {m.shape}")
        self._m = m

    @classmethod
    def new(cls, grid) -> "Mat3x3":
        return cls(grid)

    @classmethod
    def from_rows(cls, row0: Vec3, row1: Vec3, row2: Vec3) -> "Mat3x3":
        rows = (row0, row1, row2)
        for r in rows:
            if not isinstance(r, Vec3):
                raise TypeError(f"Mat3x3 rows must be Vec3, not {type(r).__name__}")
        return cls(np.stack([r.as_np() for r in rows]))

    @staticmethod
    def identity(dtype=float) -> "Mat3x3":
        return Mat3x3(np.identity(3, dtype=dtype))

    # -----------------------------------------------------------------
    # строки / столбцы
    # -----------------------------------------------------------------
    def __getitem__(self, index) -> np.ndarray:
        """Сырая строка (копия ndarray из 3 элементов)."""
        return self._m[check_index(index, 3, "Mat3x3")].copy()

    def row(self, index: int) -> Vec3:
        return Vec3.from_array(self._m[check_index(index, 3, "Mat3x3")])

    def col(self, index: int) -> Vec3:
        return Vec3.from_array(self._m[:, check_index(index, 3, "Mat3x3")])

    # -----------------------------------------------------------------
    # умножение на вектор
    # -----------------------------------------------------------------
    def dot(self, rhs: Vec3) -> Vec3:
        """Компонента i результата = row(i).dot(rhs)."""
        return Vec3(self.row(0).dot(rhs), self.row(1).dot(rhs), self.row(2).dot(rhs))

    def __matmul__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.dot(other)

    # -----------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Mat3x3):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def isclose(self, other: "Mat3x3", eps: float = None) -> bool:
        if eps is None:
            eps = Config()["epsilon"]
        return bool(np.all(np.abs(self._m - other._m) <= eps))

    def __repr__(self):
        return f"Mat3x3({self._m.tolist()})"

    def to_np(self) -> np.ndarray:
        return self._m.copy()
