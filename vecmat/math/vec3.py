# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy.

Компоненты доступны и по имени (x, y, z), и по индексу 0..2; любой другой
индекс – IndexError, за границы массива мы не читаем и не пишем.
"""
import numpy as np
from typing import Iterable, Iterator, Tuple

from vecmat.math.scalar import divide, sqrt
from vecmat.utils.config import Config
from vecmat.utils.logger import logger


def check_index(index, size: int, owner: str) -> int:
    """Проверка позиционного индекса: целое в диапазоне [0, size)."""
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"{owner} indices must be integers, not {type(index).__name__}")
    if not 0 <= index < size:
        raise IndexError(f"{owner} index out of range: {index} (size {size})")
    return int(index)


class Vec3:
    __slots__ = ("_v",)
    __array_ufunc__ = None

    def __init__(self, x=0.0, y=0.0, z=0.0, dtype=None):
        self._v = np.array([x, y, z], dtype=dtype)
        if self._v.shape != (3,):
            logger.debug(f"[Vec3] rejected components of shape {self._v.shape}")
            raise ValueError(f"Vec3 components must be scalars, got shape {self._v.shape}")

    @classmethod
    def new(cls, x, y, z) -> "Vec3":
        return cls(x, y, z)

    @classmethod
    def from_array(cls, values: Iterable, dtype=None) -> "Vec3":
        """Вектор из упорядоченной последовательности ровно из 3 элементов."""
        arr = np.array(values, dtype=dtype)
        if arr.shape != (3,):
            logger.debug(f"[Vec3] rejected input of shape {arr.shape}")
            raise ValueError(f"Vec3 needs exactly 3 elements, got shape {arr.shape}")
        return cls._wrap(arr)

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Vec3":
        obj = cls.__new__(cls)
        obj._v = arr
        return obj

    # -------------------------------------------------
    # доступ к компонентам
    # -------------------------------------------------
    @property
    def x(self):
        return self._v[0]

    @x.setter
    def x(self, value):
        self[0] = value

    @property
    def y(self):
        return self._v[1]

    @y.setter
    def y(self, value):
        self[1] = value

    @property
    def z(self):
        return self._v[2]

    @z.setter
    def z(self, value):
        self[2] = value

    def __getitem__(self, index):
        return self._v[check_index(index, 3, "Vec3")]

    def __setitem__(self, index, value):
        index = check_index(index, 3, "Vec3")
        dtype = np.result_type(self._v.dtype, np.asarray(value).dtype)
        if dtype != self._v.dtype:
            self._v = self._v.astype(dtype)
        self._v[index] = value

    # -------------------------------------------------
    # сравнения и min/max
    # -------------------------------------------------
    def all_smaller(self, other: "Vec3") -> bool:
        a, b = self._v, other._v
        return bool(a[0] < b[0] and a[1] < b[1] and a[2] < b[2])

    def all_smaller_eq(self, other: "Vec3") -> bool:
        a, b = self._v, other._v
        return bool(a[0] <= b[0] and a[1] <= b[1] and a[2] <= b[2])

    def min(self):
        # при равенстве побеждает меньший индекс: x, затем y, затем z
        x, y, z = self._v
        if x <= y and x <= z:
            return x
        if y <= x and y <= z:
            return y
        return z

    def max(self):
        x, y, z = self._v
        if x >= y and x >= z:
            return x
        if y >= x and y >= z:
            return y
        return z

    def element_wise_min(self, other: "Vec3") -> "Vec3":
        """self только там, где self < other; при равенстве берётся other."""
        mask = np.asarray(self._v < other._v, dtype=bool)
        return Vec3._wrap(np.where(mask, self._v, other._v))

    def element_wise_max(self, other: "Vec3") -> "Vec3":
        """self там, где self >= other; при равенстве остаётся self."""
        mask = np.asarray(self._v >= other._v, dtype=bool)
        return Vec3._wrap(np.where(mask, self._v, other._v))

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def isclose(self, other: "Vec3", eps: float = None) -> bool:
        if eps is None:
            eps = Config()["epsilon"]
        return bool(np.all(np.abs(self._v - other._v) <= eps))

    # -------------------------------------------------
    # арифметика (не меняет исходный объект, кроме +=)
    # -------------------------------------------------
    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3._wrap(self._v + other._v)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3._wrap(self._v - other._v)

    def __iadd__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        self._v = self._v + other._v
        return self

    def __mul__(self, scalar) -> "Vec3":
        if isinstance(scalar, Vec3):
            return NotImplemented
        return Vec3._wrap(self._v * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar) -> "Vec3":
        if isinstance(scalar, Vec3):
            return NotImplemented
        return Vec3._wrap(divide(self._v, scalar))

    def __neg__(self) -> "Vec3":
        return Vec3._wrap(-self._v)

    def __invert__(self) -> "Vec3":
        """Покомпонентное NOT: логическое для bool, побитовое для int."""
        return Vec3._wrap(~self._v)

    def piece_wise_mul(self, rhs: "Vec3") -> "Vec3":
        return Vec3._wrap(self._v * rhs._v)

    def piece_wise_div(self, rhs: "Vec3") -> "Vec3":
        return Vec3._wrap(divide(self._v, rhs._v))

    def inverted(self) -> "Vec3":
        return Vec3._wrap(-self._v)

    def invert(self) -> None:
        self._v = -self._v

    # -------------------------------------------------
    # геометрия
    # -------------------------------------------------
    def dot(self, rhs: "Vec3"):
        a, b = self._v, rhs._v
        return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]

    def cross(self, rhs: "Vec3") -> "Vec3":
        return Vec3._wrap(np.cross(self._v, rhs._v))

    def norm2(self):
        return self.dot(self)

    def norm(self):
        return sqrt(self.norm2())

    def normalized(self) -> "Vec3":
        n = self.norm()
        return Vec3._wrap(divide(self._v, n))

    def normalize(self) -> None:
        n = self.norm()
        self._v = divide(self._v, n)

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def copy(self) -> "Vec3":
        return Vec3._wrap(self._v.copy())

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator:
        return iter(self._v)

    def as_np(self) -> np.ndarray:
        """Возврат копии 3‑элементного массива."""
        return self._v.copy()

    def to_tuple(self) -> Tuple:
        return tuple(self._v.tolist())

    def __repr__(self):
        return f"Vec3({self._v[0]}, {self._v[1]}, {self._v[2]})"
