# vecmat/math/vec2.py
"""
Двумерный вектор на базе NumPy.

Тип элементов не фиксирован: dtype выводится из аргументов конструктора
(int остаётся int, np.float32 – float32, Decimal – object).
"""

import numpy as np
from typing import Iterable, Iterator, Tuple

from vecmat.math.scalar import divide, sqrt
from vecmat.utils.config import Config
from vecmat.utils.logger import logger


class Vec2:
    __slots__ = ("_v",)
    # numpy‑скаляр слева (np.float32(2) * v) отдаёт операцию нам
    __array_ufunc__ = None

    def __init__(self, x=0.0, y=0.0, dtype=None):
        self._v = np.array([x, y], dtype=dtype)
        if self._v.shape != (2,):
            logger.debug(f"[Vec2] rejected components of shape {self._v.shape}")
            raise ValueError(f"Vec2 components must be scalars, got shape {self._v.shape}")

    @classmethod
    def new(cls, x, y) -> "Vec2":
        return cls(x, y)

    @classmethod
    def from_array(cls, values: Iterable, dtype=None) -> "Vec2":
        """Вектор из упорядоченной последовательности ровно из 2 элементов."""
        arr = np.array(values, dtype=dtype)
        if arr.shape != (2,):
            logger.debug(f"[Vec2] rejected input of shape {arr.shape}")
            raise ValueError(f"Vec2 needs exactly 2 elements, got shape {arr.shape}")
        return cls._wrap(arr)

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Vec2":
        obj = cls.__new__(cls)
        obj._v = arr
        return obj

    # -------------------------------------------------
    # свойства с сеттерами
    # -------------------------------------------------
    @property
    def x(self):
        return self._v[0]

    @x.setter
    def x(self, value):
        self._set(0, value)

    @property
    def y(self):
        return self._v[1]

    @y.setter
    def y(self, value):
        self._set(1, value)

    def _set(self, index: int, value) -> None:
        # запись никогда не обрезает значение: при необходимости расширяем dtype
        dtype = np.result_type(self._v.dtype, np.asarray(value).dtype)
        if dtype != self._v.dtype:
            self._v = self._v.astype(dtype)
        self._v[index] = value

    # -------------------------------------------------
    # сравнения
    # -------------------------------------------------
    def all_smaller(self, other: "Vec2") -> bool:
        return bool(self._v[0] < other._v[0] and self._v[1] < other._v[1])

    def all_smaller_eq(self, other: "Vec2") -> bool:
        return bool(self._v[0] <= other._v[0] and self._v[1] <= other._v[1])

    def __eq__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def isclose(self, other: "Vec2", eps: float = None) -> bool:
        if eps is None:
            eps = Config()["epsilon"]
        return bool(np.all(np.abs(self._v - other._v) <= eps))

    # -------------------------------------------------
    # арифметика (не меняет исходный объект, кроме +=)
    # -------------------------------------------------
    def __add__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2._wrap(self._v + other._v)

    def __sub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2._wrap(self._v - other._v)

    def __iadd__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        self._v = self._v + other._v
        return self

    def __mul__(self, scalar) -> "Vec2":
        if isinstance(scalar, Vec2):
            return NotImplemented
        return Vec2._wrap(self._v * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar) -> "Vec2":
        if isinstance(scalar, Vec2):
            return NotImplemented
        return Vec2._wrap(divide(self._v, scalar))

    def __neg__(self) -> "Vec2":
        return self.inverted()

    def __invert__(self) -> "Vec2":
        """Покомпонентное NOT: логическое для bool, побитовое для int."""
        return Vec2._wrap(~self._v)

    def piece_wise_mul(self, rhs: "Vec2") -> "Vec2":
        return Vec2._wrap(self._v * rhs._v)

    def piece_wise_div(self, rhs: "Vec2") -> "Vec2":
        return Vec2._wrap(divide(self._v, rhs._v))

    def inverted(self) -> "Vec2":
        return Vec2._wrap(-self._v)

    def invert(self) -> None:
        self._v = -self._v

    # -------------------------------------------------
    # геометрия
    # -------------------------------------------------
    def dot(self, rhs: "Vec2"):
        return self._v[0] * rhs._v[0] + self._v[1] * rhs._v[1]

    def cross(self, rhs: "Vec2"):
        """z‑компонента 3D‑произведения (ориентированная площадь)."""
        return self._v[0] * rhs._v[1] - self._v[1] * rhs._v[0]

    def norm2(self):
        return self.dot(self)

    def norm(self):
        return sqrt(self.norm2())

    def normalized(self) -> "Vec2":
        # нулевой вектор даёт nan – это не ошибка
        n = self.norm()
        return Vec2._wrap(divide(self._v, n))

    def normalize(self) -> None:
        n = self.norm()
        self._v = divide(self._v, n)

    def normal(self) -> "Vec2":
        """Единичная нормаль: поворот на 90° (y, -x), делённый на длину."""
        return Vec2(self._v[1], -self._v[0]).normalized()

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def copy(self) -> "Vec2":
        return Vec2._wrap(self._v.copy())

    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator:
        return iter(self._v)

    def as_np(self) -> np.ndarray:
        """Копия 2‑элементного массива."""
        return self._v.copy()

    def to_tuple(self) -> Tuple:
        return tuple(self._v.tolist())

    def __repr__(self):
        return f"Vec2({self._v[0]}, {self._v[1]})"
