# vecmat/math/traits.py
"""
Протоколы‑возможности (структурная типизация).

Каждая операция требует только то, что ей нужно: функции, которой нужен
лишь dot(), достаточно `Dot`, а не общего интерфейса "число/вектор".
Vec2 и Vec3 удовлетворяют Dot, Cross, Norm, Invert, PieceWiseMul и
PieceWiseDiv; `Sqrt` описывает скаляры, умеющие считать свой корень.
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Dot(Protocol):
    def dot(self, rhs: Any) -> Any:
        """Сумма попарных произведений компонент."""
        ...


@runtime_checkable
class Cross(Protocol):
    def cross(self, rhs: Any) -> Any:
        """2D – скаляр (z‑компонента), 3D – ортогональный вектор."""
        ...


@runtime_checkable
class Sqrt(Protocol):
    def sqrt(self) -> Any:
        ...


@runtime_checkable
class Norm(Protocol):
    def norm(self) -> Any:
        """Евклидова длина."""
        ...

    def norm2(self) -> Any:
        """Квадрат длины (= dot(self, self))."""
        ...

    def normalized(self: T) -> T:
        ...

    def normalize(self) -> None:
        ...


@runtime_checkable
class PieceWiseMul(Protocol):
    def piece_wise_mul(self: T, rhs: T) -> T:
        ...


@runtime_checkable
class PieceWiseDiv(Protocol):
    def piece_wise_div(self: T, rhs: T) -> T:
        ...


@runtime_checkable
class Invert(Protocol):
    def inverted(self: T) -> T:
        """Копия с противоположным знаком каждой компоненты."""
        ...

    def invert(self) -> None:
        ...


__all__ = [
    "Dot", "Cross", "Sqrt", "Norm", "PieceWiseMul", "PieceWiseDiv", "Invert",
]
