# vecmat/math/scalar.py
# ---------------------------------------------------------------
# Адаптеры типов элементов: квадратный корень для float32/float64,
# которым пользуется Norm.
# ---------------------------------------------------------------

import numpy as np
from vecmat.math.traits import Sqrt


def sqrt(value):
    """
    Корень скаляра с сохранением его типа.

    * np.float32            → np.float32
    * float / np.float64    → np.float64
    * int / np.integer      → np.float64 (целых корней не бывает)
    * объект с методом sqrt() (например Decimal) → value.sqrt()

    Отрицательный аргумент даёт nan, без предупреждений.
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("sqrt is not defined for bool elements")
    with np.errstate(invalid="ignore"):
        if isinstance(value, np.float32):
            return np.sqrt(value)
        if isinstance(value, (float, np.float64)):
            return np.sqrt(np.float64(value))
        if isinstance(value, (int, np.integer)):
            return np.sqrt(np.float64(value))
    if isinstance(value, Sqrt):
        return value.sqrt()
    raise TypeError(f"sqrt is not defined for {type(value).__name__}")


def divide(a, b) -> np.ndarray:
    """
    Деление с сохранением типа элементов.

    Целое на целое – как в языках с фиксированными целыми: результат
    усекается к нулю, dtype делимого сохраняется, деление на ноль –
    ZeroDivisionError. Всё остальное – обычное `/`, где inf/nan от деления
    на ноль просто распространяются, без предупреждений.
    """
    a = np.asarray(a)
    b = np.asarray(b)
    if a.dtype.kind in "iu" and b.dtype.kind in "iu":
        if np.any(b == 0):
            raise ZeroDivisionError("integer division by zero")
        dtype = a.dtype if b.ndim == 0 else np.result_type(a, b)
        q = np.abs(a) // np.abs(b)
        return np.where((a < 0) != (b < 0), -q, q).astype(dtype)
    with np.errstate(divide="ignore", invalid="ignore"):
        return a / b
