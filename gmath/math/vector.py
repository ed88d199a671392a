# gmath/math/vector.py
# -*- coding: utf-8 -*-
"""
Трёхкомпонентный вектор над скалярным типом T (f32 / f64 / i32).

2D‑вектор – тот же Vector с z = 0.  Значение неизменяемо: каждый
оператор возвращает новый объект.  Сравнение точное (покомпонентное),
без допуска – для float это честное сравнение битов.
"""

from typing import Tuple

import numpy as np

from gmath.math.scalar import (
    Scalar,
    get_scalar,
    has_sqrt,
    infer_scalar,
    coerce_operand,
    promote_left,
)

# перестановки компонент для векторного произведения
_YZX = [1, 2, 0]
_ZXY = [2, 0, 1]


class Vector:
    """Вектор (x, y, z) над скаляром `scalar`."""

    __slots__ = ("_v", "_scalar")

    # numpy‑скаляр слева отдаёт операцию в __rmul__, а не в ufunc
    __array_ufunc__ = None

    def __init__(self, x=0, y=0, z=0, scalar=None):
        if scalar is None:
            scalar = infer_scalar(x, y, z)
        s = get_scalar(scalar)
        v = np.array([s.coerce(x), s.coerce(y), s.coerce(z)], dtype=s.dtype)
        v.flags.writeable = False
        self._v = v
        self._scalar = s

    @classmethod
    def _wrap(cls, array: np.ndarray, scalar: Scalar) -> "Vector":
        obj = cls.__new__(cls)
        array = np.asarray(array, dtype=scalar.dtype)
        array.flags.writeable = False
        obj._v = array
        obj._scalar = scalar
        return obj

    # -----------------------------------------------------------------
    # конструкторы
    # -----------------------------------------------------------------
    @classmethod
    def new(cls, x, y, z, scalar=None) -> "Vector":
        return cls(x, y, z, scalar=scalar)

    @classmethod
    def new_2d(cls, x, y, scalar=None) -> "Vector":
        """Плоский вектор: z = ноль скаляра."""
        if scalar is None:
            scalar = infer_scalar(x, y)
        s = get_scalar(scalar)
        return cls(x, y, s.zero(), scalar=s)

    @classmethod
    def zero(cls, scalar=None) -> "Vector":
        s = get_scalar(scalar) if scalar is not None else infer_scalar()
        return cls._wrap(np.zeros(3, dtype=s.dtype), s)

    # -----------------------------------------------------------------
    # доступ к компонентам (только чтение)
    # -----------------------------------------------------------------
    def v(self) -> Tuple:
        """Компоненты (x, y, z) как кортеж numpy‑скаляров."""
        return (self._v[0], self._v[1], self._v[2])

    @property
    def x(self):
        return self._v[0]

    @property
    def y(self):
        return self._v[1]

    @property
    def z(self):
        return self._v[2]

    @property
    def scalar(self) -> Scalar:
        return self._scalar

    def to_tuple(self) -> Tuple:
        return tuple(self._v.tolist())

    def as_np(self) -> np.ndarray:
        """Копия 3‑элементного массива (dtype скаляра)."""
        return self._v.copy()

    def __iter__(self):
        return iter(self.v())

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    # -----------------------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -----------------------------------------------------------------
    def _same_scalar(self, other) -> bool:
        return isinstance(other, Vector) and other._scalar is self._scalar

    def add(self, other: "Vector") -> "Vector":
        """V + V -> V"""
        if not self._same_scalar(other):
            raise TypeError(f"Cannot add {other!r} to {self!r}")
        return Vector._wrap(self._scalar.add(self._v, other._v), self._scalar)

    def subtract(self, other: "Vector") -> "Vector":
        """V - V -> V"""
        if not self._same_scalar(other):
            raise TypeError(f"Cannot subtract {other!r} from {self!r}")
        return Vector._wrap(self._scalar.sub(self._v, other._v), self._scalar)

    def scale(self, a) -> "Vector":
        """V * a -> V (a – скаляр того же типа T)."""
        w = coerce_operand(a, self._scalar)
        if w is None:
            raise TypeError(
                f"Cannot scale a {self._scalar.name} vector by {type(a).__name__}"
            )
        return Vector._wrap(self._scalar.mul(self._v, w), self._scalar)

    def scale_left(self, a) -> "Vector":
        """a * V -> V по таблице LEFT_MUL_RULES."""
        w = promote_left(a, self._scalar)
        if w is None:
            raise TypeError(
                f"No rule for {type(a).__name__} * {self._scalar.name} vector"
            )
        return Vector._wrap(self._scalar.mul(w, self._v), self._scalar)

    def cross(self, other: "Vector") -> "Vector":
        """Векторное произведение (полное 3D)."""
        if not self._same_scalar(other):
            raise TypeError(f"Cannot cross {self!r} with {other!r}")
        s = self._scalar
        a, b = self._v, other._v
        return Vector._wrap(
            s.sub(s.mul(a[_YZX], b[_ZXY]), s.mul(a[_ZXY], b[_YZX])), s
        )

    def dot(self, other: "Vector"):
        """
        Скалярное произведение по X и Y: x1*x2 + y1*y2.

        Компонента Z не участвует (вектор используется для 2D‑работы);
        полное произведение – dot3().
        """
        if not self._same_scalar(other):
            raise TypeError(f"Cannot dot {self!r} with {other!r}")
        s = self._scalar
        a, b = self._v, other._v
        return s.add(s.mul(a[0], b[0]), s.mul(a[1], b[1]))

    planar_dot = dot

    def dot3(self, other: "Vector"):
        """Скалярное произведение по всем трём компонентам."""
        s = self._scalar
        return s.add(self.dot(other), s.mul(self._v[2], other._v[2]))

    def length(self):
        """sqrt(dot(V, V)) – требует скаляр со способностью sqrt."""
        if not has_sqrt(self._scalar):
            raise TypeError(f"{self._scalar.name} scalar has no square root")
        return self._scalar.sqrt(self.dot(self))

    def is_zero(self) -> bool:
        return bool(self.length() == self._scalar.zero())

    # -----------------------------------------------------------------
    # операторы – сахар над методами выше
    # -----------------------------------------------------------------
    def __add__(self, other):
        if not self._same_scalar(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not self._same_scalar(other):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        # V * V – векторное произведение, V * a – умножение на скаляр
        if isinstance(other, Vector):
            return self.cross(other) if self._same_scalar(other) else NotImplemented
        if coerce_operand(other, self._scalar) is None:
            return NotImplemented
        return self.scale(other)

    def __rmul__(self, other):
        if promote_left(other, self._scalar) is None:
            return NotImplemented
        return self.scale_left(other)

    def __xor__(self, other):
        if not self._same_scalar(other):
            return NotImplemented
        return self.cross(other)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        if other._scalar is not self._scalar:
            return False
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self):
        return hash((self._scalar.name, self.to_tuple()))

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __str__(self):
        return f"({self._v[0]}, {self._v[1]}, {self._v[2]})"

    def __repr__(self):
        x, y, z = self.v()
        return f"Vector({x}, {y}, {z}, scalar={self._scalar.name!r})"


# -----------------------------------------------------------------
# именованные функции (операторы выше – только сахар)
# -----------------------------------------------------------------
def add(a: Vector, b: Vector) -> Vector:
    return a.add(b)


def subtract(a: Vector, b: Vector) -> Vector:
    return a.subtract(b)


def scale(v: Vector, a) -> Vector:
    return v.scale(a)


def scale_left(a, v: Vector) -> Vector:
    return v.scale_left(a)


def dot(a: Vector, b: Vector):
    return a.dot(b)


def dot3(a: Vector, b: Vector):
    return a.dot3(b)


def cross(a: Vector, b: Vector) -> Vector:
    return a.cross(b)
