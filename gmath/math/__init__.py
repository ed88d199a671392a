"""
Математический суб‑пакет: Vector и скалярные типы.
"""

from gmath.math.scalar import (
    Scalar, Sqrt, FloatScalar, F32, F64, I32,
    register_scalar, get_scalar, infer_scalar,
)
from gmath.math.vector import (
    Vector, add, subtract, scale, scale_left, dot, dot3, cross,
)

__all__ = [
    "Scalar", "Sqrt", "FloatScalar", "F32", "F64", "I32",
    "register_scalar", "get_scalar", "infer_scalar",
    "Vector", "add", "subtract", "scale", "scale_left", "dot", "dot3", "cross",
]
