"""
gmath – обобщённая векторная алгебра 2D/3D над numpy‑скалярами.
"""

from gmath.utils import logger, Config
from gmath.math import (
    Vector, Scalar, Sqrt, FloatScalar, F32, F64, I32,
    register_scalar, get_scalar,
    add, subtract, scale, scale_left, dot, dot3, cross,
)

__version__ = "0.1.0"

__all__ = [
    "Vector",
    "Scalar",
    "Sqrt",
    "FloatScalar",
    "F32",
    "F64",
    "I32",
    "register_scalar",
    "get_scalar",
    "add",
    "subtract",
    "scale",
    "scale_left",
    "dot",
    "dot3",
    "cross",
    "logger",
    "Config",
]
