# gmath/math/scalar.py
# ---------------------------------------------------------------
# Скалярные типы для Vector:
# - базовая способность (ноль, +, -, *),
# - отдельная, более узкая способность sqrt (нужна только length/is_zero),
# - реестр конкретных типов (f32, f64, i32),
# - правила приведения левого множителя для a * V.
# ---------------------------------------------------------------

import numbers
from abc import ABC, abstractmethod

import numpy as np

from gmath.utils.logger import logger


class Scalar:
    """
    Базовая способность скаляра: ноль, сложение, вычитание, умножение.

    Операции принимают как одиночные numpy‑скаляры, так и массивы
    компонент – numpy сохраняет dtype в обоих случаях.
    """

    def __init__(self, name: str, dtype):
        self.name = name
        self.dtype = np.dtype(dtype).type

    @property
    def is_integer(self) -> bool:
        return issubclass(self.dtype, np.integer)

    def zero(self):
        return self.dtype(0)

    def coerce(self, value):
        """Привести число к этому типу без молчаливого усечения."""
        if isinstance(value, (bool, np.bool_)):
            raise TypeError(f"bool is not a {self.name} scalar")
        if not isinstance(value, numbers.Real):
            raise TypeError(
                f"{type(value).__name__!r} is not a real number ({self.name})"
            )
        if type(value) is self.dtype:
            return value
        if self.is_integer:
            if not isinstance(value, numbers.Integral):
                if not float(value).is_integer():
                    raise ValueError(
                        f"{value!r} would be truncated to {self.name}"
                    )
            info = np.iinfo(self.dtype)
            value = int(value)
            if not info.min <= value <= info.max:
                raise OverflowError(f"{value} is out of {self.name} range")
        return self.dtype(value)

    # -----------------------------------------------------------------
    # целые считаются в int64 и проверяются на выход из диапазона
    # -----------------------------------------------------------------
    def _wide(self, value):
        if self.is_integer:
            return np.asarray(value, dtype=np.int64)
        return value

    def _narrow(self, value):
        if not self.is_integer:
            return value
        info = np.iinfo(self.dtype)
        if np.any(value < info.min) or np.any(value > info.max):
            raise OverflowError(f"{self.name} arithmetic overflow")
        out = np.asarray(value).astype(self.dtype)
        return out[()] if out.ndim == 0 else out

    def add(self, a, b):
        return self._narrow(self._wide(a) + self._wide(b))

    def sub(self, a, b):
        return self._narrow(self._wide(a) - self._wide(b))

    def mul(self, a, b):
        return self._narrow(self._wide(a) * self._wide(b))

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, {self.dtype.__name__})"


class Sqrt(ABC):
    """Способность извлекать квадратный корень."""

    @abstractmethod
    def sqrt(self, value):
        ...


class FloatScalar(Scalar, Sqrt):
    """Скаляр с плавающей точкой – умеет всё, включая sqrt."""

    def sqrt(self, value):
        return self.dtype(np.sqrt(value))


def has_sqrt(scalar: Scalar) -> bool:
    return isinstance(scalar, Sqrt)


# -----------------------------------------------------------------
# реестр
# -----------------------------------------------------------------
_BY_NAME = {}
_BY_DTYPE = {}


def register_scalar(scalar: Scalar) -> Scalar:
    """Зарегистрировать конкретный скалярный тип (по имени и по dtype)."""
    _BY_NAME[scalar.name] = scalar
    _BY_DTYPE[scalar.dtype] = scalar
    logger.debug(f"[Scalar] Registered {scalar!r}")
    return scalar


F32 = register_scalar(FloatScalar("f32", np.float32))
F64 = register_scalar(FloatScalar("f64", np.float64))
I32 = register_scalar(Scalar("i32", np.int32))


def get_scalar(key) -> Scalar:
    """Scalar по экземпляру, имени ("f64") или numpy‑типу."""
    if isinstance(key, Scalar):
        return key
    if isinstance(key, str):
        try:
            return _BY_NAME[key]
        except KeyError:
            raise KeyError(f"Unknown scalar type: {key!r}") from None
    try:
        return _BY_DTYPE[np.dtype(key).type]
    except (TypeError, KeyError):
        raise KeyError(f"Unknown scalar type: {key!r}") from None


# тип литералов без numpy‑типа; не зависит от окружения
DEFAULT_SCALAR = F64


def default_scalar() -> Scalar:
    return DEFAULT_SCALAR


def infer_scalar(*components) -> Scalar:
    """
    Тип первой numpy‑компоненты зарегистрированного dtype, иначе – F64.
    """
    for c in components:
        if isinstance(c, np.generic) and type(c) in _BY_DTYPE:
            return _BY_DTYPE[type(c)]
    return default_scalar()


# -----------------------------------------------------------------
# V * a: правый множитель обязан быть T (литералы приводятся к T)
# -----------------------------------------------------------------
def coerce_operand(value, scalar: Scalar):
    """Правый скалярный множитель в типе вектора или None, если тип чужой."""
    if isinstance(value, np.generic):
        return value if type(value) is scalar.dtype else None
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    return scalar.coerce(value)


# -----------------------------------------------------------------
# a * V: по одному правилу на каждую пару конкретных типов.
# (тип левого скаляра, тип компонент вектора) -> рабочий тип
# -----------------------------------------------------------------
LEFT_MUL_RULES = {
    (np.float64, np.float64): np.float64,
    (np.float32, np.float32): np.float32,
    (np.int32, np.float64): np.float64,
    (np.int32, np.int32): np.int32,
}


def _left_type(value, scalar: Scalar):
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, np.generic):
        return type(value)
    if isinstance(value, int):
        return np.int32
    if isinstance(value, float):
        # литерал без типа принимает плавающий тип вектора
        return scalar.dtype if not scalar.is_integer else None
    return None


def promote_left(value, scalar: Scalar):
    """Левый множитель, приведённый к рабочему типу, или None – правила нет."""
    left = _left_type(value, scalar)
    if left is None:
        return None
    target = LEFT_MUL_RULES.get((left, scalar.dtype))
    if target is None:
        return None
    if left is np.int32:
        value = I32.coerce(value)
        if target is not np.int32:
            logger.debug(f"[Scalar] Promoting int32 {value} to {target.__name__}")
    return get_scalar(target).coerce(value)
