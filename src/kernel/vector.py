"""
Vector — векторы фиксированной размерности над скалярным полем

Закрытое семейство из трёх вариантов (immutable Pydantic модели):
- Vector2 {x, y}
- Vector3 {x, y, z}
- Vector4 {r, g, b, a}  (4-кортеж общего назначения, не обязательно цвет)

Скаляр T — либо real field (см. src.kernel.fields), либо Complex.
dot/magnitude имеют ДВЕ отдельные реализации, выбираемые по категории скаляра:
- REAL:    dot = Σ a_i·b_i,                    magnitude = sqrt(dot(v, v))
- COMPLEX: dot = Re(Σ conj(a_i)·b_i),          magnitude = sqrt(Σ (re_i² + im_i²))

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все компоненты вектора имеют один скалярный тип (проверка при создании)
2. Бинарные операции (add, sub, dot, inner, cross) требуют одинаковый вариант
   и одинаковый скалярный тип; иначе VectorOperationFault. Никаких
   усечений, дополнений нулями и значений по умолчанию
3. cross определён только для Vector3 (иначе CrossProductUndefined)
4. scale принимает скаляр типа scalar_type (Complex-вектор — также real field);
   иначе ScalarTypeMismatch
5. Hermitian dot сопрягает ТОЛЬКО левый операнд: inner(u, v) == conj(inner(v, u))
"""

import math
import operator
from functools import reduce
from typing import Any, Callable, ClassVar, Final, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

from src.kernel.complex_number import Complex
from src.kernel.fields import ScalarCategory, is_real_field
from src.kernel.numerics import ieee_sqrt

T = TypeVar("T")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class VectorOperationFault(Exception):
    """
    Структурная ошибка использования векторов (ошибка вызывающего кода).

    Не является runtime-условием для обработки: вызывающий код обязан
    гарантировать совпадение форм до вызова.
    """

    pass


class VectorShapeMismatch(VectorOperationFault):
    """Бинарная операция над векторами разной размерности."""

    pass


class ScalarTypeMismatch(VectorOperationFault):
    """Бинарная операция над векторами с разными скалярными типами."""

    pass


class CrossProductUndefined(VectorShapeMismatch):
    """cross вызван не для пары Vector3."""

    pass


# =============================================================================
# VECTOR MODELS
# =============================================================================


class Vector(BaseModel):
    """
    Базовый класс семейства Vector2 / Vector3 / Vector4.

    Все операции возвращают новый экземпляр того же варианта.
    """

    AXES: ClassVar[tuple[str, ...]] = ()
    dimension: ClassVar[int] = 0

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # numpy scalar * Vector должен уходить в Vector.__rmul__
    __array_ufunc__ = None

    @model_validator(mode="after")
    def validate_uniform_scalar_type(self) -> "Vector":
        """Все компоненты должны иметь один скалярный тип."""
        scalar_types = {type(component) for component in self.components()}
        if len(scalar_types) > 1:
            names = ", ".join(sorted(t.__name__ for t in scalar_types))
            raise ValueError(f"Vector components must share one scalar type, got: {names}")
        return self

    @classmethod
    def of(cls, *components: Any) -> "Vector":
        """
        Вектор по числу компонент.

        Examples:
            >>> Vector.of(1, 2, 3)
            Vector3(x=1, y=2, z=3)
        """
        variant = _VARIANTS_BY_DIMENSION.get(len(components))
        if variant is None:
            raise ValueError(f"Vectors have 2, 3 or 4 components, got {len(components)}")
        return variant(**dict(zip(variant.AXES, components)))

    # ---------- свойства ----------

    def components(self) -> tuple[Any, ...]:
        """Компоненты в порядке AXES."""
        return tuple(getattr(self, axis) for axis in self.AXES)

    @property
    def scalar_type(self) -> type:
        return type(self.components()[0])

    @property
    def category(self) -> ScalarCategory:
        """
        Категория скаляра.

        Raises:
            TypeError: Если скаляр не real field и не Complex
        """
        sample = self.components()[0]
        if isinstance(sample, Complex):
            return ScalarCategory.COMPLEX
        if is_real_field(sample):
            return ScalarCategory.REAL
        raise TypeError(f"Scalar type {type(sample).__name__} is neither a real field nor Complex")

    def _variant(self) -> type["Vector"]:
        # Vector3[float] -> Vector3: без повторной коэрции результата
        return self.__pydantic_generic_metadata__["origin"] or type(self)

    def _rebuild(self, components: Any) -> "Vector":
        variant = self._variant()
        return variant(**dict(zip(variant.AXES, components)))

    # ---------- покомпонентные операции ----------

    def add(self, other: "Vector") -> "Vector":
        _require_same_shape(self, other, "add")
        return self._rebuild(a + b for a, b in zip(self.components(), other.components()))

    def sub(self, other: "Vector") -> "Vector":
        _require_same_shape(self, other, "sub")
        return self._rebuild(a - b for a, b in zip(self.components(), other.components()))

    def scale(self, scalar: Any) -> "Vector":
        """
        Умножение каждой компоненты на скаляр.

        Raises:
            ScalarTypeMismatch: Если тип скаляра не совпадает со scalar_type
                (Complex-вектор также принимает real field скаляр)
        """
        _require_matching_scalar(self, scalar, "scale")
        return self._rebuild(component * scalar for component in self.components())

    def dot(self, other: "Vector") -> Any:
        return dot(self, other)

    def inner(self, other: "Vector") -> Complex:
        return inner(self, other)

    def cross(self, other: "Vector") -> "Vector":
        return cross(self, other)

    def magnitude(self) -> float:
        return magnitude(self)

    # ---------- операторы ----------

    def __add__(self, other: Any) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar: Any) -> "Vector":
        if isinstance(scalar, Vector):
            return NotImplemented
        return self.scale(scalar)

    def __rmul__(self, scalar: Any) -> "Vector":
        if isinstance(scalar, Vector):
            return NotImplemented
        _require_matching_scalar(self, scalar, "scale")
        return self._rebuild(scalar * component for component in self.components())

    def __neg__(self) -> "Vector":
        return self._rebuild(-component for component in self.components())

    def __eq__(self, other: Any) -> bool:
        # покомпонентно: NaN != NaN, как у Complex
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dimension == other.dimension and all(
            a == b for a, b in zip(self.components(), other.components())
        )

    def __hash__(self) -> int:
        return hash((self.dimension, self.components()))


class Vector2(Vector, Generic[T]):
    """2-компонентный вектор {x, y}."""

    AXES = ("x", "y")
    dimension = 2

    x: T
    y: T


class Vector3(Vector, Generic[T]):
    """3-компонентный вектор {x, y, z}; единственный вариант с cross."""

    AXES = ("x", "y", "z")
    dimension = 3

    x: T
    y: T
    z: T


class Vector4(Vector, Generic[T]):
    """4-компонентный вектор {r, g, b, a}."""

    AXES = ("r", "g", "b", "a")
    dimension = 4

    r: T
    g: T
    b: T
    a: T


_VARIANTS_BY_DIMENSION: Final[dict[int, type[Vector]]] = {2: Vector2, 3: Vector3, 4: Vector4}


# =============================================================================
# ПРОВЕРКИ ФОРМЫ
# =============================================================================


def _require_same_shape(left: Vector, right: Any, operation: str) -> None:
    """
    Проверка совпадения варианта и скалярного типа операндов.

    Raises:
        TypeError: Если right не Vector
        VectorShapeMismatch: Если размерности различаются
        ScalarTypeMismatch: Если скалярные типы различаются
    """
    if not isinstance(right, Vector):
        raise TypeError(f"{operation} expects a Vector operand, got {type(right).__name__}")

    if left.dimension != right.dimension:
        raise VectorShapeMismatch(
            f"Mismatched vector types in {operation}: "
            f"{left.dimension}-component vs {right.dimension}-component"
        )

    if left.scalar_type is not right.scalar_type:
        raise ScalarTypeMismatch(
            f"Mismatched scalar types in {operation}: "
            f"{left.scalar_type.__name__} vs {right.scalar_type.__name__}"
        )


def _require_matching_scalar(vector: Vector, scalar: Any, operation: str) -> None:
    """
    Проверка, что скаляр не меняет скалярный тип вектора.

    Raises:
        ScalarTypeMismatch: Если type(scalar) не scalar_type и скаляр не
            real field при Complex-компонентах
    """
    if type(scalar) is vector.scalar_type:
        return
    if isinstance(vector.components()[0], Complex) and is_real_field(scalar):
        return
    raise ScalarTypeMismatch(
        f"Mismatched scalar types in {operation}: "
        f"{vector.scalar_type.__name__} vector vs {type(scalar).__name__} scalar"
    )


# =============================================================================
# DOT / MAGNITUDE: REAL FIELD
# =============================================================================


def _real_dot(left: Vector, right: Vector) -> Any:
    # reduce вместо sum: sum начинает с int 0 и меняет тип для numpy скаляров
    return reduce(operator.add, (a * b for a, b in zip(left.components(), right.components())))


def _real_magnitude(vector: Vector) -> float:
    # int-векторы допустимы: результат всегда float
    return ieee_sqrt(float(_real_dot(vector, vector)))


# =============================================================================
# DOT / MAGNITUDE: COMPLEX (HERMITIAN)
# =============================================================================


def _hermitian_inner(left: Vector, right: Vector) -> Complex:
    return reduce(
        operator.add, (a.conj() * b for a, b in zip(left.components(), right.components()))
    )


def _hermitian_dot(left: Vector, right: Vector) -> float:
    return _hermitian_inner(left, right).real


def _complex_magnitude(vector: Vector) -> float:
    return math.sqrt(
        sum(c.real * c.real + c.imaginary * c.imaginary for c in vector.components())
    )


_DOT_BY_CATEGORY: Final[dict[ScalarCategory, Callable[[Vector, Vector], Any]]] = {
    ScalarCategory.REAL: _real_dot,
    ScalarCategory.COMPLEX: _hermitian_dot,
}

_MAGNITUDE_BY_CATEGORY: Final[dict[ScalarCategory, Callable[[Vector], float]]] = {
    ScalarCategory.REAL: _real_magnitude,
    ScalarCategory.COMPLEX: _complex_magnitude,
}


# =============================================================================
# PUBLIC API
# =============================================================================


def dot(left: Vector, right: Vector) -> Any:
    """
    Скалярное произведение.

    REAL: билинейная сумма Σ a_i·b_i (значение скалярного типа).
    COMPLEX: Re(Σ conj(a_i)·b_i) как float; сопрягается только левый операнд.

    Raises:
        VectorShapeMismatch: Если варианты различаются
        ScalarTypeMismatch: Если скалярные типы различаются
        TypeError: Если скаляр не real field и не Complex

    Examples:
        >>> dot(Vector3(x=1, y=2, z=3), Vector3(x=4, y=5, z=6))
        32
    """
    _require_same_shape(left, right, "dot")
    return _DOT_BY_CATEGORY[left.category](left, right)


def inner(left: Vector, right: Vector) -> Complex:
    """
    Полное Hermitian inner product Σ conj(a_i)·b_i для Complex-векторов.

    Не симметрично: inner(u, v) == inner(v, u).conj().

    Raises:
        VectorShapeMismatch: Если варианты различаются
        ScalarTypeMismatch: Если скалярные типы различаются
        TypeError: Если скаляр не Complex
    """
    _require_same_shape(left, right, "inner")
    if left.category is not ScalarCategory.COMPLEX:
        raise TypeError(f"inner expects Complex components, got {left.scalar_type.__name__}")
    return _hermitian_inner(left, right)


def magnitude(vector: Vector) -> float:
    """
    Евклидова норма (неотрицательный float).

    REAL: sqrt(dot(v, v)); COMPLEX: sqrt(Σ (re_i² + im_i²)).

    Examples:
        >>> magnitude(Vector2(x=3, y=4))
        5.0
    """
    return _MAGNITUDE_BY_CATEGORY[vector.category](vector)


def cross(left: Vector, right: Vector) -> Vector:
    """
    Векторное произведение в 3-D:
        (y1·z2 − z1·y2, z1·x2 − x1·z2, x1·y2 − y1·x2)

    Raises:
        CrossProductUndefined: Если хотя бы один операнд не Vector3
        ScalarTypeMismatch: Если скалярные типы различаются

    Examples:
        >>> cross(Vector3(x=1, y=0, z=0), Vector3(x=0, y=1, z=0))
        Vector3(x=0, y=0, z=1)
    """
    if not (isinstance(left, Vector3) and isinstance(right, Vector3)):
        raise CrossProductUndefined(
            f"Cross product is defined for 3-component vectors only, "
            f"got {type(left).__name__} x {type(right).__name__}"
        )
    _require_same_shape(left, right, "cross")

    return left._rebuild(
        (
            left.y * right.z - left.z * right.y,
            left.z * right.x - left.x * right.z,
            left.x * right.y - left.y * right.x,
        )
    )
