"""
Complex — комплексное число двойной точности

Immutable Pydantic модель (frozen=True): каждая операция возвращает новый
экземпляр, операнды никогда не изменяются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Равенство покомпонентное и точное по правилам IEEE-754 (NaN != NaN,
   без epsilon); для приближённых сравнений — Complex.is_close
2. Ни одна операция не бросает исключение по численным причинам:
   деление на 0 + 0i даёт NaN/±Inf компоненты по правилам IEEE-754
3. argument() = atan2(imaginary, real) — угол от вещественной оси в (−π, π];
   −π (real < 0, imaginary = −0.0) приводится к π

ФОРМУЛЫ для (a + bi), (c + di):
    (a + bi)(c + di) = (ac − bd) + (ad + bc)i
    (a + bi)/(c + di) = ((ac + bd) + (bc − ad)i) / D,  D = c² + d²
    exp(a + bi) = e^a · (cos b + i·sin b)
"""

import math
from typing import Any

from pydantic import BaseModel, Field

from src.kernel.fields import is_real_field
from src.kernel.numerics import (
    DEFAULT_TOLERANCE,
    Tolerance,
    ieee_cos,
    ieee_divide,
    ieee_exp,
    ieee_sin,
    is_close,
)


class Complex(BaseModel):
    """
    Комплексное число real + imaginary·i.

    Complex() — нулевой элемент (0, 0), нейтральный по сложению.
    Вещественный скаляр s в смешанных операциях:
    - z + s, z - s: применяется только к real
    - z * s, z / s: применяется к обоим компонентам
    """

    real: float = Field(default=0.0, strict=True, description="Вещественная часть")
    imaginary: float = Field(default=0.0, strict=True, description="Мнимая часть")

    model_config = {"frozen": True}  # Immutable

    # numpy scalar + Complex должен уходить в Complex.__radd__
    __array_ufunc__ = None

    def __init__(self, real: float = 0.0, imaginary: float = 0.0, **data: Any) -> None:
        super().__init__(real=real, imaginary=imaginary, **data)

    # ---------- конструкторы ----------

    @classmethod
    def zero(cls) -> "Complex":
        """Нулевой элемент (0, 0)."""
        return cls(0.0, 0.0)

    @classmethod
    def from_polar(cls, r: float, theta: float) -> "Complex":
        """
        r·e^{iθ} в прямоугольной форме.

        Examples:
            >>> Complex.from_polar(2.0, 0.0)
            Complex(real=2.0, imaginary=0.0)
        """
        return cls(r * ieee_cos(theta), r * ieee_sin(theta))

    @classmethod
    def from_builtin(cls, value: complex) -> "Complex":
        """Конверсия из builtin complex."""
        return cls(value.real, value.imag)

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    # ---------- арифметика Complex × Complex ----------

    def add(self, other: "Complex") -> "Complex":
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    def sub(self, other: "Complex") -> "Complex":
        return Complex(self.real - other.real, self.imaginary - other.imaginary)

    def mul(self, other: "Complex") -> "Complex":
        return Complex(
            self.real * other.real - self.imaginary * other.imaginary,
            self.real * other.imaginary + self.imaginary * other.real,
        )

    def div(self, other: "Complex") -> "Complex":
        """
        Деление на комплексное число.

        При other == 0 + 0i результат содержит NaN/±Inf (IEEE-754),
        исключение не бросается.

        Examples:
            >>> Complex(1, 2).div(Complex(3, 4))  # doctest: +SKIP
            Complex(real=0.44, imaginary=0.08)
        """
        denom = other.real * other.real + other.imaginary * other.imaginary
        return Complex(
            ieee_divide(self.real * other.real + self.imaginary * other.imaginary, denom),
            ieee_divide(self.imaginary * other.real - self.real * other.imaginary, denom),
        )

    def neg(self) -> "Complex":
        return Complex(-self.real, -self.imaginary)

    def conj(self) -> "Complex":
        """Сопряжённое число (a, −b)."""
        return Complex(self.real, -self.imaginary)

    # ---------- полярные свойства ----------

    def magnitude(self) -> float:
        """
        Модуль sqrt(a² + b²), всегда неотрицательный (или NaN).

        math.hypot не переполняется на промежуточных квадратах.
        """
        return math.hypot(self.real, self.imaginary)

    def argument(self) -> float:
        """
        Аргумент atan2(imaginary, real) в радианах, диапазон (−π, π].

        Examples:
            >>> Complex(0, 1).argument() == math.pi / 2
            True
            >>> Complex(-1, 0).argument() == math.pi
            True
            >>> Complex(-1.0, -0.0).argument() == math.pi
            True
        """
        angle = math.atan2(self.imaginary, self.real)
        # atan2(−0.0, x < 0) == −π: граница интервала (−π, π]
        if angle == -math.pi:
            return math.pi
        return angle

    def exp(self) -> "Complex":
        """Комплексная экспонента e^a · (cos b + i·sin b)."""
        scale = ieee_exp(self.real)
        return Complex(scale * ieee_cos(self.imaginary), scale * ieee_sin(self.imaginary))

    # ---------- сравнения ----------

    def __eq__(self, other: Any) -> bool:
        """
        Точное покомпонентное равенство по правилам IEEE-754.

        Examples:
            >>> Complex(1, 2) == Complex(1.0, 2.0)
            True
            >>> z = Complex(float("nan"), 0.0)
            >>> z == z
            False
        """
        if not isinstance(other, Complex):
            return NotImplemented
        return self.real == other.real and self.imaginary == other.imaginary

    def __hash__(self) -> int:
        return hash((self.real, self.imaginary))

    def is_close(self, other: "Complex", tolerance: Tolerance = DEFAULT_TOLERANCE) -> bool:
        """Покомпонентное приближённое сравнение."""
        return is_close(
            self.real, other.real, rel_tol=tolerance.rel_tol, abs_tol=tolerance.abs_tol
        ) and is_close(
            self.imaginary, other.imaginary, rel_tol=tolerance.rel_tol, abs_tol=tolerance.abs_tol
        )

    # ---------- операторы ----------

    def __add__(self, other: Any) -> "Complex":
        if isinstance(other, Complex):
            return self.add(other)
        if is_real_field(other):
            return Complex(self.real + float(other), self.imaginary)
        return NotImplemented

    def __radd__(self, other: Any) -> "Complex":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "Complex":
        if isinstance(other, Complex):
            return self.sub(other)
        if is_real_field(other):
            return Complex(self.real - float(other), self.imaginary)
        return NotImplemented

    def __rsub__(self, other: Any) -> "Complex":
        if is_real_field(other):
            return Complex(float(other) - self.real, -self.imaginary)
        return NotImplemented

    def __mul__(self, other: Any) -> "Complex":
        if isinstance(other, Complex):
            return self.mul(other)
        if is_real_field(other):
            scalar = float(other)
            return Complex(self.real * scalar, self.imaginary * scalar)
        return NotImplemented

    def __rmul__(self, other: Any) -> "Complex":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "Complex":
        if isinstance(other, Complex):
            return self.div(other)
        if is_real_field(other):
            scalar = float(other)
            return Complex(ieee_divide(self.real, scalar), ieee_divide(self.imaginary, scalar))
        return NotImplemented

    def __rtruediv__(self, other: Any) -> "Complex":
        if is_real_field(other):
            return Complex(float(other), 0.0).div(self)
        return NotImplemented

    def __neg__(self) -> "Complex":
        return self.neg()

    def __abs__(self) -> float:
        return self.magnitude()
