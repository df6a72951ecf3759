"""
Numerics — IEEE-754 примитивы и float-сравнения

Модуль обеспечивает единые численные правила для всего ядра:
- Деление, exp, cos, sin, sqrt по правилам IEEE-754 (NaN/Inf вместо исключений)
- Epsilon-сравнения float с учётом машинной точности
- Tolerance — единственная конфигурация ядра

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна численная операция не бросает исключение (ZeroDivisionError,
   OverflowError, ValueError из math.* заменяются на NaN/Inf)
2. NaN/Inf пропагируют как обычные float, санитизации нет
3. Результат всегда builtin float (не numpy scalar)
"""

import math
from typing import Final

import numpy as np
from pydantic import BaseModel, Field

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


class Tolerance(BaseModel):
    """
    Толерантности для приближённых сравнений.

    Immutable модель (frozen=True). Точное равенство Complex/Vector
    не зависит от Tolerance; она используется только в is_close.
    """

    rel_tol: float = Field(default=EPS_FLOAT_COMPARE_REL, ge=0, description="Относительная толерантность")
    abs_tol: float = Field(default=EPS_FLOAT_COMPARE_ABS, ge=0, description="Абсолютная толерантность")

    model_config = {"frozen": True}


DEFAULT_TOLERANCE: Final[Tolerance] = Tolerance()


# =============================================================================
# IEEE-754 ПРИМИТИВЫ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE-754.

    В отличие от оператора `/`, никогда не бросает ZeroDivisionError.

    Args:
        numerator: Числитель
        denominator: Знаменатель (может быть 0.0, NaN, Inf)

    Returns:
        numerator / denominator; при denominator == 0:
        - ±inf если numerator != 0
        - nan если numerator == 0 или NaN

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    with np.errstate(all="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def ieee_exp(value: float) -> float:
    """
    e^value без OverflowError.

    Examples:
        >>> ieee_exp(0.0)
        1.0
        >>> ieee_exp(1000.0)
        inf
    """
    with np.errstate(all="ignore"):
        return float(np.exp(np.float64(value)))


def ieee_cos(value: float) -> float:
    """cos(value); cos(±inf) = nan вместо ValueError."""
    with np.errstate(all="ignore"):
        return float(np.cos(np.float64(value)))


def ieee_sin(value: float) -> float:
    """sin(value); sin(±inf) = nan вместо ValueError."""
    with np.errstate(all="ignore"):
        return float(np.sin(np.float64(value)))


def ieee_sqrt(value: float) -> float:
    """
    Квадратный корень; sqrt(x < 0) = nan вместо ValueError.

    Examples:
        >>> ieee_sqrt(25.0)
        5.0
        >>> ieee_sqrt(float("inf"))
        inf
    """
    with np.errstate(all="ignore"):
        return float(np.sqrt(np.float64(value)))


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм (math.isclose):
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности.
        NaN никогда не близок ни к чему, inf близок только к самому себе.

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(0.44, 0.44000000000000006)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
