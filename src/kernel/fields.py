"""
Fields — категории скалярных типов

Скаляр вектора относится ровно к одной категории:
- REAL: "real field" — builtin int/float и numpy fixed-width типы
  (все signed/unsigned integer, float32, float64), замкнутые по + и *
- COMPLEX: src.kernel.complex_number.Complex

bool (и np.bool_) НЕ является real field, хотя bool — подкласс int;
np.timedelta64 — тоже, хотя наследует np.signedinteger.
"""

from abc import ABC
from enum import Enum
from typing import Any, Final

import numpy as np


class ScalarCategory(str, Enum):
    """Категория скалярного типа (определяет реализацию dot/magnitude)"""

    REAL = "real"
    COMPLEX = "complex"


class RealField(ABC):
    """
    Capability interface "real field".

    Не наследуется напрямую: числовые примитивы регистрируются через
    RealField.register, после чего isinstance(value, RealField) истинно.
    """


# Signed и unsigned integers: абстрактные классы numpy покрывают все
# fixed-width типы, включая platform-алиасы (np.longlong, np.ulonglong, np.intc)
_INTEGERS: Final[tuple[type, ...]] = (np.signedinteger, np.unsignedinteger)

# Floating-point types
_FLOATS: Final[tuple[type, ...]] = (np.float32, np.float64)

for _scalar_type in (int, float, *_INTEGERS, *_FLOATS):
    RealField.register(_scalar_type)


def is_real_field(value: Any) -> bool:
    """
    Проверка, является ли значение скаляром категории REAL.

    Examples:
        >>> is_real_field(3)
        True
        >>> is_real_field(np.uint8(3))
        True
        >>> is_real_field(True)
        False
        >>> is_real_field("3")
        False
    """
    # np.timedelta64 наследует np.signedinteger
    if isinstance(value, (bool, np.bool_, np.timedelta64)):
        return False
    return isinstance(value, RealField)
