"""
Numeric kernel: Complex и векторы фиксированной размерности.

Complex — комплексное число двойной точности.
Vector2 / Vector3 / Vector4 — векторы над real field или Complex,
с Hermitian dot/magnitude для Complex-скаляров.
"""

# Numerics
from src.kernel.numerics import (
    DEFAULT_TOLERANCE,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    Tolerance,
    ieee_cos,
    ieee_divide,
    ieee_exp,
    ieee_sin,
    ieee_sqrt,
    is_close,
)

# Fields
from src.kernel.fields import RealField, ScalarCategory, is_real_field

# Complex
from src.kernel.complex_number import Complex

# Vector
from src.kernel.vector import (
    CrossProductUndefined,
    ScalarTypeMismatch,
    Vector,
    Vector2,
    Vector3,
    Vector4,
    VectorOperationFault,
    VectorShapeMismatch,
    cross,
    dot,
    inner,
    magnitude,
)

__all__ = [
    # Numerics — Constants
    "DEFAULT_TOLERANCE",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerics — Types
    "Tolerance",
    # Numerics — Functions
    "ieee_cos",
    "ieee_divide",
    "ieee_exp",
    "ieee_sin",
    "ieee_sqrt",
    "is_close",
    # Fields
    "RealField",
    "ScalarCategory",
    "is_real_field",
    # Complex
    "Complex",
    # Vector — Exceptions
    "CrossProductUndefined",
    "ScalarTypeMismatch",
    "VectorOperationFault",
    "VectorShapeMismatch",
    # Vector — Types
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    # Vector — Functions
    "cross",
    "dot",
    "inner",
    "magnitude",
]
