"""
Core math modules для universal-time

Численные примитивы и алгоритм нормализации тройки времени.
"""

# Numerical Safeguards
from universal_time.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_NANOSECONDS_ABS,
    # Checks
    as_integral,
    is_valid_float,
    # Epsilon comparisons
    compare_with_tolerance,
)

# Normalization
from universal_time.core.math.normalization import (
    NANOSECONDS_PER_SECOND,
    SECONDS_PER_DAY,
    CarryMode,
    NonFiniteTimeError,
    TimeTriple,
    carry,
    coerce_triple,
    correct_sign,
    is_in_order,
    normalize,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_NANOSECONDS_ABS",
    # Numerical Safeguards — Checks
    "as_integral",
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "compare_with_tolerance",
    # Normalization — Constants
    "NANOSECONDS_PER_SECOND",
    "SECONDS_PER_DAY",
    # Normalization — Exceptions
    "NonFiniteTimeError",
    # Normalization — Types
    "CarryMode",
    "TimeTriple",
    # Normalization — Functions
    "carry",
    "coerce_triple",
    "correct_sign",
    "is_in_order",
    "normalize",
]
