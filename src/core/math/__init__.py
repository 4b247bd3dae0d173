"""
Core math modules

Численные примитивы, рекуррентное соотношение ставки аннуитета
и движок итераций неподвижной точки.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_CALC,
    is_degenerate_range,
    is_valid_float,
    normalize_to_range,
    validate_finite,
    validate_positive,
)

# Annuity recurrence
from src.core.math.annuity import (
    ANNUITY_PAYMENT_DEFAULT,
    ANNUITY_PERIODS_DEFAULT,
    ANNUITY_PRINCIPAL_DEFAULT,
    DEFAULT_ANNUITY_PARAMETERS,
    AnnuityParameters,
    annuity_present_value,
    annuity_rate_recurrence,
    make_annuity_recurrence,
)

# Fixed-point engine
from src.core.math.fixed_point import (
    DEFAULT_TOLERANCE,
    MAX_ITERATIONS_DEFAULT,
    FixedPointError,
    FixedPointIterator,
    InvalidParameter,
    IterationConfig,
    NonConvergence,
    NumericDivergence,
    Recurrence,
    iterate,
)

__all__ = [
    # Numerical Safeguards
    "EPS_CALC",
    "is_degenerate_range",
    "is_valid_float",
    "normalize_to_range",
    "validate_finite",
    "validate_positive",
    # Annuity — Constants
    "ANNUITY_PAYMENT_DEFAULT",
    "ANNUITY_PERIODS_DEFAULT",
    "ANNUITY_PRINCIPAL_DEFAULT",
    "DEFAULT_ANNUITY_PARAMETERS",
    # Annuity — Types
    "AnnuityParameters",
    # Annuity — Functions
    "annuity_present_value",
    "annuity_rate_recurrence",
    "make_annuity_recurrence",
    # Fixed-point — Constants
    "DEFAULT_TOLERANCE",
    "MAX_ITERATIONS_DEFAULT",
    # Fixed-point — Exceptions
    "FixedPointError",
    "InvalidParameter",
    "NonConvergence",
    "NumericDivergence",
    # Fixed-point — Types
    "FixedPointIterator",
    "IterationConfig",
    "Recurrence",
    # Fixed-point — Functions
    "iterate",
]
