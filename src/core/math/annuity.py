"""
Annuity — рекуррентное соотношение для ставки аннуитета

Ставка r аннуитета с платежом A, телом P и числом периодов n
удовлетворяет уравнению неподвижной точки:

    P = A × (1 - (1 + r)^-n) / r
    ⇔ r = (A / P) × ((1 + r)^n - 1) / (1 + r)^n

Правая часть — рекуррентная функция f(r), которую движок
итераций применяет до сходимости.

ДОМЕН:
    1 + r > 0. Ставки r ≤ -1 лежат вне домена и дают ValueError,
    который движок итераций превращает в NumericDivergence.
"""

import math
from functools import partial
from typing import Callable, Final

from pydantic import BaseModel, Field

from src.core.math.numerical_safeguards import validate_finite

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Платёж за период (A)
ANNUITY_PAYMENT_DEFAULT: Final[float] = 50000.0

# Тело (present value) аннуитета (P)
ANNUITY_PRINCIPAL_DEFAULT: Final[float] = 273400.0

# Количество периодов (n)
ANNUITY_PERIODS_DEFAULT: Final[float] = 14.0


# =============================================================================
# PARAMETERS MODEL
# =============================================================================


class AnnuityParameters(BaseModel):
    """
    Константы рекуррентного соотношения (A, P, n).

    Immutable модель (frozen=True): параметры задаются один раз на процесс
    и не редактируются во время расчёта.
    """

    payment: float = Field(
        ANNUITY_PAYMENT_DEFAULT, gt=0, allow_inf_nan=False, description="Платёж за период (A)"
    )
    principal: float = Field(
        ANNUITY_PRINCIPAL_DEFAULT, gt=0, allow_inf_nan=False, description="Тело аннуитета (P)"
    )
    periods: float = Field(
        ANNUITY_PERIODS_DEFAULT, gt=0, allow_inf_nan=False, description="Количество периодов (n)"
    )

    model_config = {"frozen": True}  # Immutable

    @property
    def payment_ratio(self) -> float:
        """A / P — множитель перед дисконтным фактором."""
        return self.payment / self.principal


DEFAULT_ANNUITY_PARAMETERS: Final[AnnuityParameters] = AnnuityParameters()


# =============================================================================
# RECURRENCE
# =============================================================================


def _growth_factor(rate: float, periods: float) -> float:
    """(1 + rate)^periods с проверкой домена."""
    validate_finite(rate, "rate")

    base = 1.0 + rate
    if base <= 0:
        raise ValueError(f"Rate {rate} outside annuity domain: 1 + rate must be > 0")

    # math.pow вместо **: при дробном n никогда не возвращает complex
    return math.pow(base, periods)


def annuity_rate_recurrence(
    value: float,
    params: AnnuityParameters = DEFAULT_ANNUITY_PARAMETERS,
) -> float:
    """
    Одно применение рекуррентного соотношения для ставки аннуитета.

    f(r) = (A / P) × ((1 + r)^n - 1) / (1 + r)^n

    Args:
        value: Текущее приближение ставки r
        params: Константы A, P, n

    Returns:
        Следующее приближение ставки

    Raises:
        ValueError: Если 1 + value ≤ 0 или value NaN/Inf
        ZeroDivisionError: Если (1 + value)^n обнуляется (underflow)
        OverflowError: Если (1 + value)^n переполняет float

    Examples:
        >>> round(annuity_rate_recurrence(0.0), 12)
        0.0
        >>> abs(annuity_rate_recurrence(0.16) - 0.16) < 1e-3
        True
    """
    growth = _growth_factor(value, params.periods)
    return params.payment_ratio * (growth - 1.0) / growth


def make_annuity_recurrence(params: AnnuityParameters) -> Callable[[float], float]:
    """
    Связывание параметров с рекуррентной функцией.

    Returns:
        Чистая функция value -> next_value для движка итераций
    """
    return partial(annuity_rate_recurrence, params=params)


def annuity_present_value(
    rate: float,
    params: AnnuityParameters = DEFAULT_ANNUITY_PARAMETERS,
) -> float:
    """
    Present value аннуитета при ставке rate: A × (1 - (1 + r)^-n) / r.

    При rate == 0 возвращает предел A × n. Используется для проверки
    найденной неподвижной точки: PV(r*) ≈ P.

    Examples:
        >>> annuity_present_value(0.0)
        700000.0
    """
    if rate == 0:
        return params.payment * params.periods

    growth = _growth_factor(rate, params.periods)
    return params.payment * (1.0 - 1.0 / growth) / rate
