"""
Numerical Safeguards — проверки и нормализация для итерационных расчётов

Модуль содержит численные примитивы, общие для движка итераций и
адаптера графиков:
- Проверка конечности значений (NaN/Inf никогда не попадают в трассу)
- Валидация входных параметров (толерантность, стартовое значение)
- Линейное отображение диапазонов (масштабирование осей графика)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf детектируются, а не санитизируются молча
2. Все операции детерминированы и воспроизводимы
"""

import math
import numbers
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для защиты от вырожденных диапазонов (old_min == old_max)
EPS_CALC: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ КОНЕЧНОСТИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение конечным вещественным числом.

    Принимается любой numbers.Real (float, int, Fraction, скаляры numpy).
    Комплексные числа, bool и нечисловые объекты считаются невалидными.

    Examples:
        >>> is_valid_float(0.16)
        True
        >>> is_valid_float(float('nan'))
        False
        >>> is_valid_float(complex(1, 1))
        False
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf или не является числом
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a finite real number, got {value!r}")


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение конечное и строго положительное.

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


# =============================================================================
# НОРМАЛИЗАЦИЯ ДИАПАЗОНОВ
# =============================================================================


def is_degenerate_range(lo: float, hi: float, eps: float = EPS_CALC) -> bool:
    """True если диапазон [lo, hi] схлопнут в точку (с учётом eps)."""
    return abs(hi - lo) < eps


def normalize_to_range(
    value: float,
    old_min: float,
    old_max: float,
    new_min: float = 0.0,
    new_max: float = 1.0,
    eps: float = EPS_CALC,
) -> float:
    """
    Линейное отображение значения из одного диапазона в другой.

    Значения вне исходного диапазона экстраполируются (без clamp).
    Целевой диапазон может быть «перевёрнутым» (new_min > new_max),
    как ось Y в экранных координатах.

    Args:
        value: Исходное значение
        old_min: Начало исходного диапазона
        old_max: Конец исходного диапазона
        new_min: Начало целевого диапазона (default: 0.0)
        new_max: Конец целевого диапазона (default: 1.0)
        eps: Epsilon для детекции вырожденного диапазона

    Returns:
        Отображённое значение

    Raises:
        ValueError: Если old_min == old_max

    Examples:
        >>> normalize_to_range(5.0, 0.0, 10.0, 0.0, 1.0)
        0.5
        >>> normalize_to_range(0.0, 0.0, 10.0, 350.0, 20.0)
        350.0
    """
    if is_degenerate_range(old_min, old_max, eps):
        raise ValueError("old_min and old_max cannot be equal")

    fraction = (value - old_min) / (old_max - old_min)
    return new_min + fraction * (new_max - new_min)
