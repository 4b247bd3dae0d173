"""
Fixed-Point Iteration Engine

Детерминированный расчёт трассы сходимости одномерной рекуррентной
функции x_{k+1} = f(x_k) от заданного стартового значения.

Алгоритм:
    records[0] = (0, x0, x0)                          # seed
    repeat:
        curr = f(prev)
        records.append((k, prev, curr))
    until |curr - prev| <= tolerance                  # post-condition

Цикл ограничен max_iterations шагами: при превышении лимита
выбрасывается NonConvergence вместо бесконечного цикла.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Минимум один реальный шаг после seed (даже при огромной толерантности)
2. Остановка ровно на первом шаге с |delta| <= tolerance
3. NaN/Inf и ошибки домена f → NumericDivergence, трасса не возвращается
4. Движок не логирует и не подавляет ошибки, только пробрасывает их
5. Чистая функция: одинаковые входы → одинаковая трасса
"""

import logging
from dataclasses import dataclass
from typing import Callable, Final

from src.core.domain.iteration import IterationRecord, IterationTrace
from src.core.math.annuity import annuity_rate_recurrence
from src.core.math.numerical_safeguards import is_valid_float

logger = logging.getLogger(__name__)

Recurrence = Callable[[float], float]

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Абсолютная толерантность остановки |x_k - x_{k-1}|
DEFAULT_TOLERANCE: Final[float] = 1e-5

# Лимит реальных шагов итерации (без seed)
MAX_ITERATIONS_DEFAULT: Final[int] = 10_000


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FixedPointError(Exception):
    """Базовая ошибка движка итераций."""


class InvalidParameter(FixedPointError, ValueError):
    """
    Невалидные входные параметры: tolerance ≤ 0, нечисловое или
    бесконечное стартовое значение, max_iterations < 1.

    Выбрасывается до первой итерации.
    """


class NumericDivergence(FixedPointError):
    """
    Рекуррентная функция вернула NaN/Inf или упала на ошибке домена
    (деление на ноль, отрицательное основание степени, переполнение).
    """

    def __init__(self, message: str, iteration: int, value: float):
        super().__init__(message)
        self.iteration = iteration
        self.value = value


class NonConvergence(FixedPointError):
    """
    Толерантность не достигнута за max_iterations шагов.

    Частичная трасса доступна через records для диагностики.
    """

    def __init__(
        self,
        message: str,
        records: tuple[IterationRecord, ...],
        max_iterations: int,
        last_delta: float,
    ):
        super().__init__(message)
        self.records = records
        self.max_iterations = max_iterations
        self.last_delta = last_delta

    @property
    def partial_trace(self) -> IterationTrace:
        return IterationTrace(records=self.records)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class IterationConfig:
    """Конфигурация движка итераций."""

    tolerance: float = DEFAULT_TOLERANCE
    max_iterations: int = MAX_ITERATIONS_DEFAULT


# =============================================================================
# ENGINE
# =============================================================================


class FixedPointIterator:
    """
    Движок итераций неподвижной точки.

    Рекуррентная функция передаётся при вызове iterate (стратегия),
    по умолчанию используется рекуррентное соотношение ставки аннуитета.
    """

    def __init__(self, config: IterationConfig | None = None):
        """Инициализация движка.

        Args:
            config: конфигурация (опционально, используется default)

        Raises:
            InvalidParameter: если tolerance или max_iterations невалидны
        """
        self.config = config or IterationConfig()
        _validate_config(self.config)

    def iterate(
        self,
        initial_value: float,
        recurrence: Recurrence | None = None,
    ) -> IterationTrace:
        """
        Расчёт полной трассы итераций от initial_value.

        Args:
            initial_value: Стартовое приближение x0 (конечное число)
            recurrence: Рекуррентная функция f (default: ставка аннуитета)

        Returns:
            IterationTrace, последние две записи которой удовлетворяют
            |new_value - old_value| <= tolerance

        Raises:
            InvalidParameter: если initial_value NaN/Inf или не число
            NumericDivergence: если f вернула NaN/Inf или упала
            NonConvergence: если лимит шагов исчерпан
        """
        if not is_valid_float(initial_value):
            raise InvalidParameter(
                f"initial_value must be a finite real number, got {initial_value!r}"
            )

        f = recurrence or annuity_rate_recurrence
        tolerance = self.config.tolerance
        max_iterations = self.config.max_iterations

        x0 = float(initial_value)
        records = [IterationRecord(iteration=0, old_value=x0, new_value=x0)]

        prev = x0
        delta = float("inf")
        for k in range(1, max_iterations + 1):
            curr = _apply(f, prev, k)
            records.append(IterationRecord(iteration=k, old_value=prev, new_value=curr))

            delta = abs(curr - prev)
            if delta <= tolerance:
                logger.debug(
                    "Converged from x0=%.10g after %d iterations: x=%.10g (delta=%.3e)",
                    x0,
                    k,
                    curr,
                    delta,
                )
                return IterationTrace(records=tuple(records))

            prev = curr

        raise NonConvergence(
            f"No convergence from x0={x0} within {max_iterations} iterations "
            f"(tolerance={tolerance}, last delta={delta:.6e})",
            records=tuple(records),
            max_iterations=max_iterations,
            last_delta=delta,
        )


# =============================================================================
# HELPERS
# =============================================================================


def _validate_config(config: IterationConfig) -> None:
    if not is_valid_float(config.tolerance) or config.tolerance <= 0:
        raise InvalidParameter(
            f"tolerance must be a positive finite number, got {config.tolerance!r}"
        )

    if (
        isinstance(config.max_iterations, bool)
        or not isinstance(config.max_iterations, int)
        or config.max_iterations < 1
    ):
        raise InvalidParameter(
            f"max_iterations must be a positive integer, got {config.max_iterations!r}"
        )


def _apply(f: Recurrence, value: float, iteration: int) -> float:
    """Одно применение f с конвертацией ошибок домена в NumericDivergence."""
    try:
        result = f(value)
    except (ArithmeticError, ValueError) as e:
        raise NumericDivergence(
            f"Recurrence failed at iteration {iteration} for value={value!r}: {e}",
            iteration=iteration,
            value=value,
        ) from e

    if not is_valid_float(result):
        raise NumericDivergence(
            f"Recurrence produced non-finite value {result!r} at iteration {iteration} "
            f"(input value={value!r})",
            iteration=iteration,
            value=value,
        )

    return float(result)


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================


def iterate(
    initial_value: float,
    tolerance: float = DEFAULT_TOLERANCE,
    recurrence: Recurrence | None = None,
    max_iterations: int = MAX_ITERATIONS_DEFAULT,
) -> IterationTrace:
    """
    Трасса итераций неподвижной точки от initial_value.

    Examples:
        >>> trace = iterate(0.08)
        >>> trace[0].iteration, trace[0].old_value, trace[0].new_value
        (0, 0.08, 0.08)
        >>> abs(trace.final_value - 0.16) < 1e-3
        True
    """
    config = IterationConfig(tolerance=tolerance, max_iterations=max_iterations)
    return FixedPointIterator(config).iterate(initial_value, recurrence)
