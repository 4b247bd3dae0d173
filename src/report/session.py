"""Comparison Session — состояние сравнения двух стартовых значений.

Сессия хранит два слота (первое и второе стартовое значение) и трассу
для каждого. Трасса пересчитывается только если стартовое значение слота
изменилось (мемоизация по равенству входа); движок итераций сам по себе
ничего не кэширует.

Ошибки движка (NumericDivergence, NonConvergence, InvalidParameter)
не пробрасываются наружу: слот переходит в пустое состояние отображения
(нет трассы, нет графика), а ошибка логируется и доступна в SlotView.error.
"""

import logging
from dataclasses import dataclass
from typing import Final

from src.charting.comparison import ChartLayout, TraceComparison, compare_traces
from src.core.domain.iteration import IterationTrace
from src.core.math.fixed_point import (
    FixedPointError,
    FixedPointIterator,
    IterationConfig,
    Recurrence,
)

logger = logging.getLogger(__name__)

FIRST_INITIAL_VALUE_DEFAULT: Final[float] = 0.08
SECOND_INITIAL_VALUE_DEFAULT: Final[float] = 0.22

SLOT_COUNT: Final[int] = 2


@dataclass(frozen=True)
class SlotView:
    """Состояние отображения одного слота."""

    initial_value: float
    trace: IterationTrace | None
    error: FixedPointError | None = None

    @property
    def is_empty(self) -> bool:
        return self.trace is None


class ComparisonSession:
    """Сравнение сходимости для двух стартовых значений.

    Example:
        >>> session = ComparisonSession()
        >>> session.set_initial_value(1, 0.3)
        >>> [view.initial_value for view in session.views()]
        [0.08, 0.3]
    """

    def __init__(
        self,
        first: float = FIRST_INITIAL_VALUE_DEFAULT,
        second: float = SECOND_INITIAL_VALUE_DEFAULT,
        config: IterationConfig | None = None,
        recurrence: Recurrence | None = None,
        layout: ChartLayout | None = None,
    ):
        self._iterator = FixedPointIterator(config)
        self._recurrence = recurrence
        self._layout = layout
        self._initial_values = [first, second]
        self._views: list[SlotView | None] = [None] * SLOT_COUNT
        self.computations = 0

    @property
    def initial_values(self) -> tuple[float, float]:
        return (self._initial_values[0], self._initial_values[1])

    def set_initial_value(self, slot: int, value: float) -> None:
        """Смена стартового значения слота (0 или 1).

        Кэш слота сбрасывается только если значение действительно изменилось.
        """
        self._check_slot(slot)
        if value == self._initial_values[slot]:
            return

        self._initial_values[slot] = value
        self._views[slot] = None

    def view(self, slot: int) -> SlotView:
        """Состояние слота, с пересчётом трассы при необходимости."""
        self._check_slot(slot)
        cached = self._views[slot]
        if cached is None:
            cached = self._compute(self._initial_values[slot])
            self._views[slot] = cached
        return cached

    def views(self) -> tuple[SlotView, SlotView]:
        return (self.view(0), self.view(1))

    def comparison(self) -> TraceComparison | None:
        """Сравнительный график, или None если хотя бы один слот пуст."""
        first, second = self.views()
        if first.trace is None or second.trace is None:
            return None
        return compare_traces(first.trace, second.trace, layout=self._layout)

    def _compute(self, initial_value: float) -> SlotView:
        self.computations += 1
        try:
            trace = self._iterator.iterate(initial_value, self._recurrence)
        except FixedPointError as e:
            logger.warning("Iteration from initial value %r failed: %s", initial_value, e)
            return SlotView(initial_value=initial_value, trace=None, error=e)

        return SlotView(initial_value=initial_value, trace=trace)

    @staticmethod
    def _check_slot(slot: int) -> None:
        if slot not in range(SLOT_COUNT):
            raise IndexError(f"slot must be 0 or 1, got {slot}")
