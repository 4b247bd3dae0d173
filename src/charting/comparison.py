"""Trace Comparison — подготовка двух трасс к наложенному линейному графику

Адаптер между движком итераций и слоем отрисовки:
- Общий x-domain [0, max(последний номер итерации обеих трасс)]
- Общий y-domain [0, max(new_value по обеим трассам)]
- По одной ломаной (Polyline) на трассу в пиксельных координатах
- Легенда (цвет + подпись) в правом верхнем углу

Никаких вычислений кроме линейного масштабирования: все численно значимые
данные приходят из IterationTrace. Трассы могут быть разной длины.
"""

from dataclasses import dataclass, field
from typing import Any, Final

from src.charting.scales import LinearScale
from src.core.domain.iteration import IterationTrace
from src.core.math.numerical_safeguards import validate_positive


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_SERIES_COLORS: Final[tuple[str, str]] = ("blue", "red")
DEFAULT_SERIES_LABELS: Final[tuple[str, str]] = ("Initial Value 1", "Initial Value 2")

X_AXIS_TITLE: Final[str] = "Iterations"
Y_AXIS_TITLE: Final[str] = "Iterated Value"

# Размер цветного квадрата легенды и шаг между строками
LEGEND_SWATCH_SIZE: Final[float] = 15.0
LEGEND_ROW_STEP: Final[float] = 20.0


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ChartMargin:
    top: float = 20.0
    right: float = 30.0
    bottom: float = 50.0
    left: float = 50.0


@dataclass(frozen=True)
class ChartLayout:
    """Геометрия графика в пикселях (ось Y направлена вниз, как в SVG)."""

    width: float = 500.0
    height: float = 400.0
    margin: ChartMargin = field(default_factory=ChartMargin)

    def __post_init__(self) -> None:
        validate_positive(self.width, "width")
        validate_positive(self.height, "height")
        if self.width <= self.margin.left + self.margin.right:
            raise ValueError(f"width {self.width} leaves no room for plot area")
        if self.height <= self.margin.top + self.margin.bottom:
            raise ValueError(f"height {self.height} leaves no room for plot area")

    @property
    def x_range(self) -> tuple[float, float]:
        return (self.margin.left, self.width - self.margin.right)

    @property
    def y_range(self) -> tuple[float, float]:
        # Значение 0 внизу, максимум вверху
        return (self.height - self.margin.bottom, self.margin.top)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Polyline:
    """Ломаная одной трассы."""

    label: str
    color: str
    initial_value: float
    points: tuple[tuple[float, float], ...]  # (x_px, y_px)
    data: tuple[tuple[int, float], ...]  # (iteration, new_value)


@dataclass(frozen=True)
class LegendEntry:
    label: str
    color: str
    swatch_x: float
    swatch_y: float
    text_x: float
    text_y: float
    swatch_size: float = LEGEND_SWATCH_SIZE


@dataclass(frozen=True)
class TraceComparison:
    """Результат подготовки сравнительного графика."""

    layout: ChartLayout
    x_domain: tuple[float, float]
    y_domain: tuple[float, float]
    x_scale: LinearScale
    y_scale: LinearScale
    polylines: tuple[Polyline, ...]
    legend: tuple[LegendEntry, ...]

    def chart_payload(self) -> dict[str, Any]:
        """JSON-совместимый payload по контракту comparison_chart."""
        return {
            "xDomain": list(self.x_domain),
            "yDomain": list(self.y_domain),
            "width": self.layout.width,
            "height": self.layout.height,
            "xTitle": X_AXIS_TITLE,
            "yTitle": Y_AXIS_TITLE,
            "series": [
                {
                    "label": line.label,
                    "color": line.color,
                    "initialValue": line.initial_value,
                    "points": [
                        {"iteration": iteration, "newValue": value}
                        for iteration, value in line.data
                    ],
                    "pixels": [list(point) for point in line.points],
                }
                for line in self.polylines
            ],
        }


# =============================================================================
# ADAPTER
# =============================================================================


def shared_domains(
    traces: tuple[IterationTrace, ...],
) -> tuple[tuple[float, float], tuple[float, float]]:
    """
    Общие domain осей для набора трасс.

    Returns:
        (x_domain, y_domain):
            - x_domain = (0, max последнего номера итерации)
            - y_domain = (0, max new_value по всем записям)
    """
    if not traces:
        raise ValueError("At least one trace is required")

    max_iteration = max(trace.last.iteration for trace in traces)
    max_value = max(max(trace.values()) for trace in traces)
    return (0.0, float(max_iteration)), (0.0, float(max_value))


def compare_traces(
    first: IterationTrace,
    second: IterationTrace,
    layout: ChartLayout | None = None,
    labels: tuple[str, str] = DEFAULT_SERIES_LABELS,
    colors: tuple[str, str] = DEFAULT_SERIES_COLORS,
) -> TraceComparison:
    """
    Подготовка двух трасс к наложенному графику.

    Args:
        first: Трасса для первого стартового значения
        second: Трасса для второго стартового значения
        layout: Геометрия графика (default: 500×400, отступы 20/30/50/50)
        labels: Подписи легенды
        colors: Цвета ломаных

    Returns:
        TraceComparison с общими шкалами, ломаными и легендой
    """
    layout = layout or ChartLayout()
    traces = (first, second)

    x_domain, y_domain = shared_domains(traces)
    x_scale = LinearScale(domain=x_domain, range=layout.x_range)
    y_scale = LinearScale(domain=y_domain, range=layout.y_range)

    polylines = tuple(
        Polyline(
            label=label,
            color=color,
            initial_value=trace.initial_value,
            points=tuple(
                (x_scale(record.iteration), y_scale(record.new_value))
                for record in trace.records
            ),
            data=tuple((record.iteration, record.new_value) for record in trace.records),
        )
        for trace, label, color in zip(traces, labels, colors)
    )

    return TraceComparison(
        layout=layout,
        x_domain=x_domain,
        y_domain=y_domain,
        x_scale=x_scale,
        y_scale=y_scale,
        polylines=polylines,
        legend=build_legend(layout, labels, colors),
    )


def build_legend(
    layout: ChartLayout,
    labels: tuple[str, ...],
    colors: tuple[str, ...],
) -> tuple[LegendEntry, ...]:
    """Легенда в правом верхнем углу: квадрат цвета + подпись справа."""
    swatch_x = layout.width - layout.margin.right - 100.0
    text_x = layout.width - layout.margin.right - 80.0

    entries = []
    for row, (label, color) in enumerate(zip(labels, colors)):
        swatch_y = 10.0 + row * LEGEND_ROW_STEP
        entries.append(
            LegendEntry(
                label=label,
                color=color,
                swatch_x=swatch_x,
                swatch_y=swatch_y,
                text_x=text_x,
                text_y=swatch_y + 12.0,
            )
        )
    return tuple(entries)
