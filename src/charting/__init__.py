"""Charting — адаптер трасс итераций к наложенному линейному графику.

- Общие шкалы для двух трасс разной длины
- Ломаные в пиксельных координатах и легенда
- Payload по контракту comparison_chart
"""

from .comparison import (
    DEFAULT_SERIES_COLORS,
    DEFAULT_SERIES_LABELS,
    ChartLayout,
    ChartMargin,
    LegendEntry,
    Polyline,
    TraceComparison,
    build_legend,
    compare_traces,
    shared_domains,
)
from .scales import LinearScale

__all__ = [
    "DEFAULT_SERIES_COLORS",
    "DEFAULT_SERIES_LABELS",
    "ChartLayout",
    "ChartMargin",
    "LegendEntry",
    "LinearScale",
    "Polyline",
    "TraceComparison",
    "build_legend",
    "compare_traces",
    "shared_domains",
]
