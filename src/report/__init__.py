"""Report — табличное представление трасс и сессия сравнения двух стартовых значений."""

from .session import (
    FIRST_INITIAL_VALUE_DEFAULT,
    SECOND_INITIAL_VALUE_DEFAULT,
    ComparisonSession,
    SlotView,
)
from .tables import (
    DEFAULT_DECIMALS,
    TABLE_HEADERS,
    format_trace_rows,
    format_value,
    render_trace_table,
    trace_table_title,
)

__all__ = [
    "FIRST_INITIAL_VALUE_DEFAULT",
    "SECOND_INITIAL_VALUE_DEFAULT",
    "ComparisonSession",
    "SlotView",
    "DEFAULT_DECIMALS",
    "TABLE_HEADERS",
    "format_trace_rows",
    "format_value",
    "render_trace_table",
    "trace_table_title",
]
