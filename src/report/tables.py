"""Табличное представление трасс итераций.

Значения форматируются с фиксированным числом знаков после запятой
(5 по умолчанию), номер итерации выводится как целое.
"""

from typing import Final

from src.core.domain.iteration import IterationTrace

DEFAULT_DECIMALS: Final[int] = 5

TABLE_HEADERS: Final[tuple[str, str, str]] = ("Iteration", "Old Value", "New Value")


def format_value(value: float, decimals: int = DEFAULT_DECIMALS) -> str:
    """
    Форматирование значения с фиксированным числом знаков.

    Examples:
        >>> format_value(0.08)
        '0.08000'
        >>> format_value(0.1599934, decimals=3)
        '0.160'
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    return f"{value:.{decimals}f}"


def format_trace_rows(
    trace: IterationTrace,
    decimals: int = DEFAULT_DECIMALS,
) -> list[tuple[str, str, str]]:
    """Строки таблицы (iteration, old_value, new_value) в виде строк."""
    return [
        (
            str(record.iteration),
            format_value(record.old_value, decimals),
            format_value(record.new_value, decimals),
        )
        for record in trace.records
    ]


def render_trace_table(
    trace: IterationTrace,
    title: str | None = None,
    decimals: int = DEFAULT_DECIMALS,
) -> str:
    """
    Текстовая таблица трассы с выравниванием колонок.

    Args:
        trace: Трасса итераций
        title: Заголовок над таблицей (опционально)
        decimals: Число знаков после запятой

    Returns:
        Многострочная строка без завершающего перевода строки
    """
    rows = format_trace_rows(trace, decimals)
    widths = [
        max(len(TABLE_HEADERS[col]), *(len(row[col]) for row in rows))
        for col in range(len(TABLE_HEADERS))
    ]

    def _line(cells: tuple[str, ...]) -> str:
        return " | ".join(cell.rjust(width) for cell, width in zip(cells, widths))

    separator = "-+-".join("-" * width for width in widths)

    lines = []
    if title:
        lines.append(title)
    lines.append(_line(TABLE_HEADERS))
    lines.append(separator)
    lines.extend(_line(row) for row in rows)
    return "\n".join(lines)


def trace_table_title(initial_value: float) -> str:
    return f"Table for Initial Value: {initial_value:g}"
