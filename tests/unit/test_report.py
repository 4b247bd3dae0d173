"""Тесты для табличного представления и сессии сравнения

Покрытие:
- Форматирование значений с фиксированным числом знаков
- Текстовая таблица трассы
- Мемоизация трасс по стартовому значению
- Пустое состояние отображения при ошибке движка
"""

import logging

import pytest

from src.core.math.fixed_point import (
    IterationConfig,
    NonConvergence,
    NumericDivergence,
    iterate,
)
from src.report import (
    TABLE_HEADERS,
    ComparisonSession,
    format_trace_rows,
    format_value,
    render_trace_table,
    trace_table_title,
)


# =============================================================================
# TABLES
# =============================================================================


class TestFormatValue:
    def test_five_decimals_by_default(self):
        assert format_value(0.08) == "0.08000"
        assert format_value(0.22) == "0.22000"

    def test_rounding(self):
        assert format_value(0.123456) == "0.12346"
        assert format_value(0.1599934, decimals=3) == "0.160"

    def test_zero_decimals(self):
        assert format_value(2.6, decimals=0) == "3"

    def test_negative_decimals_rejected(self):
        with pytest.raises(ValueError):
            format_value(0.1, decimals=-1)


class TestTraceRows:
    def test_rows_match_trace(self):
        trace = iterate(0.08)
        rows = format_trace_rows(trace)
        assert len(rows) == len(trace)
        assert rows[0] == ("0", "0.08000", "0.08000")
        assert rows[1][0] == "1"
        assert rows[1][1] == "0.08000"
        assert rows[1][2] == format_value(trace[1].new_value)

    def test_old_value_column_repeats_previous_new_value(self):
        rows = format_trace_rows(iterate(0.22))
        for previous, current in zip(rows, rows[1:]):
            assert current[1] == previous[2]


class TestRenderTraceTable:
    def test_layout(self):
        trace = iterate(0.08, tolerance=1.0)
        table = render_trace_table(trace, title=trace_table_title(0.08))
        lines = table.splitlines()
        assert lines[0] == "Table for Initial Value: 0.08"
        assert lines[1] == "Iteration | Old Value | New Value"
        assert set(lines[2]) == {"-", "+"}
        assert lines[3].split(" | ") == [" " * 8 + "0", "  0.08000", "  0.08000"]
        assert len(lines) == 3 + len(trace)

    def test_without_title(self):
        table = render_trace_table(iterate(0.22))
        assert table.splitlines()[0] == " | ".join(TABLE_HEADERS)

    def test_columns_aligned(self):
        table = render_trace_table(iterate(0.08, tolerance=1e-8))
        widths = {len(line) for line in table.splitlines()}
        assert len(widths) == 1


# =============================================================================
# SESSION
# =============================================================================


class TestComparisonSession:
    def test_default_initial_values(self):
        session = ComparisonSession()
        assert session.initial_values == (0.08, 0.22)

    def test_views_hold_engine_traces(self):
        session = ComparisonSession()
        first, second = session.views()
        assert first.trace == iterate(0.08)
        assert second.trace == iterate(0.22)
        assert not first.is_empty
        assert first.error is None

    def test_lazy_and_memoized(self):
        session = ComparisonSession()
        assert session.computations == 0
        session.views()
        assert session.computations == 2
        session.views()
        session.comparison()
        assert session.computations == 2

    def test_same_value_does_not_recompute(self):
        session = ComparisonSession()
        session.views()
        session.set_initial_value(0, 0.08)
        session.views()
        assert session.computations == 2

    def test_changed_value_recomputes_only_that_slot(self):
        session = ComparisonSession()
        _, second_before = session.views()
        session.set_initial_value(0, 0.05)
        first, second = session.views()
        assert session.computations == 3
        assert first.initial_value == 0.05
        assert first.trace[0].new_value == 0.05
        assert second is second_before

    def test_comparison(self):
        session = ComparisonSession()
        comparison = session.comparison()
        assert comparison is not None
        assert [line.initial_value for line in comparison.polylines] == [0.08, 0.22]

    def test_error_becomes_empty_display_state(self, caplog):
        session = ComparisonSession(first=-1.0)
        with caplog.at_level(logging.WARNING, logger="src.report.session"):
            first, second = session.views()

        assert first.is_empty
        assert isinstance(first.error, NumericDivergence)
        assert second.trace is not None
        assert session.comparison() is None
        assert any("failed" in record.getMessage() for record in caplog.records)

    def test_non_convergence_becomes_empty_display_state(self):
        session = ComparisonSession(
            config=IterationConfig(max_iterations=2), recurrence=lambda x: -x
        )
        first, second = session.views()
        assert isinstance(first.error, NonConvergence)
        assert isinstance(second.error, NonConvergence)

    def test_recovers_after_new_initial_value(self):
        session = ComparisonSession(first=-1.0)
        assert session.view(0).is_empty
        session.set_initial_value(0, 0.1)
        assert not session.view(0).is_empty
        assert session.comparison() is not None

    @pytest.mark.parametrize("slot", [-1, 2])
    def test_invalid_slot(self, slot):
        session = ComparisonSession()
        with pytest.raises(IndexError):
            session.view(slot)
        with pytest.raises(IndexError):
            session.set_initial_value(slot, 0.1)
