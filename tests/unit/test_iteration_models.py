"""
Тесты для доменных моделей трассы: IterationRecord, IterationTrace

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Инварианты трассы (seed, цепочка, нумерация, непустота)
3. Immutability (frozen=True)
4. Сериализацию/десериализацию с wire-именами oldValue/newValue
"""

import json

import pytest
from pydantic import ValidationError

from src.core.domain import IterationRecord, IterationTrace


def _record(iteration: int, old: float, new: float) -> IterationRecord:
    return IterationRecord(iteration=iteration, old_value=old, new_value=new)


# =============================================================================
# ITERATION RECORD TESTS
# =============================================================================


class TestIterationRecord:
    """Тесты для модели IterationRecord"""

    def test_creation(self) -> None:
        record = _record(1, 0.08, 0.12)
        assert record.iteration == 1
        assert record.old_value == 0.08
        assert record.new_value == 0.12
        assert record.delta == pytest.approx(0.04)
        assert not record.is_seed

    def test_seed(self) -> None:
        assert _record(0, 0.22, 0.22).is_seed

    def test_creation_by_alias(self) -> None:
        record = IterationRecord.model_validate({"iteration": 2, "oldValue": 0.1, "newValue": 0.2})
        assert record.old_value == 0.1
        assert record.new_value == 0.2

    def test_negative_iteration_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _record(-1, 0.1, 0.1)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_values_rejected(self, bad: float) -> None:
        with pytest.raises(ValidationError):
            _record(1, 0.1, bad)
        with pytest.raises(ValidationError):
            _record(1, bad, 0.1)

    def test_immutable(self) -> None:
        record = _record(1, 0.08, 0.12)
        with pytest.raises(ValidationError):
            record.new_value = 0.5


# =============================================================================
# ITERATION TRACE TESTS
# =============================================================================


class TestIterationTrace:
    """Тесты для модели IterationTrace"""

    @pytest.fixture
    def valid_trace(self) -> IterationTrace:
        return IterationTrace(
            records=(
                _record(0, 0.08, 0.08),
                _record(1, 0.08, 0.12),
                _record(2, 0.12, 0.14),
            )
        )

    def test_accessors(self, valid_trace: IterationTrace) -> None:
        assert len(valid_trace) == 3
        assert valid_trace.steps == 2
        assert valid_trace.seed == valid_trace[0]
        assert valid_trace.last == valid_trace[2]
        assert valid_trace[-1].iteration == 2
        assert valid_trace.initial_value == 0.08
        assert valid_trace.final_value == 0.14
        assert valid_trace.values() == [0.08, 0.12, 0.14]

    def test_seed_only_trace_allowed(self) -> None:
        trace = IterationTrace(records=(_record(0, 0.5, 0.5),))
        assert len(trace) == 1
        assert trace.steps == 0

    def test_empty_trace_rejected(self) -> None:
        with pytest.raises(ValidationError):
            IterationTrace(records=())

    def test_seed_mismatch_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Seed record"):
            IterationTrace(records=(_record(0, 0.08, 0.09),))

    def test_broken_chain_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Broken chain"):
            IterationTrace(
                records=(
                    _record(0, 0.08, 0.08),
                    _record(1, 0.08, 0.12),
                    _record(2, 0.13, 0.14),
                )
            )

    def test_wrong_numbering_rejected(self) -> None:
        with pytest.raises(ValidationError, match="position 1"):
            IterationTrace(records=(_record(0, 0.08, 0.08), _record(2, 0.08, 0.12)))

    def test_immutable(self, valid_trace: IterationTrace) -> None:
        with pytest.raises(ValidationError):
            valid_trace.records = ()

    def test_structural_equality(self, valid_trace: IterationTrace) -> None:
        copy = IterationTrace(records=tuple(valid_trace.records))
        assert copy == valid_trace

    def test_to_contract_uses_wire_names(self, valid_trace: IterationTrace) -> None:
        data = valid_trace.to_contract()
        assert data["records"][1] == {"iteration": 1, "oldValue": 0.08, "newValue": 0.12}
        # JSON-совместимость
        assert json.loads(json.dumps(data)) == data

    def test_contract_round_trip(self, valid_trace: IterationTrace) -> None:
        assert IterationTrace.model_validate(valid_trace.to_contract()) == valid_trace

    def test_chart_points(self, valid_trace: IterationTrace) -> None:
        assert valid_trace.chart_points() == [
            {"iteration": 0, "newValue": 0.08},
            {"iteration": 1, "newValue": 0.12},
            {"iteration": 2, "newValue": 0.14},
        ]
