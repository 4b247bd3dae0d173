"""
Iteration — модели трассы итераций неподвижной точки

Immutable Pydantic модели, представляющие результат работы движка:
- IterationRecord: одна запись (iteration, old_value, new_value)
- IterationTrace: упорядоченная непустая последовательность записей

Запись с iteration=0 — seed: old_value == new_value == стартовое значение.
Запись k ≥ 1 хранит результат k-го применения рекуррентной функции.

Сериализация использует wire-имена oldValue / newValue
(см. src/core/contracts/schema/iteration_trace.json).
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ITERATION RECORD
# =============================================================================


class IterationRecord(BaseModel):
    """
    Одна запись трассы итераций.

    Immutable модель (frozen=True). NaN/Inf запрещены на уровне модели:
    трасса с невалидными значениями не может быть построена.
    """

    iteration: int = Field(..., ge=0, description="Номер итерации (0 — seed)")
    old_value: float = Field(
        ..., alias="oldValue", allow_inf_nan=False, description="Значение до применения f"
    )
    new_value: float = Field(
        ..., alias="newValue", allow_inf_nan=False, description="Значение после применения f"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def delta(self) -> float:
        """|new_value - old_value| — шаг итерации."""
        return abs(self.new_value - self.old_value)

    @property
    def is_seed(self) -> bool:
        return self.iteration == 0


# =============================================================================
# ITERATION TRACE
# =============================================================================


class IterationTrace(BaseModel):
    """
    Трасса итераций неподвижной точки.

    Инварианты (проверяются при создании):
    1. Трасса непустая (минимум seed-запись)
    2. records[k].iteration == k
    3. Seed: records[0].old_value == records[0].new_value
    4. Цепочка: records[k].old_value == records[k-1].new_value для k ≥ 1

    Трасса никогда не мутирует: новое стартовое значение — новая трасса.
    """

    records: tuple[IterationRecord, ...] = Field(
        ..., min_length=1, description="Записи трассы, records[0] — seed"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_trace_invariants(self) -> "IterationTrace":
        seed = self.records[0]
        if seed.old_value != seed.new_value:
            raise ValueError(
                f"Seed record must have old_value == new_value, "
                f"got {seed.old_value} != {seed.new_value}"
            )

        for index, record in enumerate(self.records):
            if record.iteration != index:
                raise ValueError(
                    f"Record at position {index} has iteration={record.iteration}"
                )
            if index > 0 and record.old_value != self.records[index - 1].new_value:
                raise ValueError(
                    f"Broken chain at iteration {index}: old_value={record.old_value} "
                    f"!= previous new_value={self.records[index - 1].new_value}"
                )
        return self

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> IterationRecord:
        return self.records[index]

    @property
    def seed(self) -> IterationRecord:
        return self.records[0]

    @property
    def last(self) -> IterationRecord:
        return self.records[-1]

    @property
    def initial_value(self) -> float:
        return self.seed.new_value

    @property
    def final_value(self) -> float:
        return self.last.new_value

    @property
    def steps(self) -> int:
        """Количество реальных применений f (без seed)."""
        return len(self.records) - 1

    def values(self) -> list[float]:
        """Последовательность new_value по всем записям, начиная с seed."""
        return [record.new_value for record in self.records]

    def to_contract(self) -> dict[str, Any]:
        """
        Сериализация в JSON-совместимый dict по контракту iteration_trace.

        Returns:
            {"records": [{"iteration", "oldValue", "newValue"}, ...]}
        """
        return self.model_dump(mode="json", by_alias=True)

    def chart_points(self) -> list[dict[str, float]]:
        """Точки для графика: [{"iteration": k, "newValue": v}, ...]."""
        return [
            {"iteration": record.iteration, "newValue": record.new_value}
            for record in self.records
        ]
