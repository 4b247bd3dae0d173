"""Линейные шкалы для отображения значений трасс в координаты графика."""

from dataclasses import dataclass

from src.core.math.numerical_safeguards import (
    normalize_to_range,
    validate_finite,
)


@dataclass(frozen=True)
class LinearScale:
    """Линейное отображение domain → range.

    Вырожденный domain (d0 == d1) отображается в середину range,
    иначе значения экстраполируются линейно без clamp.
    """

    domain: tuple[float, float]
    range: tuple[float, float]

    def __post_init__(self) -> None:
        for name, bounds in (("domain", self.domain), ("range", self.range)):
            if len(bounds) != 2:
                raise ValueError(f"{name} must have exactly 2 bounds, got {bounds!r}")
            validate_finite(bounds[0], f"{name}[0]")
            validate_finite(bounds[1], f"{name}[1]")

    @property
    def is_degenerate(self) -> bool:
        return self.domain[0] == self.domain[1]

    def __call__(self, value: float) -> float:
        r0, r1 = self.range
        if self.is_degenerate:
            return (r0 + r1) / 2.0

        d0, d1 = self.domain
        return normalize_to_range(value, d0, d1, r0, r1, eps=0.0)
