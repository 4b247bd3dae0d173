"""
Contract Validation Module

Модуль для валидации JSON контрактов трасс итераций и графиков.
"""

from .validators import (
    ComparisonChartValidator,
    ContractValidator,
    IterationTraceValidator,
    SCHEMA_DIR,
    SchemaLoader,
    get_schema_loader,
    validate_comparison_chart,
    validate_iteration_trace,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IterationTraceValidator",
    "ComparisonChartValidator",
    # Functions
    "get_schema_loader",
    "validate_iteration_trace",
    "validate_comparison_chart",
]
