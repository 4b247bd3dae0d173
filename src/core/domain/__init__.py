"""
Domain models and value objects.

Contains the iteration trace entities produced by the fixed-point engine.
"""

from src.core.domain.iteration import IterationRecord, IterationTrace

__all__ = [
    "IterationRecord",
    "IterationTrace",
]
