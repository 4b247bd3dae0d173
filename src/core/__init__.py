"""
Core domain models, mathematical primitives, and contracts.

This module contains the fixed-point iteration engine and everything it
depends on. It has no dependency on charting or reporting.
"""
