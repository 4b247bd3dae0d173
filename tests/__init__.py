"""
Test suite for the annuity rate iteration package

Contains:
- tests/unit/          : Unit tests for individual modules
"""
