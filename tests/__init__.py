"""
Test suite for unit-value

Contains:
- tests/unit/          : Unit tests for individual modules
"""
