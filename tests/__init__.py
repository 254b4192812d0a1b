"""
Test suite for ordering-kit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
