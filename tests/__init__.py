"""
Test suite for the fraction engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
