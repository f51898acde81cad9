"""
Test suite for exactfrac

Contains:
- tests/unit/          : Unit tests for individual modules
"""
