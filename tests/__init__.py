"""
Test suite for mixed-radix counter

Contains:
- tests/unit/          : Unit tests for individual modules
"""
