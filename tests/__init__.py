"""
Test suite for remap-value

Contains:
- tests/unit/          : Unit tests for individual modules
"""
