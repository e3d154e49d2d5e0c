"""
Test suite for immutable value holders

Contains:
- tests/unit/          : Unit tests for individual modules
"""
