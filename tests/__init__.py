"""
Test suite for juliantime

Contains:
- tests/unit/          : Unit tests for individual modules
"""
