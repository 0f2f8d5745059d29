"""
Test suite for universal-time

Contains:
- tests/unit/          : Unit tests for individual modules
"""
