"""
Test suite for factoring

Contains:
- tests/unit/          : Unit tests for individual modules
"""
