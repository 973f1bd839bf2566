"""
Test suite for fuzzy-assessment

Contains:
- tests/unit/          : Unit tests for individual modules
"""
