"""
Test suite for calculus toolkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
