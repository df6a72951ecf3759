"""
Test suite for the Complex / Vector numeric kernel

Contains:
- tests/unit/          : Unit tests for individual modules
"""
