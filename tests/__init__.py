"""
Test suite for the unit fixed discount promotion engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
