"""
Test suite for the Coptic chronology plug-in

Contains:
- tests/unit/          : Unit tests for individual modules
"""
