"""
Test suite for natural-number

Contains:
- tests/unit/          : Unit tests for the value type, contracts, session and CLI
"""
