"""
Test suite of the token docs builder

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI build
- tests/fixtures/      : Registry snapshot used across tests
"""
