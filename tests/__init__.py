"""
Test suite for the funds transfer core.

Contains:
- tests/unit/          : Unit tests for domain models, validator, service and adapters
"""
