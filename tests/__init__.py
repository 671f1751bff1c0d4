"""Test suite for functional-errors.

Test structure:
- unit/: Unit tests for result types, causes, failures, context helpers,
  configuration and logging
"""
