"""
Unit Tests for Pawnstorm

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_movegen.py

    # Run with coverage
    pytest tests/ --cov=pawnstorm --cov-report=html

    # Run specific test
    pytest tests/test_search.py::TestTieBreaks

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
    - chess (python-chess): Reference move generator for cross-checks
"""
