"""
Unit Tests for the Amazons Engine

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_board.py

    # Run with coverage
    pytest tests/ --cov=amazons_engine --cov-report=html

    # Run specific test
    pytest tests/test_search.py::TestMaxDepth::test_schedule

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
