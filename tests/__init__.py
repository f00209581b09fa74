# hill97 Test Suite
"""
Test suite including:
- Unit tests (field, matrix, inversion, cipher)
- Integration tests (command line, concurrent use)
- Security tests (invalid inputs)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
