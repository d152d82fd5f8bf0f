# wirecrypt Test Suite
"""
Test suite including:
- Unit tests per component
- Integration tests (handshake then payload)
- Security tests (invalid inputs, tampered frames)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
