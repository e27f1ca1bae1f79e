"""
Test suite for jsir.

This package contains tests for the jsir node catalog including:
- Unit tests for the base contract, nodes and helpers
- Golden-output fixtures for whole modules
- Timing checks for large trees
"""
