"""
Unit tests package.

Contains unit tests for individual modules and functions in isolation.
"""
