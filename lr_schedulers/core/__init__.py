"""
Core domain logic - no external dependencies.

This module contains the schedule strategies as pure Python, testable
without ML frameworks.
"""
