"""Utilities for inspecting schedules."""

from .trajectory import lr_trajectory

__all__ = ["lr_trajectory"]
