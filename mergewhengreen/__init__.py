"""Merge When Green: merge labelled pull requests once checks and statuses pass."""

__version__ = "0.1.0"
