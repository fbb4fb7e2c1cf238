"""Recursive folder timestamp and file-count analyzer."""

__version__ = "1.0.0"
