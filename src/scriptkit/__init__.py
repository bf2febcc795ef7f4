"""Reusable helpers for automation and shell scripts."""

__version__ = "0.1.0"
