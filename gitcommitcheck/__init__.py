"""Validate git commit subject lines against conventional commit rules."""

__version__ = "0.1.0"
