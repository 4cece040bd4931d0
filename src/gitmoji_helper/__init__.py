"""
Top-level package for gitmoji_helper.

This package exposes the main CLI entry point via the
``gitmoji_helper.cli`` module.
"""

__all__ = ["__version__"]

__version__ = "0.3.0"
