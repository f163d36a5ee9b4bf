"""
CLI module for the DX Script App generator.

This module provides the command-line interface, including the main entry
point that is installed as the ``create-dx-scriptapp`` console script.
"""

from .commands import main

__all__ = ["main"]
