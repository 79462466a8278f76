"""
CLI module for scaffold-tasks.

This module provides the command-line interface, including the main entry
point that is installed as the ``scaffold`` console script.
"""

from .commands import main

__all__ = ["main"]
