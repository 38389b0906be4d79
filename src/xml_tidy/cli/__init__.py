"""Command-line interface module for XML Tidy.

This module provides the ``xml-tidy`` tool for formatting, compressing and
validating XML files or standard input.
"""

from .main import main

__all__ = ["main"]
