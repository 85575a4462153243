"""
Prism Output
=============

Terminal rendering of Prism results.
"""

from prism.output.console import ProfileConsoleOutput

__all__ = ["ProfileConsoleOutput"]
