"""
Prism Shared Module
====================

Configuration, structured logging, console presentation and numeric
helpers shared by every Prism component.
"""

from shared.config import PrismConfig, get_config

__all__ = ["PrismConfig", "get_config"]
