"""Utility functions for leatherpattern.

This module provides utility functions including:

- Logging setup and configuration
- Engine statistics collection
"""

from leatherpattern.utils.logging import (
    EngineLogger,
    EngineStats,
    configure_console_logging,
    configure_logging,
)

__all__ = [
    "EngineLogger",
    "EngineStats",
    "configure_console_logging",
    "configure_logging",
]
