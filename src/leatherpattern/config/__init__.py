"""Configuration management for leatherpattern.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- StitchConfig: Stitch line and hole settings
- GeometryConfig: Sampling and fixed-point precision settings
- SnapConfig: Editing snap settings
- LoggingConfig: Logging settings
- PatternSettings: Main application settings
"""

from leatherpattern.config.settings import (
    GeometryConfig,
    LoggingConfig,
    PatternSettings,
    SnapConfig,
    StitchConfig,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "PatternSettings",
    "SnapConfig",
    "StitchConfig",
    "get_default_settings",
]
