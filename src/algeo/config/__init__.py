"""Configuration management for algeo.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- IntersectionConfig: Root filtering for curve intersection
- GeometryConfig: Adaptive arc length settings
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- AlgeoSettings: Main application settings
"""

from algeo.config.settings import (
    AlgeoSettings,
    GeometryConfig,
    IntersectionConfig,
    LoggingConfig,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "AlgeoSettings",
    "GeometryConfig",
    "IntersectionConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "get_default_settings",
]
