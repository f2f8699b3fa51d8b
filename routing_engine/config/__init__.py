"""
Configuration Management

Centralized configuration for:
- Policy change gate tolerance
- SLA alert thresholds
- Default simulation scenario
- Logging level
"""

from .settings import (
    EngineSettings,
    ScenarioDefaults,
    get_settings,
    configure_logging
)

__all__ = [
    "EngineSettings",
    "ScenarioDefaults",
    "get_settings",
    "configure_logging"
]
