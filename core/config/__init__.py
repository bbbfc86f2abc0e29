"""
PropMon Core Config — Public API
===================================
Data location and store backend selection.
"""

from core.config.settings import (
    BACKEND_DJANGO,
    BACKEND_FILE,
    BACKEND_MEMORY,
    ConfigurationError,
    MonitorConfig,
    load_monitor_config,
)

__all__ = [
    "BACKEND_DJANGO",
    "BACKEND_FILE",
    "BACKEND_MEMORY",
    "ConfigurationError",
    "MonitorConfig",
    "load_monitor_config",
]
