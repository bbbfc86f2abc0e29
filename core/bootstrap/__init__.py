"""
PropMon Bootstrap — Public API
================================
Assembles bus, store, audit sink and registry from configuration.
"""

from core.bootstrap.errors import BootstrapError
from core.bootstrap.wiring import build_property_monitor, build_store

__all__ = [
    "BootstrapError",
    "build_property_monitor",
    "build_store",
]
