"""
PropMon Core Config — Monitor Settings
========================================
Where the monitor keeps its data and which store backend it uses.

Resolution order (later wins):
    1. Built-in defaults
    2. Django settings.PROPERTY_MONITOR (when Django is configured)
    3. PROPERTY_MONITOR_ROOT environment variable (root directory only)
    4. Explicit overrides passed to load_monitor_config()

Default data file:
    <home>/propertymonitor/model/property.dat
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from core.primitives.errors import MonitorError

ROOT_ENV_VAR = "PROPERTY_MONITOR_ROOT"

BACKEND_FILE = "file"
BACKEND_DJANGO = "django"
BACKEND_MEMORY = "memory"
STORE_BACKENDS = frozenset({BACKEND_FILE, BACKEND_DJANGO, BACKEND_MEMORY})

DEFAULTS: Dict[str, Any] = {
    "APPLICATION_NAME": "propertymonitor",
    "ROOT_DIRECTORY": None,
    "MODEL_DIRECTORY": "model",
    "PROPERTY_FILE": "property.dat",
    "STORE_BACKEND": BACKEND_FILE,
}


class ConfigurationError(MonitorError, ValueError):
    """Monitor settings are missing or contradictory."""
    pass


# ══════════════════════════════════════════════════════════════
# MONITOR CONFIG
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class MonitorConfig:
    root_directory: Path = field(default_factory=Path.home)
    application_name: str = DEFAULTS["APPLICATION_NAME"]
    model_directory_name: str = DEFAULTS["MODEL_DIRECTORY"]
    property_file: str = DEFAULTS["PROPERTY_FILE"]
    store_backend: str = DEFAULTS["STORE_BACKEND"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "root_directory", Path(self.root_directory))
        for label in ("application_name", "model_directory_name", "property_file"):
            value = getattr(self, label)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(f"MonitorConfig: {label} must be non-empty")
        if self.store_backend not in STORE_BACKENDS:
            raise ConfigurationError(
                f"MonitorConfig: unknown store backend '{self.store_backend}'. "
                f"Expected one of {sorted(STORE_BACKENDS)}."
            )

    @property
    def application_directory(self) -> Path:
        return self.root_directory / self.application_name

    @property
    def model_directory(self) -> Path:
        return self.application_directory / self.model_directory_name

    @property
    def data_file(self) -> Path:
        return self.model_directory / self.property_file


def _django_overrides() -> Dict[str, Any]:
    from django.conf import settings
    from django.core.exceptions import ImproperlyConfigured

    try:
        return dict(getattr(settings, "PROPERTY_MONITOR", {}))
    except ImproperlyConfigured:
        return {}


def load_monitor_config(overrides: Optional[Dict[str, Any]] = None) -> MonitorConfig:
    """Build a MonitorConfig from defaults, Django settings, env and overrides."""
    values = dict(DEFAULTS)
    values.update(_django_overrides())
    if os.environ.get(ROOT_ENV_VAR):
        values["ROOT_DIRECTORY"] = os.environ[ROOT_ENV_VAR]
    values.update(overrides or {})

    unknown = set(values) - set(DEFAULTS)
    if unknown:
        raise ConfigurationError(
            f"MonitorConfig: unknown setting(s) {sorted(unknown)}"
        )

    root = values["ROOT_DIRECTORY"]
    return MonitorConfig(
        root_directory=Path(root) if root else Path.home(),
        application_name=values["APPLICATION_NAME"],
        model_directory_name=values["MODEL_DIRECTORY"],
        property_file=values["PROPERTY_FILE"],
        store_backend=values["STORE_BACKEND"],
    )
