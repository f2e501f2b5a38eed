"""
================================================================================
Configuration Loader
================================================================================

Layered settings for the user API suite.

Lookup order for a dotted key such as "api.base_url":
    1. Environment variable (API_BASE_URL), coerced to the default's type
    2. config/config.yaml
    3. Built-in DEFAULTS below
    4. The default passed by the caller

SuiteConfig freezes the keys a run needs so nothing downstream reads
process-wide state.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

DEFAULTS: Dict[str, Any] = {
    "api": {
        "base_url": "https://reqres.in",
        "timeout": None,
    },
    "report": {
        "path": "extentReport.html",
        "title": "User API Test Report",
    },
    "suite": {
        "live": False,
    },
    "logging": {
        "level": "INFO",
        "file": None,
    },
}

_TRUE_STRINGS = ("true", "1", "yes", "on")


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


def _dig(tree: Any, key: str) -> Any:
    """Walk a nested mapping by dotted key; None when any part is absent."""
    for part in key.split("."):
        if not isinstance(tree, dict):
            return None
        tree = tree.get(part)
    return tree


def _coerce(raw: str, like: Any) -> Any:
    """Turn an environment string into the type of `like`, if it can."""
    if isinstance(like, bool):
        return raw.strip().lower() in _TRUE_STRINGS
    for kind in (int, float):
        if isinstance(like, kind):
            try:
                return kind(raw)
            except ValueError:
                logger.warning(f"Cannot read {raw!r} as {kind.__name__}, keeping string")
                return raw
    return raw


class ConfigLoader:
    """
    Process-wide configuration, loaded once.

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("api.base_url")
        'https://reqres.in'
        >>> config.get("suite.live")
        False

    Tests swap the file with ConfigLoader.reset() followed by
    ConfigLoader(config_path=...).
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._file_values: Dict[str, Any] = {}
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        if not self._config_path.exists():
            logger.warning(f"No configuration file at {self._config_path}; using built-in defaults")
            self._file_values = {}
            return

        try:
            loaded = yaml.safe_load(self._config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self._config_path}: {e}") from e

        loaded = loaded or {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping, got {type(loaded).__name__}"
            )
        self._file_values = loaded
        logger.debug(f"Loaded configuration from: {self._config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Resolve a dotted key through env, file, built-in defaults, then `default`.
        """
        builtin = _dig(DEFAULTS, key)

        env_value = os.environ.get(key.upper().replace(".", "_"))
        if env_value is not None:
            return _coerce(env_value, default if default is not None else builtin)

        for layer in (_dig(self._file_values, key), builtin):
            if layer is not None:
                return layer
        return default

    @classmethod
    def reset(cls) -> None:
        """Forget the singleton so the next ConfigLoader() reads from scratch."""
        cls._instance = None


@dataclass(frozen=True)
class SuiteConfig:
    """
    Immutable per-run settings shared by every test case.

    Built once during suite setup and passed explicitly to the
    HTTP client, the report sink and the case runner.
    """
    base_url: str = DEFAULTS["api"]["base_url"]
    report_path: Path = Path(DEFAULTS["report"]["path"])
    report_title: str = DEFAULTS["report"]["title"]
    timeout: Optional[float] = None

    @classmethod
    def from_loader(cls, loader: Optional[ConfigLoader] = None) -> "SuiteConfig":
        """
        Snapshot the relevant keys of a ConfigLoader.

        Raises:
            ConfigurationError: On an empty base URL or a non-positive timeout
        """
        loader = loader or ConfigLoader()

        timeout = loader.get("api.timeout")
        if timeout is not None:
            try:
                timeout = float(timeout)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"api.timeout must be a number, got {timeout!r}") from e
            if timeout <= 0:
                raise ConfigurationError(f"api.timeout must be positive, got {timeout}")

        base_url = str(loader.get("api.base_url")).rstrip("/")
        if not base_url:
            raise ConfigurationError("api.base_url must not be empty")

        return cls(
            base_url=base_url,
            report_path=Path(loader.get("report.path")),
            report_title=str(loader.get("report.title")),
            timeout=timeout,
        )


__all__ = [
    "DEFAULTS",
    "ConfigLoader",
    "ConfigurationError",
    "SuiteConfig",
]
