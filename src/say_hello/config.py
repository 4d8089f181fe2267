"""
Configuration management for the Say Hello MCP server.
"""

import copy
import logging
import math
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from say_hello.health.probe import (
    DEFAULT_MODEL,
    DEFAULT_NPM_PACKAGE,
    DEFAULT_PROGRAM,
    DEFAULT_PROMPT,
    DEFAULT_TIMEOUT,
    ProbeRequest,
)

log = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "debug": False,
    "health_check": {
        "program": DEFAULT_PROGRAM,
        "model": DEFAULT_MODEL,
        "prompt": DEFAULT_PROMPT,
        "timeout": DEFAULT_TIMEOUT,
        "npm_package": DEFAULT_NPM_PACKAGE,
    },
}

TRUTHY = ("1", "true", "yes", "on")


class Config:
    """Manages configuration for the say-hello server."""

    def __init__(self, config_file: Optional[Path] = None):
        if config_file is not None:
            self.config_file = Path(config_file)
            self.config_dir = self.config_file.parent
        else:
            self.config_dir = Path.home() / ".config" / "say-hello"
            self.config_file = self.config_dir / "config.yaml"
        self.config = {}
        try:
            self._ensure_config_exists()
            self.config = self._load_config()
        except Exception as e:
            log.error(f"Error initializing configuration from {self.config_file}: {e}", exc_info=True)

    def _ensure_config_exists(self):
        """Create config directory and file with defaults if they don't exist."""
        if self.config_file.exists():
            return

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w") as f:
            yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False)
        log.info(f"Created default config file at: {self.config_file}")

    def _load_config(self):
        """Load configuration from file."""
        try:
            with open(self.config_file, "r") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            log.warning(f"Config file not found at {self.config_file}. Using defaults.")
            return {}
        except yaml.YAMLError as e:
            log.error(f"Error parsing YAML config file {self.config_file}: {e}")
            return {}

        if not isinstance(data, dict):
            log.error(f"Config file {self.config_file} does not contain a mapping, ignoring it")
            return {}
        return data

    def _save_config(self):
        """Save configuration to file."""
        try:
            with open(self.config_file, "w") as f:
                yaml.dump(self.config, f, default_flow_style=False)
        except Exception as e:
            log.error(f"Error saving config file {self.config_file}: {e}", exc_info=True)

    def get_debug(self) -> bool:
        """Debug flag; SAY_HELLO_DEBUG overrides the file."""
        env_value = os.environ.get("SAY_HELLO_DEBUG")
        if env_value is not None:
            return env_value.strip().lower() in TRUTHY
        return bool(self.config.get("debug", DEFAULT_CONFIG["debug"]))

    def get_log_level(self) -> str:
        env_level = os.environ.get("LOG_LEVEL")
        if env_level:
            return env_level.upper()
        return "DEBUG" if self.get_debug() else "INFO"

    def get_setting(self, setting: str, default: Any = None) -> Any:
        """Get a health_check setting, falling back to the built-in default."""
        section = self.config.get("health_check") or {}
        if setting in section:
            return section[setting]
        if default is not None:
            return default
        return DEFAULT_CONFIG["health_check"].get(setting)

    def set_setting(self, setting: str, value: Any):
        if not isinstance(self.config.get("health_check"), dict):
            self.config["health_check"] = copy.deepcopy(DEFAULT_CONFIG["health_check"])

        self.config["health_check"][setting] = value
        self._save_config()

    def get_probe_request(self) -> ProbeRequest:
        """Build the immutable probe request described by this configuration."""
        raw_timeout = self.get_setting("timeout")
        try:
            if isinstance(raw_timeout, bool):
                raise TypeError("boolean timeout")
            timeout = float(raw_timeout)
        except (TypeError, ValueError):
            log.warning(f"Invalid health_check timeout {raw_timeout!r}, using {DEFAULT_TIMEOUT}s")
            timeout = DEFAULT_TIMEOUT
        if not math.isfinite(timeout) or timeout <= 0:
            log.warning(f"health_check timeout must be a positive finite number, got {timeout}; using {DEFAULT_TIMEOUT}s")
            timeout = DEFAULT_TIMEOUT

        return ProbeRequest.for_gemini(
            model=str(self.get_setting("model")),
            prompt=str(self.get_setting("prompt")),
            timeout=timeout,
            program=str(self.get_setting("program")),
            npm_package=str(self.get_setting("npm_package")),
        )
