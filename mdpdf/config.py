#!/usr/bin/env python3
"""
Configuration management for mdpdf.
Supports environment variables, config file, and CLI arguments.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import os
import json
import platform
from pathlib import Path
from typing import Dict, Optional, Any

from .toc import DEFAULT_TOC_TITLE


def get_user_config_dir() -> Path:
    """Get platform-appropriate user config directory."""
    system = platform.system()

    if system == "Windows":
        config_dir = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
    elif system == "Darwin":  # macOS
        config_dir = Path.home() / "Library" / "Application Support"
    else:  # Linux and others
        config_dir = Path.home() / ".config"

    return config_dir / "mdpdf"


def get_user_templates_dir() -> Path:
    """Directory holding user templates, searched before the bundled ones."""
    return Path.home() / ".mdpdf" / "templates"


def load_config_file(config_file: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from config file if it exists."""
    if config_file is None:
        config_file = get_user_config_dir() / "config.json"

    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return data if isinstance(data, dict) else {}
        except (json.JSONDecodeError, IOError):
            return {}

    return {}


def parse_level(value: Any, name: str) -> int:
    """Parse a heading level (1-6).

    Raises:
        ValueError: If the value is not an integer between 1 and 6
    """
    try:
        level = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {name} '{value}'. Use a heading level between 1 and 6.")
    if not 1 <= level <= 6:
        raise ValueError(f"Invalid {name} '{value}'. Use a heading level between 1 and 6.")
    return level


def parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in ("0", "false", "no", "off", "")
    return bool(value)


def get_config_from_env() -> Dict[str, Any]:
    """Load configuration from environment variables."""
    config = {}

    env_mapping = {
        "MDPDF_TEMPLATE": "template",
        "MDPDF_TEMPLATES_DIR": "templates_dir",
        "MDPDF_OUTPUT_DIR": "output_dir",
        "MDPDF_LOGO": "logo",
        "MDPDF_CSS": "css",
        "MDPDF_TOC_START": "toc_start",
        "MDPDF_TOC_DEPTH": "toc_depth",
        "MDPDF_TOC_TITLE": "toc_title",
        "MDPDF_MARGINS": "margins",
    }

    for env_var, config_key in env_mapping.items():
        value = os.environ.get(env_var)
        if value:
            config[config_key] = value

    return config


class Config:
    """Configuration manager with multi-layer precedence."""

    def __init__(self, cli_args: Optional[Dict[str, Any]] = None, config_file: Optional[Path] = None):
        """Initialize configuration.

        Precedence order (highest to lowest):
        1. CLI arguments
        2. Environment variables
        3. Config file
        4. Defaults

        CLI arguments set to None are treated as not given.
        """
        self.cli_args = {k: v for k, v in (cli_args or {}).items() if v is not None}

        # Load from config file
        file_config = load_config_file(config_file)

        # Load from environment
        env_config = get_config_from_env()

        # Merge with precedence: CLI > ENV > FILE > DEFAULTS
        self._config = {}
        self._config.update(self._get_defaults())
        self._config.update(file_config)
        self._config.update(env_config)
        self._config.update(self.cli_args)

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration values."""
        return {
            "template": "default",
            "templates_dir": str(get_user_templates_dir()),
            "output_dir": None,
            "header": True,
            "footer": True,
            "logo": None,
            "css": None,
            "toc_start": 1,
            "toc_depth": 3,
            "toc_title": DEFAULT_TOC_TITLE,
            "margins": None,
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def get_templates_dir(self) -> Path:
        """Get user templates directory path."""
        return Path(self._config.get("templates_dir") or get_user_templates_dir()).expanduser()

    def get_output_dir(self) -> Optional[str]:
        """Get output directory path (None writes to the current directory)."""
        return self._config.get("output_dir")

    def update(self, updates: Dict[str, Any]) -> None:
        """Update configuration with new values."""
        self._config.update(updates)

    def to_dict(self) -> Dict[str, Any]:
        """Get configuration as dictionary."""
        return self._config.copy()
