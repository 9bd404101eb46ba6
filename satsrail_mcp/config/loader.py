import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from satsrail_mcp.config.schema import AppConfig, ApiConfig, LoggingConfig, ServerConfig

_SECTION_CLASSES = {
    "server": ServerConfig,
    "api": ApiConfig,
    "logging": LoggingConfig,
}

_ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "SATSRAIL_BASE_URL": ("api", "base_url"),
    "SATSRAIL_LOG_LEVEL": ("logging", "level"),
}


def normalize_base_url(url: str) -> str:
    """Strip trailing slashes so paths can be appended directly."""
    return url.rstrip("/")


def _apply_env_overrides(data: dict[str, Any]) -> None:
    """Override YAML values with environment variables where mapped."""
    for env_var, (section, key) in _ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            section_data = data.get(section) or {}
            section_data[key] = value
            data[section] = section_data


def load_config(
    config_path: Path = Path("config.yaml"),
    env_path: Path = Path(".env"),
) -> AppConfig:
    """Load YAML config, merge .env overrides, return frozen AppConfig."""
    load_dotenv(env_path)

    data: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

    _apply_env_overrides(data)

    api_data = data.get("api") or {}
    if "base_url" in api_data:
        api_data["base_url"] = normalize_base_url(str(api_data["base_url"]))

    sections: dict[str, Any] = {}
    for name, cls in _SECTION_CLASSES.items():
        section_data = data.get(name, {})
        if section_data:
            sections[name] = cls(**section_data)
        else:
            sections[name] = cls()

    return AppConfig(**sections)
