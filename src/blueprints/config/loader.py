from copy import deepcopy
from pathlib import Path
from typing import Any, Dict

import yaml

from blueprints.filters import FILTERS
from blueprints.persistence import BACKENDS

DEFAULT_CONFIG_PATH = Path("blueprints.config.yaml")
DEFAULT_DATABASE_URL = "sqlite:///blueprints.db"

BASE_DEFAULTS: Dict[str, Any] = {
    "filter": "identity",
    "persistence": {
        "backend": "memory",
        "database_url": DEFAULT_DATABASE_URL,
        "seed_sample_data": True,
    },
    "logging": {
        "level": "INFO",
    },
}


def default_config() -> Dict[str, Any]:
    return deepcopy(BASE_DEFAULTS)


def normalize_config(config: Dict[str, Any] | None) -> Dict[str, Any]:
    """
    Merge a raw config dict over the built-in defaults and validate it.

    Args:
        config: Parsed YAML (may be None for an empty file)

    Returns:
        Config dict with every section present

    Raises:
        ValueError: If the structure or a value is invalid
    """
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ValueError("Config must be a dictionary")

    merged = default_config()
    for section in ("persistence", "logging"):
        user_section = config.get(section)
        if user_section is None:
            continue
        if not isinstance(user_section, dict):
            raise ValueError(f"Config '{section}' must be a dictionary if provided")
        merged[section].update(user_section)

    if config.get("filter") is not None:
        merged["filter"] = str(config["filter"]).strip().lower()
    if merged["filter"] not in FILTERS:
        raise ValueError(f"Config 'filter' must be one of: {', '.join(sorted(FILTERS))}")

    backend = merged["persistence"].get("backend")
    if backend not in BACKENDS:
        raise ValueError(f"Config 'persistence.backend' must be one of: {', '.join(BACKENDS)}")
    if backend == "sql" and not merged["persistence"].get("database_url"):
        raise ValueError("Config 'persistence.database_url' is required for the sql backend")

    return merged


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """
    Load blueprint service configuration from YAML.

    Args:
        path: Optional path to the config file. Defaults to blueprints.config.yaml

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If config structure is invalid
    """
    cfg_path = path or DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        return normalize_config(yaml.safe_load(f))
