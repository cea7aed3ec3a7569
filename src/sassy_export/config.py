import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "sassy_export.yml"
CONFIG_ENV_VAR = "SASSY_EXPORT_CONFIG"

DEFAULT_EXPORT = {
    "encoding": "utf-8",
    "indent": 2,
    "max_depth": 256,
    "unix_newlines": True,
}


class SEConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.logging = data.get("logging", {})
        self.export = {**DEFAULT_EXPORT, **(data.get("export") or {})}
        self.debug = data.get("debug", False)

def load_config(path=None) -> 'SEConfig':
    """
    Load the YAML config.

    An explicit path (argument or $SASSY_EXPORT_CONFIG) must exist. The
    bundled default file is optional; without it the built-in defaults apply.
    """
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    config_path = Path(explicit) if explicit else CONFIG_PATH

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return SEConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return SEConfig(data)

_config_cache = None

def get_config() -> 'SEConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache

def reset_config() -> None:
    global _config_cache
    _config_cache = None
