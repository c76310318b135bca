import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "vcard_parser.yml"

DEFAULTS = {
    "paths": {"logs_dir": "logs"},
    "parser": {
        "default_charset": "utf-8",
        "uid_namespace": "uuid:",
    },
    "logging": {
        "level": "INFO",
        "to_file": False,
    },
    "debug": False,
}


class VCConfig:
    def __init__(self, data):
        self.paths = {**DEFAULTS["paths"], **(data.get("paths") or {})}
        self.parser = {**DEFAULTS["parser"], **(data.get("parser") or {})}
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.debug = data.get("debug", False)

    @property
    def default_charset(self) -> str:
        return str(self.parser.get("default_charset") or "utf-8")

    @property
    def uid_namespace(self) -> str:
        return str(self.parser.get("uid_namespace") or "")


def config_path() -> Path:
    override = os.environ.get("VCARD_PARSER_CONFIG")
    return Path(override) if override else CONFIG_PATH


def load_config(path=None) -> 'VCConfig':
    path = Path(path) if path is not None else config_path()
    if not path.exists():
        # Installed without the repository's config/ directory.
        return VCConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return VCConfig(data)

_config_cache = None

def get_config() -> 'VCConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached configuration (tests switch config files)."""
    global _config_cache
    _config_cache = None
