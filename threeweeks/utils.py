import locale
import yaml
from pathlib import Path
from typing import Optional
from .models import Settings

CONFIG_DIR = Path("config")
DEFAULT_CONFIG = CONFIG_DIR / "threeweeks.yaml"

def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Loads settings from a YAML file.

    An explicit path must exist. Without one, the default config file is
    used when present and the built-in defaults otherwise.
    """
    if path is None:
        if not DEFAULT_CONFIG.exists():
            return Settings()
        path = DEFAULT_CONFIG
    elif not path.exists():
        raise FileNotFoundError(f"Config file not found at {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file loads as None
    return Settings(**(data or {}))

def apply_locale(name: Optional[str]) -> None:
    """Switches LC_TIME so weekday and month names follow the given locale."""
    if name:
        locale.setlocale(locale.LC_TIME, name)
