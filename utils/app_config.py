"""Pre-UI bootstrap configuration. Zero imports from the rest of the app
apart from constants.

Stores user preferences that must be known before the API client is built
(e.g. api_base_url). Config lives in ~/.category_manager/config.json; the
CATEGORY_API_URL environment variable wins over the file.
"""
import json
import os
from pathlib import Path

from utils.constants import API_URL_ENV_VAR, DEFAULT_API_BASE_URL

CONFIG_DIR = Path.home() / ".category_manager"
CONFIG_FILE = CONFIG_DIR / "config.json"


def load_config() -> dict:
    """Returns {} on missing or corrupt file — never raises."""
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict) -> None:
    """Creates ~/.category_manager/ if needed; atomic write via .tmp + os.replace()."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    tmp = CONFIG_FILE.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, CONFIG_FILE)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


def get_api_base_url() -> str:
    """Environment variable, then config["api_base_url"], then the local default."""
    url = os.environ.get(API_URL_ENV_VAR) or load_config().get("api_base_url") or DEFAULT_API_BASE_URL
    return url.strip().rstrip("/")


def set_api_base_url(url: str | None) -> None:
    """Update api_base_url in config and save."""
    config = load_config()
    if url is None:
        config.pop("api_base_url", None)
    else:
        config["api_base_url"] = url.strip().rstrip("/")
    save_config(config)


def get_appearance_mode() -> str:
    return load_config().get("appearance_mode", "system")


def resolve_api_base_url(override: str | None = None, save: bool = False) -> str:
    """Pick the base URL for this run; with save=True the override is persisted."""
    if override and save:
        set_api_base_url(override)
    return override.strip().rstrip("/") if override else get_api_base_url()
