import json
import os
from pathlib import Path
from typing import Any

from silo_wizard.core.constants.base import DEFAULT_HTTP_TIMEOUT

_CONFIG_ENV_KEYS = ("SILO_WIZARD_CONFIG_PATH", "SILO_WIZARD_CONFIG")
_DEFAULT_CONFIG_FILENAME = "config.json"

DEFAULT_REPO_BASE_URL = (
    "https://raw.githubusercontent.com/silo-finance/silo-contracts-v2/master"
)
DEFAULT_ADDRESSES_JSON_BASE_URL = f"{DEFAULT_REPO_BASE_URL}/common/addresses"


def _find_project_root(start: Path) -> Path | None:
    cur = start.resolve()
    for parent in [cur, *cur.parents]:
        if (parent / "pyproject.toml").exists():
            return parent
    return None


def _project_root() -> Path | None:
    return _find_project_root(Path.cwd()) or _find_project_root(Path(__file__).parent)


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path is not None:
        return Path(path).expanduser()

    env_path = next(
        (os.getenv(k, "").strip() for k in _CONFIG_ENV_KEYS if os.getenv(k)), ""
    )
    if env_path:
        p = Path(env_path).expanduser()
        if p.is_absolute():
            return p
        root = _project_root()
        return (root / p) if root else p

    root = _project_root()
    return (root / _DEFAULT_CONFIG_FILENAME) if root else Path(_DEFAULT_CONFIG_FILENAME)


def load_config_json(
    path: str | Path | None = None, *, require_exists: bool = False
) -> dict[str, Any]:
    cfg_path = resolve_config_path(path)
    if not cfg_path.exists():
        if require_exists:
            raise FileNotFoundError(f"Config file not found: {cfg_path}")
        return {}
    try:
        return json.loads(cfg_path.read_text())
    except Exception:
        return {}


CONFIG: dict[str, Any] = load_config_json()


def set_config(config: dict[str, Any]) -> None:
    """Replace the global CONFIG dict in-place.

    This allows code that imported CONFIG at module import time to see updates.
    """
    CONFIG.clear()
    CONFIG.update(config)


def load_config(
    path: str | Path | None = None, *, require_exists: bool = False
) -> None:
    """Load config from disk into the global CONFIG dict."""
    set_config(load_config_json(path, require_exists=require_exists))


def set_rpc_urls(rpc_urls: dict[str, Any]) -> None:
    if "network" not in CONFIG:
        CONFIG["network"] = {}
    CONFIG["network"]["rpc_urls"] = rpc_urls


def get_rpc_urls() -> dict[str, Any]:
    return CONFIG.get("network", {}).get("rpc_urls", {})


def get_repo_base_url() -> str:
    system = CONFIG.get("system", {})
    url = system.get("repo_base_url")
    if url:
        return str(url).strip().rstrip("/")
    return DEFAULT_REPO_BASE_URL


def get_addresses_json_base_url() -> str:
    system = CONFIG.get("system", {})
    url = system.get("addresses_json_base_url")
    if url:
        return str(url).strip().rstrip("/")
    return os.environ.get(
        "SILO_WIZARD_ADDRESSES_URL", DEFAULT_ADDRESSES_JSON_BASE_URL
    ).rstrip("/")


def get_http_timeout() -> float:
    system = CONFIG.get("system", {})
    raw = system.get("http_timeout")
    try:
        return float(raw) if raw is not None else DEFAULT_HTTP_TIMEOUT
    except (TypeError, ValueError):
        return DEFAULT_HTTP_TIMEOUT


def get_strict_sentinels() -> bool:
    """Whether the JSON importer rejects unknown oracle / hook sentinel values."""
    wizard = CONFIG.get("wizard", {})
    return bool(wizard.get("strict_sentinels", False))
