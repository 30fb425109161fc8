import json
import os
from pathlib import Path
from typing import Any

from loguru import logger

from nemo_sdk.core.adapters.models import ProtocolConfig
from nemo_sdk.core.constants.base import DEFAULT_SLIPPAGE, DEFAULT_SUI_RPC_URL
from nemo_sdk.core.errors import ValidationError

_CONFIG_ENV_KEYS = ("NEMO_CONFIG_PATH", "NEMO_CONFIG")
_DEFAULT_CONFIG_FILENAME = "config.json"


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
    except json.JSONDecodeError as exc:
        logger.warning(f"Ignoring unreadable config file {cfg_path}: {exc}")
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


def get_rpc_url() -> str:
    rpc_url = CONFIG.get("system", {}).get("rpc_url")
    if rpc_url:
        return str(rpc_url).strip()
    return os.environ.get("NEMO_SUI_RPC_URL") or DEFAULT_SUI_RPC_URL


def get_default_slippage() -> str:
    slippage = CONFIG.get("system", {}).get("slippage")
    if slippage is not None and str(slippage).strip():
        return str(slippage).strip()
    return DEFAULT_SLIPPAGE


def get_market_config(name: str) -> ProtocolConfig:
    markets = CONFIG.get("markets", {})
    raw = markets.get(name)
    if raw is None:
        raise ValidationError(
            f"market '{name}' is not configured",
            operation="get_market_config",
            fields=[name],
        )
    return ProtocolConfig.model_validate(raw)


def get_table_overrides() -> dict[str, Any]:
    return CONFIG.get("tables", {})
