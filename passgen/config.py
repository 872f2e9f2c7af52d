# passgen/config.py
"""
Simple settings persistence for passgen.
Settings saved as JSON in %APPDATA%/passgen/config.json (Windows) or ~/.passgen/config.json (fallback).
PASSGEN_CONFIG points at another file.
"""

import os
import json
from typing import Dict, Any, Optional

from .generator import GeneratorInput
from .logging import get_logger

DEFAULTS: Dict[str, Any] = {
    # empty pool means the built-in default
    "lower_letters": "",
    "upper_letters": "",
    "digits": "",
    "symbols": "",
    "count": 1,
    "pause_on_exit": True,
}

log = get_logger()


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "passgen")
    return os.path.join(os.path.expanduser("~"), ".passgen")


def config_path() -> str:
    return os.getenv("PASSGEN_CONFIG") or os.path.join(_appdata_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        log.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update({k: v for k, v in data.items() if k in DEFAULTS})
    return out


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> None:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)


def generator_input(cfg: Dict[str, Any]) -> GeneratorInput:
    return GeneratorInput(
        lower_letters=cfg.get("lower_letters") or "",
        upper_letters=cfg.get("upper_letters") or "",
        digits=cfg.get("digits") or "",
        symbols=cfg.get("symbols") or "",
    )
