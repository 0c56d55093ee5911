# passgauge/config.py
"""
Simple settings persistence for PassGauge.
Settings saved as JSON in %APPDATA%/PassGauge/config.json (Windows) or ~/.passgauge/config.json (fallback).
PASSGAUGE_HOME overrides the directory.
"""

import os
import json
import logging
from typing import Dict, Any

from .charsets import CharacterClass
from .generator import GenerationPolicy
from .history import DEFAULT_HISTORY_SIZE

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "upper": True,
    "lower": True,
    "digits": True,
    "symbols": True,
    "exclude_similar": False,
    "history_size": DEFAULT_HISTORY_SIZE,
}

# settings key -> character class
CLASS_KEYS = (
    ("upper", CharacterClass.UPPERCASE),
    ("lower", CharacterClass.LOWERCASE),
    ("digits", CharacterClass.DIGIT),
    ("symbols", CharacterClass.SYMBOL),
)

def _appdata_dir() -> str:
    home = os.getenv("PASSGAUGE_HOME")
    appdata = os.getenv("APPDATA")
    if home:
        d = home
    elif appdata:
        d = os.path.join(appdata, "PassGauge")
    else:
        d = os.path.join(os.path.expanduser("~"), ".passgauge")
    os.makedirs(d, exist_ok=True)
    return d

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable settings file %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring settings file %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)

def policy_from_config(cfg: Dict[str, Any]) -> GenerationPolicy:
    """Build the default GenerationPolicy from loaded settings (not validated)."""
    classes = [cc for key, cc in CLASS_KEYS if cfg.get(key, DEFAULTS[key])]
    return GenerationPolicy.of(
        length=int(cfg.get("length", DEFAULTS["length"])),
        classes=classes,
        exclude_similar=bool(cfg.get("exclude_similar", DEFAULTS["exclude_similar"])),
    )
