# config.py
"""Configuration management for event-repeater."""

import os
from typing import Any, Dict, List

import yaml


# ---------------------------------------------------------------------------
# Config Loading
# ---------------------------------------------------------------------------

HERE = os.path.dirname(os.path.abspath(__file__))
DEFAULT_CONFIG_PATH = os.environ.get(
    "EVENT_REPEATER_CONFIG", os.path.join(HERE, "repeater_config.yaml")
)


def _load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


CFG: Dict[str, Any] = {}


def load_config(path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    global CFG
    try:
        CFG = _load_yaml(path)
    except Exception as e:
        CFG = {}
        print(f"[event-repeater] failed to load config '{path}': {e}")
    return CFG


def cfg_get(path: str, default: Any) -> Any:
    """Get config value by dot-separated path (e.g., 'logging.level')."""
    cur: Any = CFG
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


# Load config on import
load_config(DEFAULT_CONFIG_PATH)

# Identity of this mod as content packs reference it
MOD_ID: str = str(cfg_get("mod_id", "misscoriel.eventrepeater"))
CONTENT_PACK_FOR: str = str(cfg_get("content_pack_for", "Pathoschild.ContentPatcher") or "")
CONTENT_FILE: str = str(cfg_get("content_file", "content.json"))

# Manual repeater persistence
MANUAL_DIR_NAME: str = str(cfg_get("manual_repeater.dir_name", "ManualRepeaterFiles"))

# Event script instructions pulled out of running events
FORGET_COMMANDS: List[str] = list(
    cfg_get("forget_commands", ["forgetEvent", "forgetMail", "forgetResponse"])
)

# Logging
LOG_LEVEL: str = str(cfg_get("logging.level", "DEBUG")).upper()
LOG_FILE: str = str(cfg_get("logging.file", "") or "")
