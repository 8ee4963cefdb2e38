"""Configuration management for xtio.

Three-layer config resolution (highest priority wins):
  1. CLI flags — explicit on the command line
  2. Project config — .xtio.json in the working directory or a parent
  3. Global config — ~/.xtio/config.json (or the file given by --config)

Recognized keys:
  debugging    (bool)  emit debug() output
  color        (bool)  ANSI colors on the sink
  max_depth    (int)   nesting depth for inspected values
  shorten_max  (int)   slashes kept by shorten() in listings
  policy       (str)   "suppress-and-log" or "raise"
"""

import json
import os
from pathlib import Path

from xtio.lib.fs_lib import DEFAULT_SHORTEN_MAX, ErrorPolicy
from xtio.lib.log_lib import OutputConfig
from xtio.lib.log_lib.inspector import DEFAULT_MAX_DEPTH


CONFIG_KEYS = ["debugging", "color", "max_depth", "shorten_max", "policy"]

DEFAULTS = {
    "debugging": False,
    "color": True,
    "max_depth": DEFAULT_MAX_DEPTH,
    "shorten_max": DEFAULT_SHORTEN_MAX,
    "policy": ErrorPolicy.SUPPRESS_AND_LOG.value,
}


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.xtio/)."""
    return Path.home() / ".xtio"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .xtio.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / ".xtio.json"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config(path=None):
    """Load the global config file (or an explicit replacement)."""
    return load_json(path or get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .xtio.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(args=None, keys=None, start_dir=None):
    """Resolve config values using three-layer precedence.

    For each key in `keys`, checks (in order):
      1. CLI args (from argparse namespace; None means "not given")
      2. Project .xtio.json
      3. Global ~/.xtio/config.json (or args.config)

    Keys found nowhere fall back to DEFAULTS. Returns a dict.
    """
    if keys is None:
        keys = CONFIG_KEYS

    project_cfg, _ = load_project_config(start_dir)
    global_cfg = load_global_config(getattr(args, "config", None))

    resolved = {}
    for key in keys:
        # Normalize key: argparse uses underscores, JSON may use either
        arg_key = key.replace("-", "_")
        alt_json_key = arg_key.replace("_", "-")

        for layer in (vars(args) if args is not None else {},
                      project_cfg, global_cfg):
            value = layer.get(arg_key)
            if value is None:
                value = layer.get(alt_json_key)
            if value is not None:
                resolved[arg_key] = value
                break
        else:
            resolved[arg_key] = DEFAULTS.get(arg_key)

    return resolved


def build_output_config(resolved, file=None):
    """Turn resolved settings into an OutputConfig."""
    return OutputConfig(
        file=file,
        debugging=bool(resolved.get("debugging", DEFAULTS["debugging"])),
        color=bool(resolved.get("color", DEFAULTS["color"])),
        max_depth=int(resolved.get("max_depth", DEFAULTS["max_depth"])),
    )


def resolve_policy(resolved):
    """Return the ErrorPolicy named in resolved settings.

    Unknown names fall back to SUPPRESS_AND_LOG.
    """
    name = resolved.get("policy") or DEFAULTS["policy"]
    try:
        return ErrorPolicy(name)
    except ValueError:
        return ErrorPolicy.SUPPRESS_AND_LOG
