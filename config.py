"""Load/save simulation and display settings. Presets live in configs/ as {name}.json. Grid state is never saved."""

import json
import logging
import re
from pathlib import Path

from liquid.constants import DEFAULT_CELL_SIZE, DEFAULT_COLUMNS, DEFAULT_ROWS

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent / "configs"
LAST_FILE_NAME = "last.txt"
DEFAULT_PRESET = "default"

VIEW_MODES = ("bars", "flat")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
# Integer settings and their smallest accepted value.
INT_MINIMUMS = {"cell_size": 1, "line_width": 0, "tick_rate": 1}
WORLD_MINIMUMS = {"columns": 1, "rows": 1}
BOOL_KEYS = ("solid_guard", "relieve_pressure")


def _last_file() -> Path:
    return CONFIG_DIR / LAST_FILE_NAME


def _sanitize_name(name: str) -> str:
    s = (name or "").strip()
    s = re.sub(r"[^\w\s-]", "", s)
    s = re.sub(r"[\s-]+", "_", s).strip("_")
    return s[:64] or "unnamed"


def get_config_path(name: str) -> Path:
    return CONFIG_DIR / f"{_sanitize_name(name)}.json"


def get_last_config() -> str | None:
    last = _last_file()
    if not last.exists():
        return None
    try:
        raw = last.read_text().strip()
    except OSError as exc:
        logger.warning("could not read %s: %s", last, exc)
        return None
    return raw or None


def set_last_config(name: str) -> None:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    _last_file().write_text(_sanitize_name(name))


def _read(path: Path) -> dict:
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("could not load config %s: %s; using defaults", path, exc)
        return _default_config()
    if not isinstance(data, dict):
        logger.warning("config %s is not a JSON object; using defaults", path)
        return _default_config()
    return _merge_defaults(data)


def load_config(path: Path | str | None = None) -> dict:
    """Explicit path, else the last saved preset, else defaults."""
    if path is not None:
        p = Path(path)
        if not p.exists():
            return _default_config()
        return _read(p)
    last = get_last_config()
    if last is None:
        return _default_config()
    p = get_config_path(last)
    if not p.exists():
        return _default_config()
    return _read(p)


def save_config(params: dict, name: str | None = None) -> Path:
    """Write params (merged over defaults) as preset name, default the last one, and remember it."""
    name = name or get_last_config() or DEFAULT_PRESET
    path = get_config_path(name)
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    out = _merge_defaults(params)
    with open(path, "w") as f:
        json.dump(out, f, indent=2)
    set_last_config(name)
    logger.info("saved settings to %s", path)
    return path


def _default_config() -> dict:
    return {
        "world": {"columns": DEFAULT_COLUMNS, "rows": DEFAULT_ROWS},
        "cell_size": DEFAULT_CELL_SIZE,
        "line_width": 2,
        "tick_rate": 33,
        "solid_guard": True,
        "relieve_pressure": True,
        "view_mode": "bars",
        "log_level": "INFO",
    }


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _take_int(target: dict, source: dict, key: str, minimum: int, label: str) -> None:
    if key not in source:
        return
    value = source[key]
    if _is_int(value) and value >= minimum:
        target[key] = value
    else:
        logger.warning("invalid %s %r (want an integer >= %d); using %r", label, value, minimum, target[key])


def _merge_defaults(data: dict) -> dict:
    """Defaults overlaid with every well-typed value in data. Bad values are logged and skipped."""
    d = _default_config()
    world = data.get("world", {})
    if isinstance(world, dict):
        for k, lo in WORLD_MINIMUMS.items():
            _take_int(d["world"], world, k, lo, f"world.{k}")
    else:
        logger.warning("invalid world %r; using defaults", world)
    for k, lo in INT_MINIMUMS.items():
        _take_int(d, data, k, lo, k)
    for k in BOOL_KEYS:
        if k not in data:
            continue
        if isinstance(data[k], bool):
            d[k] = data[k]
        else:
            logger.warning("invalid %s %r (want true or false); using %r", k, data[k], d[k])
    if "view_mode" in data:
        if data["view_mode"] in VIEW_MODES:
            d["view_mode"] = data["view_mode"]
        else:
            logger.warning("unknown view_mode %r; using %r", data["view_mode"], d["view_mode"])
    if "log_level" in data:
        level = str(data["log_level"]).upper()
        if level in LOG_LEVELS:
            d["log_level"] = level
        else:
            logger.warning("unknown log_level %r; using %r", data["log_level"], d["log_level"])
    return d
