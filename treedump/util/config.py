import json, os, logging
from pathlib import Path

from treedump.core.model import Configuration, ExclusionMode

logger = logging.getLogger("CONFIG")

FILE = "treedump.json"
D = {
    "allowed_extensions": ["py", "js", "tsx", "swift", "md", "txt"],
    "excluded_folders": ["node_modules", ".git", "dist", "build"],
    "exclusion_mode": ExclusionMode.SUBSTRING.value,
    "filter_tree_by_extension": True,
    "last_folder": None,
}
LIST_KEYS = ("allowed_extensions", "excluded_folders")


def parse_list(text):
    """Split comma-separated free text into trimmed, non-empty entries."""
    if text is None:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def load():
    data = {k: (list(v) if isinstance(v, list) else v) for k, v in D.items()}
    if os.path.exists(FILE):
        try:
            with open(FILE, "r", encoding="utf-8") as f:
                data.update(json.load(f))
        except Exception:
            logger.exception("Failed to load config from %s", FILE)
    for key in LIST_KEYS:
        if data.get(key) is None:
            data[key] = []
        elif isinstance(data[key], str):
            data[key] = parse_list(data[key])
    if data.get("last_folder"):
        data["last_folder"] = Path(data["last_folder"]).as_posix()
    return data


def save(data):
    data = dict(data)
    try:
        if data.get("last_folder"):
            data["last_folder"] = Path(data["last_folder"]).as_posix()
        with open(FILE, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=4)
    except Exception:
        logger.exception("Failed to save config to %s", FILE)


def _as_list(value):
    if value is None:
        return []
    if isinstance(value, str):
        return parse_list(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"Expected a list setting, got {value!r}")
    return [str(v) for v in value]


def _as_bool(value, default=True):
    if value is None:
        return default
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("true", "yes", "on", "1"):
            return True
        if text in ("false", "no", "off", "0", ""):
            return False
        raise ValueError(f"Not a boolean setting: {value!r}")
    return bool(value)


def build_configuration(root, data):
    mode = data.get("exclusion_mode") or D["exclusion_mode"]
    try:
        mode = ExclusionMode(mode)
    except ValueError:
        raise ValueError(f"Unknown exclusion mode: {mode!r}") from None
    return Configuration(
        root=Path(root),
        allowed_extensions=_as_list(data.get("allowed_extensions")),
        excluded_folders=_as_list(data.get("excluded_folders")),
        exclusion_mode=mode,
        filter_tree_by_extension=_as_bool(data.get("filter_tree_by_extension")),
    )
