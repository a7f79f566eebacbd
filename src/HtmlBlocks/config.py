from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml

INPUT_FORMATS = ("auto", "html", "markdown")


@dataclass
class Settings:
    input_format: str = "auto"
    wrap_payload: bool = False
    json_indent: Optional[int] = 2
    verbose: bool = False

    def merged(self, **overrides: Any) -> "Settings":
        """Return a copy with every override that is not ``None`` applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        return _validated(replace(self, **updates))


def load_settings(path: str | Path | None = None) -> Settings:
    """Load converter settings from a YAML mapping; missing file path means defaults."""
    if path is None:
        return Settings()
    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping of setting names to values.")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    return _validated(Settings(**data))


def _validated(settings: Settings) -> Settings:
    if settings.input_format not in INPUT_FORMATS:
        raise ValueError(
            f"input_format must be one of {', '.join(INPUT_FORMATS)}, got {settings.input_format!r}"
        )
    if settings.json_indent is not None and not isinstance(settings.json_indent, int):
        raise ValueError("json_indent must be an integer or null.")
    return settings
