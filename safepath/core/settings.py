"""
Persistent defaults for SafePath runtimes.
"""
from dataclasses import asdict, dataclass, fields
from pathlib import Path
import json
from typing import Any

from safepath.core.cache import DEFAULT_MAXSIZE

SETTINGS_FILE = "settings.json"

@dataclass
class Settings:
    """Configuration settings for SafePath."""
    cache_size: int = DEFAULT_MAXSIZE
    immutable: bool = False  # default write mode for bound dicts
    strict: bool = True  # validate_and_set raises on failure
    verbose: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Settings':
        """Hydrate Settings from a dictionary, ignoring unknown keys."""
        valid_keys = {f.name for f in fields(cls)}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys}
        if filtered_data.get("cache_size") is not None:
            cache_size = int(filtered_data["cache_size"])
            if cache_size < 1:
                raise ValueError(f"cache_size must be at least 1, got {cache_size}")
            filtered_data["cache_size"] = cache_size
        for key in ("immutable", "strict", "verbose"):
            # "false" would be truthy, so only real booleans are accepted
            if key in filtered_data and not isinstance(filtered_data[key], bool):
                raise TypeError(f"{key} must be a boolean, got {filtered_data[key]!r}")
        return cls(**filtered_data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize Settings to a dictionary."""
        return asdict(self)

# --- Persistence functions ---

def load_settings(settings_dir: Path) -> Settings:
    """Load settings from a JSON file in the settings directory."""
    path = settings_dir / SETTINGS_FILE
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return Settings.from_dict(data)
    except (json.JSONDecodeError, TypeError, ValueError, AttributeError):
        # If file is corrupted or invalid, return default settings (failsafe)
        return Settings()

def save_settings(settings_dir: Path, settings: Settings) -> Path:
    """Save settings to a JSON file in the settings directory."""
    settings_dir.mkdir(parents=True, exist_ok=True)
    path = settings_dir / SETTINGS_FILE
    data = settings.to_dict()
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
