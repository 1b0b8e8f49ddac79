"""
Default location of the SafePath settings file.
"""
from pathlib import Path
from platformdirs import user_config_dir

APP_NAME = 'safepath'

def default_settings_dir() -> Path:
    """Get the default settings directory for SafePath."""
    return Path(user_config_dir(APP_NAME)).expanduser().resolve()
