"""Config file discovery.

Walk-up finder locates assetpub.toml, similar to how git finds .git/.
Supports ASSETPUB_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "assetpub.toml"
CONFIG_ENV_VAR = "ASSETPUB_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest assetpub.toml at or above *start* (default: cwd).

    ASSETPUB_CONFIG, when set, short-circuits the search: its file is
    returned if it exists, otherwise None.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def project_root_for(config_path: Path | None, fallback: Path | None = None) -> Path:
    """Directory relative paths in the config are resolved against."""
    if config_path is not None:
        return config_path.resolve().parent
    return (fallback or Path.cwd()).resolve()
