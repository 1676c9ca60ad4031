"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ASSETPUB_*`` prefix, ``__`` for nesting
  3. TOML file    — ``assetpub.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from assetpub.config.discovery import find_config, project_root_for
from assetpub.config.models import BundleConfig, ManagerConfig, PublisherConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``assetpub.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path is handed to settings_customise_sources out of band.
_tls = threading.local()


class AssetPubSettings(BaseSettings):
    """Frozen settings for the whole assetpub process.

    Attributes:
        project_root: Directory relative config paths resolve against
            (parent of ``assetpub.toml``, or CWD if none was found).
        config_path: The TOML file in use, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ASSETPUB_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    publisher: PublisherConfig = Field(default_factory=PublisherConfig)
    managers: dict[str, ManagerConfig] = Field(default_factory=dict)
    bundles: dict[str, BundleConfig] = Field(default_factory=dict)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        project_root: Path | None = None,
        **overrides: Any,
    ) -> AssetPubSettings:
        """Discover the config file and build settings.

        An explicit *config_path* that does not exist is ignored, matching
        the behaviour of an unset ASSETPUB_CONFIG.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(project_root)

        root = project_root or project_root_for(toml_path)

        _tls.toml_path = toml_path
        try:
            return cls(project_root=root, config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None

    def resolve_path(self, path: Path | str) -> Path:
        """Resolve *path* against ``project_root`` unless already absolute."""
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self.project_root / candidate
        return candidate
