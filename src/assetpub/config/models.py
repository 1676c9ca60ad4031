"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, assetpub.toml only contains
overrides. An empty file is a valid config with no managers or bundles.
The sections are composed into AssetPubSettings.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from assetpub.publishing.messages import DEFAULT_CATEGORY


class PublisherConfig(BaseModel):
    """[publisher] section."""

    model_config = {"frozen": True}

    default_manager: str | None = None
    strict_owner: bool = False
    message_category: str = DEFAULT_CATEGORY


class ManagerConfig(BaseModel):
    """[managers.<name>] section."""

    model_config = {"frozen": True}

    web_root: Path = Path("public")
    base_url: str = "/"


class BundleConfig(BaseModel):
    """[bundles.<name>] section."""

    model_config = {"frozen": True}

    source_directory: Path
    manager: str | None = None

