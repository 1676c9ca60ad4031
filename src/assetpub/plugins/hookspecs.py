"""Pluggy hook specifications for assetpub."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from assetpub.managers.protocols import AssetManager

PROJECT_NAME = "assetpub"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class AssetPubHookSpec:
    """Hook specifications for the assetpub plugin system."""

    @hookspec
    def register_asset_managers(self) -> dict[str, AssetManager] | None:
        """Return name -> AssetManager entries to add to the registry."""
