"""ManagerRegistry — the concrete ServiceLocator.

Managers come from two places: ``[managers.<name>]`` sections of the
config, and plugins implementing ``register_asset_managers``.
Config entries win over plugin entries with the same name.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from assetpub.managers.mapped import MappedAssetManager

if TYPE_CHECKING:
    from assetpub.config.settings import AssetPubSettings
    from assetpub.managers.protocols import AssetManager
    from assetpub.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class ManagerRegistry:
    """Name -> AssetManager lookup with an optional default entry."""

    def __init__(self) -> None:
        self._managers: dict[str, AssetManager] = {}
        self._default_name: str | None = None

    def register(self, name: str, manager: AssetManager, *, default: bool = False) -> None:
        """Register *manager* under *name*, replacing any previous entry."""
        if not name:
            msg = "Manager name must not be empty"
            raise ValueError(msg)
        self._managers[name] = manager
        if default:
            self._default_name = name
        logger.debug("Registered asset manager: %s", name)

    def unregister(self, name: str) -> None:
        """Remove *name*; clears the default if it pointed there."""
        self._managers.pop(name, None)
        if self._default_name == name:
            self._default_name = None

    def set_default(self, name: str | None) -> None:
        """Point the default at a registered manager (None clears it)."""
        if name is not None and name not in self._managers:
            msg = f"Unknown asset manager: {name!r}"
            raise KeyError(msg)
        self._default_name = name

    @property
    def default_name(self) -> str | None:
        return self._default_name

    def get_default(self) -> AssetManager | None:
        if self._default_name is None:
            return None
        return self._managers.get(self._default_name)

    def get_named(self, name: str) -> AssetManager | None:
        return self._managers.get(name)

    def names(self) -> list[str]:
        return sorted(self._managers)

    def __contains__(self, name: object) -> bool:
        return name in self._managers

    def __len__(self) -> int:
        return len(self._managers)


def build_registry(
    settings: AssetPubSettings,
    plugin_manager: PluginManager | None = None,
) -> ManagerRegistry:
    """Build a registry from *settings* plus any plugin-provided managers.

    A ``default_manager`` naming an unknown manager is logged and left
    unset; publishing then reports the missing system manager.
    """
    registry = ManagerRegistry()

    if plugin_manager is not None:
        for name, manager in plugin_manager.collect_managers().items():
            registry.register(name, manager)

    for name, section in settings.managers.items():
        web_root = settings.resolve_path(section.web_root)
        registry.register(name, MappedAssetManager(web_root, section.base_url))

    default = settings.publisher.default_manager
    if default is not None:
        if default in registry:
            registry.set_default(default)
        else:
            logger.warning("Default asset manager %r is not registered", default)

    return registry
