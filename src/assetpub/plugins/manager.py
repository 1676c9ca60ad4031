"""Plugin discovery and manager collection.

Plugins are found through setuptools entry points (``assetpub.plugins``)
or registered directly. Each may contribute asset managers through the
``register_asset_managers`` hook.
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from assetpub.managers.protocols import AssetManager
from assetpub.plugins.hookspecs import PROJECT_NAME, AssetPubHookSpec

ENTRY_POINT_GROUP = "assetpub.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Wraps a pluggy manager with assetpub's hook specs."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(AssetPubHookSpec)

    def discover(self) -> list[str]:
        """Load entry-point plugins and return all registered plugin names."""
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_plugin_classes()
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def collect_managers(self) -> dict[str, AssetManager]:
        """Gather managers from every plugin implementing the hook.

        A plugin that raises, returns a non-dict, or offers an object
        without ``publish`` is logged and skipped. On duplicate names the
        earliest registered plugin wins.
        """
        collected: dict[str, AssetManager] = {}
        for impl in self._pm.hook.register_asset_managers.get_hookimpls():
            plugin_name = impl.plugin_name
            try:
                entries = impl.function()
            except Exception:
                logger.warning(
                    "Failed to collect asset managers from plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            if entries is None:
                continue
            if not isinstance(entries, dict):
                logger.warning("Plugin %s returned non-dict asset managers", plugin_name)
                continue

            for name, manager in entries.items():
                if not isinstance(manager, AssetManager):
                    logger.warning(
                        "Skipping asset manager %r from plugin %s: no publish()",
                        name,
                        plugin_name,
                    )
                    continue
                if name in collected:
                    logger.warning(
                        "Asset manager %r from plugin %s shadowed by an earlier one",
                        name,
                        plugin_name,
                    )
                    continue
                collected[name] = manager
        return collected

    def _instantiate_plugin_classes(self) -> None:
        """Replace plugin classes registered by entry points with instances.

        Hooks dispatched against a class object leave ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
