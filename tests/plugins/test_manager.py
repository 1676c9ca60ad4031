"""Tests for PluginManager — registration and manager collection."""

from __future__ import annotations

import logging

import pytest

from assetpub.plugins import PluginManager, hookimpl
from tests.conftest import RecordingManager


class _StaticPlugin:
    @hookimpl
    def register_asset_managers(self):
        return {"static": RecordingManager("/static")}


class _NonePlugin:
    @hookimpl
    def register_asset_managers(self):
        return None


class _BrokenPlugin:
    @hookimpl
    def register_asset_managers(self):
        raise RuntimeError("boom")


class _ListPlugin:
    @hookimpl
    def register_asset_managers(self):
        return ["static"]


class _NotAManagerPlugin:
    @hookimpl
    def register_asset_managers(self):
        return {"bogus": object()}


class _ShadowPlugin:
    @hookimpl
    def register_asset_managers(self):
        return {"static": RecordingManager("/shadow")}


class TestPluginManager:
    def test_hook_relay_accessible(self) -> None:
        assert hasattr(PluginManager().hook, "register_asset_managers")

    def test_register_plugin(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_StaticPlugin(), name="static")
        assert "static" in pm.list_plugin_names()

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_StaticPlugin())
        assert "_StaticPlugin" in pm.list_plugin_names()

    def test_unregister(self) -> None:
        pm = PluginManager()
        plugin = _StaticPlugin()
        pm.register_plugin(plugin, name="static")
        pm.unregister(plugin)
        assert pm.list_plugin_names() == []

    def test_discover_without_entry_points(self) -> None:
        assert PluginManager().discover() == []

    def test_collect_managers(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_StaticPlugin())
        pm.register_plugin(_NonePlugin())
        managers = pm.collect_managers()
        assert list(managers) == ["static"]
        assert managers["static"].publish("x") == "/static"

    @pytest.mark.parametrize("plugin_cls", [_BrokenPlugin, _ListPlugin, _NotAManagerPlugin])
    def test_bad_plugins_warn_and_skip(
        self, plugin_cls: type, caplog: pytest.LogCaptureFixture
    ) -> None:
        pm = PluginManager()
        pm.register_plugin(plugin_cls())
        pm.register_plugin(_StaticPlugin())
        with caplog.at_level(logging.WARNING, logger="assetpub"):
            managers = pm.collect_managers()
        assert list(managers) == ["static"]
        assert plugin_cls.__name__ in caplog.text

    def test_duplicate_name_first_registered_wins(self, caplog: pytest.LogCaptureFixture) -> None:
        pm = PluginManager()
        pm.register_plugin(_StaticPlugin())
        pm.register_plugin(_ShadowPlugin())
        with caplog.at_level(logging.WARNING, logger="assetpub"):
            managers = pm.collect_managers()
        assert managers["static"].publish("x") == "/static"
        assert "shadowed" in caplog.text
