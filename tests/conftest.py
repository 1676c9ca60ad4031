"""Shared pytest fixtures and test doubles for assetpub tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from assetpub.config.settings import AssetPubSettings
from assetpub.managers.registry import ManagerRegistry
from assetpub.publishing import messages


class RecordingManager:
    """AssetManager double that returns a fixed URL and records calls."""

    def __init__(self, url: str = "/pub/widget_a1b2") -> None:
        self.url = url
        self.calls: list[str] = []

    def publish(self, directory: str) -> str:
        self.calls.append(directory)
        return self.url


class PrefixManager:
    """AssetManager double whose URL depends on the directory name."""

    def __init__(self, prefix: str = "/pub") -> None:
        self.prefix = prefix
        self.calls: list[str] = []

    def publish(self, directory: str) -> str:
        self.calls.append(directory)
        return f"{self.prefix}/{Path(directory).name}"


class Widget:
    """Stand-in owner object."""


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's ASSETPUB_* environment out of tests."""
    monkeypatch.delenv("ASSETPUB_CONFIG", raising=False)
    monkeypatch.delenv("ASSETPUB_VERBOSE", raising=False)


@pytest.fixture(autouse=True)
def _restore_translator() -> Generator[None]:
    yield
    messages.set_translator(None)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """configure_logging() mutates the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    pkg_level = logging.getLogger("assetpub").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("assetpub").setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    """An existing asset directory under ``public/``."""
    path = tmp_path / "public" / "widget"
    path.mkdir(parents=True)
    (path / "widget.css").write_text("body {}\n", encoding="utf-8")
    return path


@pytest.fixture
def manager() -> RecordingManager:
    return RecordingManager()


@pytest.fixture
def registry(manager: RecordingManager) -> ManagerRegistry:
    """Registry whose default is the recording manager."""
    reg = ManagerRegistry()
    reg.register("system", manager, default=True)
    return reg


@pytest.fixture
def project(tmp_path: Path, assets_dir: Path) -> Path:
    """A project root with an assetpub.toml declaring one manager and bundles."""
    (tmp_path / "assetpub.toml").write_text(
        """\
[publisher]
default_manager = "static"

[managers.static]
web_root = "public"
base_url = "/static"

[bundles.widget]
source_directory = "public/widget"

[bundles.missing]
source_directory = "public/nope"

[bundles.orphan]
source_directory = "public/widget"
manager = "cdn"
""",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def settings(project: Path) -> AssetPubSettings:
    return AssetPubSettings.load(project_root=project)


@pytest.fixture
def _in_project(project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the project so the CLI discovers its assetpub.toml."""
    monkeypatch.chdir(project)
