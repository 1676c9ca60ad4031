"""Structural contracts for asset managers and the locator that finds them.

Anything with a matching ``publish`` method is an AssetManager; plugins do
not need to inherit from a base class.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AssetManager(Protocol):
    """Makes a local directory reachable at a public URL."""

    def publish(self, directory: str) -> str:
        """Publish *directory* and return its public URL.

        Must be deterministic for a given directory within one run.
        """
        ...


@runtime_checkable
class ServiceLocator(Protocol):
    """Looks up asset managers by name, or the default one."""

    def get_default(self) -> AssetManager | None: ...

    def get_named(self, name: str) -> AssetManager | None: ...
