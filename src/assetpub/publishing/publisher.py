"""AssetPublisher — lazily publish a directory and cache its public URL.

INVARIANT: A cached URL implies the source directory was readable and a
manager was found when it was resolved.
INVARIANT: Changing the source directory or manager name clears the cache
before any later read.

The publisher is a plain object held by whatever needs asset URLs. The
optional ``owner`` back-reference only feeds error messages.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from assetpub.publishing import messages
from assetpub.publishing.errors import (
    DirectoryNotFoundError,
    ManagerNotFoundError,
    OwnerNotAttachedError,
)

if TYPE_CHECKING:
    from assetpub.managers.protocols import AssetManager, ServiceLocator

logger = logging.getLogger(__name__)


def is_readable_dir(path: str) -> bool:
    """True if *path* is an existing directory the process can read."""
    if not path:
        return False
    candidate = Path(path)
    return candidate.is_dir() and os.access(candidate, os.R_OK | os.X_OK)


class AssetPublisher:
    """Publishes ``source_directory`` through a located manager, once per epoch.

    Usage::

        publisher = AssetPublisher(locator, source_directory="widget/assets")
        publisher.owner = widget
        url = publisher.get_published_url()

    Args:
        locator: Where managers are looked up.
        source_directory: Directory to publish. Validated lazily.
        manager_name: Named manager, or None for the default one.
        owner: Object this publisher serves; None disables publishing.
        strict_owner: Raise :class:`OwnerNotAttachedError` instead of
            returning None when no owner is attached.
        category: Translation category for error messages.
    """

    def __init__(
        self,
        locator: ServiceLocator,
        source_directory: str | os.PathLike[str] = "",
        manager_name: str | None = None,
        *,
        owner: Any = None,
        strict_owner: bool = False,
        category: str = messages.DEFAULT_CATEGORY,
    ) -> None:
        self._locator = locator
        self._source_directory = os.fspath(source_directory)
        self._manager_name = manager_name
        self._cached_url: str | None = None
        self._lock = threading.RLock()
        self.owner = owner
        self.strict_owner = strict_owner
        self.category = category

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def source_directory(self) -> str:
        return self._source_directory

    @source_directory.setter
    def source_directory(self, path: str | os.PathLike[str]) -> None:
        self.set_source_directory(path)

    def set_source_directory(self, path: str | os.PathLike[str]) -> None:
        """Store *path*; a different value starts a new epoch."""
        value = os.fspath(path)
        with self._lock:
            if value != self._source_directory:
                self._cached_url = None
            self._source_directory = value

    def get_source_directory(self) -> str:
        return self._source_directory

    @property
    def manager_name(self) -> str | None:
        return self._manager_name

    @manager_name.setter
    def manager_name(self, name: str | None) -> None:
        self.set_manager_name(name)

    def set_manager_name(self, name: str | None) -> None:
        """Store *name* (None selects the default manager)."""
        with self._lock:
            if name != self._manager_name:
                self._cached_url = None
            self._manager_name = name

    def get_manager_name(self) -> str | None:
        return self._manager_name

    def is_using_default_manager(self) -> bool:
        return self._manager_name is None

    @property
    def is_published(self) -> bool:
        """Whether a URL is cached for the current epoch."""
        return self._cached_url is not None

    def reset(self) -> None:
        """Forget the cached URL so the next request publishes again."""
        with self._lock:
            self._cached_url = None

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_manager(self) -> AssetManager | None:
        """Look up the configured manager; None if the locator has none."""
        if self.is_using_default_manager():
            return self._locator.get_default()
        return self._locator.get_named(self._manager_name)  # type: ignore[arg-type]

    def _owner_type(self) -> str:
        return type(self.owner).__name__

    def get_published_url(self) -> str | None:
        """Return the public URL, publishing on the first call of an epoch.

        Returns None without side effects when no owner is attached (unless
        ``strict_owner`` is set). Failures are raised and never cached.

        Raises:
            DirectoryNotFoundError: The source directory is not readable.
            ManagerNotFoundError: The locator has no matching manager.
            OwnerNotAttachedError: No owner and ``strict_owner`` is set.
        """
        cached = self._cached_url
        if cached is not None:
            self._log_cache_hit(cached)
            return cached

        with self._lock:
            if self._cached_url is not None:
                self._log_cache_hit(self._cached_url)
                return self._cached_url

            if self.owner is None:
                if self.strict_owner:
                    raise OwnerNotAttachedError(
                        self._source_directory, category=self.category
                    )
                logger.debug("No owner attached; skipping publish of %s", self._source_directory)
                return None

            directory = self._source_directory
            manager_name = self._manager_name
            owner_type = self._owner_type()
            if not is_readable_dir(directory):
                raise DirectoryNotFoundError(
                    owner_type, directory, category=self.category
                )

            manager = self.resolve_manager()
            if manager is None:
                raise ManagerNotFoundError(
                    owner_type, manager_name, category=self.category
                )

            url = manager.publish(directory)
            self._cached_url = url

        structlog.get_logger(__name__).debug(
            "asset.published",
            owner=owner_type,
            directory=directory,
            manager=manager_name or "<default>",
            url=url,
        )
        return url

    def _log_cache_hit(self, url: str) -> None:
        structlog.get_logger(__name__).debug(
            "asset.cache_hit",
            directory=self._source_directory,
            url=url,
        )

    @property
    def published_url(self) -> str | None:
        return self.get_published_url()

    def __repr__(self) -> str:
        return (
            f"AssetPublisher(source_directory={self._source_directory!r}, "
            f"manager_name={self._manager_name!r}, published={self.is_published})"
        )
