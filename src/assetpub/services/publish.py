"""PublishService — publish configured bundles and ad-hoc directories.

Holds one AssetPublisher per bundle name for the life of the service, so
a bundle is published once per configuration epoch no matter how often
its URL is requested.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel

from assetpub.publishing.errors import PublishError
from assetpub.publishing.publisher import AssetPublisher
from assetpub.services.result import ServiceResult

if TYPE_CHECKING:
    from assetpub.config.settings import AssetPubSettings
    from assetpub.managers.registry import ManagerRegistry

logger = logging.getLogger(__name__)


class AssetBundle(BaseModel):
    """A named directory to publish; the owner of its publisher."""

    model_config = {"frozen": True}

    name: str
    source_directory: Path
    manager: str | None = None


class PublishService:
    """Service-layer entry point for publishing.

    Usage::

        service = PublishService(build_registry(settings), settings)
        result = service.publish_bundle("widget")
        if result.ok:
            print(result.data["url"])
    """

    def __init__(self, registry: ManagerRegistry, settings: AssetPubSettings) -> None:
        self._registry = registry
        self._settings = settings
        self._publishers: dict[str, AssetPublisher] = {}
        self._directory_publishers: dict[tuple[str, str | None], AssetPublisher] = {}

    # ------------------------------------------------------------------
    # Publishers
    # ------------------------------------------------------------------

    def bundle(self, name: str) -> AssetBundle | None:
        """The configured bundle called *name*, or None."""
        section = self._settings.bundles.get(name)
        if section is None:
            return None
        return AssetBundle(
            name=name,
            source_directory=self._settings.resolve_path(section.source_directory),
            manager=section.manager,
        )

    def publisher_for(self, bundle: AssetBundle) -> AssetPublisher:
        """Return the publisher for *bundle*, created on first use.

        An existing publisher is reconfigured in place; its cache survives
        unless the directory or manager changed.
        """
        publisher = self._publishers.get(bundle.name)
        if publisher is None:
            publisher = self._new_publisher(bundle)
            self._publishers[bundle.name] = publisher
        else:
            publisher.set_source_directory(bundle.source_directory)
            publisher.set_manager_name(bundle.manager)
        publisher.owner = bundle
        return publisher

    def directory_publisher_for(self, bundle: AssetBundle) -> AssetPublisher:
        """Return the publisher for an ad-hoc directory.

        Keyed by resolved path and manager name, apart from configured
        bundles, so a directory never reuses a bundle's publisher.
        """
        key = (str(bundle.source_directory.resolve()), bundle.manager)
        publisher = self._directory_publishers.get(key)
        if publisher is None:
            publisher = self._new_publisher(bundle)
            self._directory_publishers[key] = publisher
        publisher.owner = bundle
        return publisher

    def _new_publisher(self, bundle: AssetBundle) -> AssetPublisher:
        return AssetPublisher(
            self._registry,
            bundle.source_directory,
            bundle.manager,
            strict_owner=self._settings.publisher.strict_owner,
            category=self._settings.publisher.message_category,
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def publish_bundle(self, name: str) -> ServiceResult:
        """Publish the configured bundle *name*."""
        bundle = self.bundle(name)
        if bundle is None:
            return ServiceResult.failure(
                "publish",
                "UNKNOWN_BUNDLE",
                f"No bundle named {name!r} is configured",
                {"bundle": name, "available": sorted(self._settings.bundles)},
            )
        return self._publish(bundle, self.publisher_for(bundle))

    def publish_directory(self, path: Path | str, manager: str | None = None) -> ServiceResult:
        """Publish an unconfigured directory, named after its last component."""
        directory = self._settings.resolve_path(path)
        bundle = AssetBundle(
            name=directory.name or str(directory),
            source_directory=directory,
            manager=manager,
        )
        return self._publish(bundle, self.directory_publisher_for(bundle))

    def _publish(self, bundle: AssetBundle, publisher: AssetPublisher) -> ServiceResult:
        op = "publish"
        cached = publisher.is_published

        try:
            url = publisher.get_published_url()
        except PublishError as exc:
            logger.debug("Publishing %s failed: %s", bundle.name, exc.message)
            return ServiceResult.failure(
                op, exc.code, exc.message, {"bundle": bundle.name, **exc.detail()}
            )
        except Exception as exc:
            logger.warning("Asset manager failed for %s", bundle.name, exc_info=True)
            return ServiceResult.failure(
                op,
                "PUBLISH_FAILED",
                f"Asset manager failed to publish {bundle.name!r}: {exc}",
                {"bundle": bundle.name, "directory": publisher.source_directory},
            )

        assert url is not None, "publisher always has its bundle as owner"

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "bundle": bundle.name,
                "url": url,
                "directory": publisher.source_directory,
                "manager": publisher.manager_name,
                "cached": cached,
            },
        )

    def list_bundles(self) -> ServiceResult:
        """Configured bundles with their publish state in this service."""
        items = []
        for name in sorted(self._settings.bundles):
            bundle = self.bundle(name)
            assert bundle is not None
            publisher = self._publishers.get(name)
            items.append(
                {
                    "name": name,
                    "directory": str(bundle.source_directory),
                    "manager": bundle.manager,
                    "published": publisher is not None and publisher.is_published,
                }
            )
        return ServiceResult(ok=True, op="list_bundles", data={"count": len(items), "items": items})

    def list_managers(self) -> ServiceResult:
        """Registered managers and which one is the default."""
        items = self._registry.names()
        default = self._registry.default_name
        warnings = []
        if default is None:
            warnings.append("No default asset manager is configured")
        return ServiceResult(
            ok=True,
            op="list_managers",
            data={"count": len(items), "items": items, "default": default},
            warnings=warnings,
        )
