"""MappedAssetManager — publish directories that already live under a web root.

No files are copied. A directory below ``web_root`` is published at
``base_url`` joined with its path relative to ``web_root``.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class MappedAssetManager:
    """Map directories under *web_root* onto URLs under *base_url*."""

    def __init__(self, web_root: Path | str, base_url: str = "/") -> None:
        self.web_root = Path(web_root)
        self.base_url = base_url.rstrip("/")
        self.publish_count = 0

    def publish(self, directory: str) -> str:
        """Return the URL for *directory*.

        Raises:
            ValueError: *directory* is not inside ``web_root``.
        """
        resolved = Path(directory).resolve()
        root = self.web_root.resolve()
        if not resolved.is_relative_to(root):
            msg = f"Directory {directory!r} is outside web root {str(self.web_root)!r}"
            raise ValueError(msg)

        relative = resolved.relative_to(root).as_posix()
        self.publish_count += 1
        url = self.base_url if relative == "." else f"{self.base_url}/{relative}"
        url = url or "/"
        logger.debug("Mapped %s -> %s", directory, url)
        return url

    def __repr__(self) -> str:
        return f"MappedAssetManager(web_root={str(self.web_root)!r}, base_url={self.base_url!r})"
