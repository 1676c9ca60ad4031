"""Exceptions raised by AssetPublisher.

Each error carries the fields the service layer needs to build a
:class:`~assetpub.services.result.ServiceError` without parsing messages.
"""

from __future__ import annotations

from typing import Any

from assetpub.publishing import messages


class PublishError(Exception):
    """Base class for publishing failures."""

    code = "PUBLISH_FAILED"

    def __init__(self, message: str, *, owner_type: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.owner_type = owner_type

    def detail(self) -> dict[str, Any]:
        """Contextual fields for structured error payloads."""
        return {"owner_type": self.owner_type}


class DirectoryNotFoundError(PublishError):
    """The source directory is missing or unreadable at publish time."""

    code = "DIRECTORY_NOT_FOUND"

    def __init__(
        self,
        owner_type: str,
        directory: str,
        *,
        category: str = messages.DEFAULT_CATEGORY,
    ) -> None:
        message = messages.translate(
            category,
            messages.DIRECTORY_NOT_FOUND,
            {"class_name": owner_type, "dir_name": directory},
        )
        super().__init__(message, owner_type=owner_type)
        self.directory = directory

    def detail(self) -> dict[str, Any]:
        return {**super().detail(), "directory": self.directory}


class ManagerNotFoundError(PublishError):
    """No asset manager could be resolved.

    ``manager_name`` is None when the default (system) manager was requested.
    """

    code = "MANAGER_NOT_FOUND"

    def __init__(
        self,
        owner_type: str,
        manager_name: str | None = None,
        *,
        category: str = messages.DEFAULT_CATEGORY,
    ) -> None:
        if manager_name is None:
            message = messages.translate(
                category,
                messages.SYSTEM_MANAGER_NOT_FOUND,
                {"class_name": owner_type},
            )
        else:
            message = messages.translate(
                category,
                messages.NAMED_MANAGER_NOT_FOUND,
                {"class_name": owner_type, "manager_name": manager_name},
            )
        super().__init__(message, owner_type=owner_type)
        self.manager_name = manager_name

    @property
    def is_default(self) -> bool:
        return self.manager_name is None

    def detail(self) -> dict[str, Any]:
        return {
            **super().detail(),
            "manager": self.manager_name,
            "default": self.is_default,
        }


class OwnerNotAttachedError(PublishError):
    """Raised in strict mode when a URL is requested without an owner."""

    code = "NO_OWNER"

    def __init__(
        self,
        directory: str,
        *,
        category: str = messages.DEFAULT_CATEGORY,
    ) -> None:
        message = messages.translate(
            category,
            messages.OWNER_NOT_ATTACHED,
            {"dir_name": directory},
        )
        super().__init__(message)
        self.directory = directory

    def detail(self) -> dict[str, Any]:
        return {**super().detail(), "directory": self.directory}
