"""Publishing layer — AssetPublisher and its error types.

Depends only on the manager protocols. Never imports from services,
commands, or output.
"""

from assetpub.publishing.errors import (
    DirectoryNotFoundError,
    ManagerNotFoundError,
    OwnerNotAttachedError,
    PublishError,
)
from assetpub.publishing.publisher import AssetPublisher

__all__ = [
    "AssetPublisher",
    "DirectoryNotFoundError",
    "ManagerNotFoundError",
    "OwnerNotAttachedError",
    "PublishError",
]
