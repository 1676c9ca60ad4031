"""Asset managers and the registry that locates them."""

from assetpub.managers.mapped import MappedAssetManager
from assetpub.managers.protocols import AssetManager, ServiceLocator
from assetpub.managers.registry import ManagerRegistry

__all__ = ["AssetManager", "ManagerRegistry", "MappedAssetManager", "ServiceLocator"]
