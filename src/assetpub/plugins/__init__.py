"""Extension layer — third-party asset managers via pluggy.

Discovery: entry_points in the ``assetpub.plugins`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from assetpub.plugins.hookspecs import hookimpl
from assetpub.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
