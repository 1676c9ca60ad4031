"""assetpub — lazy publishing of static asset directories."""

__version__ = "0.1.0"
