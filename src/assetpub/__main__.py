"""Allow ``python -m assetpub``."""

from assetpub.cli import cli

cli()
