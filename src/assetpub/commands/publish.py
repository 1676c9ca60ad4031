"""publish, bundles, managers — the publishing commands."""

from __future__ import annotations

from pathlib import Path

import click

from assetpub.commands._base import ExampleCommand
from assetpub.commands._context import AppContext


@click.command(
    cls=ExampleCommand,
    examples="""\
  # Publish a bundle declared under [bundles.widget] in assetpub.toml
  assetpub publish widget

  # Publish a directory that is not in the config
  assetpub publish --dir public/widget/assets

  # Use a named manager instead of the default, print only the URL
  assetpub -q publish --dir public/widget --manager cdn""",
)
@click.argument("bundle", required=False)
@click.option(
    "--dir",
    "directory",
    type=click.Path(path_type=Path),
    default=None,
    help="Publish this directory instead of a configured bundle.",
)
@click.option("--manager", default=None, help="Asset manager name (with --dir).")
@click.pass_obj
def publish(
    app: AppContext,
    bundle: str | None,
    directory: Path | None,
    manager: str | None,
) -> None:
    """Publish BUNDLE (or --dir) and print its public URL."""
    if (bundle is None) == (directory is None):
        raise click.UsageError("Give exactly one of BUNDLE or --dir.")
    if bundle is not None and manager is not None:
        raise click.UsageError("--manager only applies to --dir; set it in the bundle config.")

    if bundle is not None:
        app.emit(app.service.publish_bundle(bundle))
    else:
        assert directory is not None
        app.emit(app.service.publish_directory(directory, manager=manager))


@click.command(cls=ExampleCommand, examples="  assetpub bundles\n  assetpub --json bundles")
@click.pass_obj
def bundles(app: AppContext) -> None:
    """List configured bundles."""
    app.emit(app.service.list_bundles())


@click.command(cls=ExampleCommand, examples="  assetpub managers")
@click.pass_obj
def managers(app: AppContext) -> None:
    """List registered asset managers."""
    app.emit(app.service.list_managers())
