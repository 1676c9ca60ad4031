"""Subcommands for assetpub."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach every subcommand to the root group."""
    from assetpub.commands.publish import bundles, managers, publish

    cli.add_command(publish)
    cli.add_command(bundles)
    cli.add_command(managers)
