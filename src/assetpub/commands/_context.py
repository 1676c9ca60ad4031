"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Builds the manager registry and PublishService
lazily so ``--help`` and ``--version`` never load plugins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from assetpub.config.logging import configure_logging
from assetpub.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from assetpub.config.settings import AssetPubSettings
    from assetpub.services.publish import PublishService
    from assetpub.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: AssetPubSettings) -> None:
        self.settings = settings
        self._service: PublishService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> PublishService:
        """The publish service (created on first access)."""
        if self._service is None:
            from assetpub.managers.registry import build_registry
            from assetpub.plugins.manager import PluginManager
            from assetpub.services.publish import PublishService

            plugins = PluginManager()
            plugins.discover()
            registry = build_registry(self.settings, plugins)
            self._service = PublishService(registry, self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; failures go to stderr and exit with code 1.

        Warnings go to stderr in human mode so piped output stays clean.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
