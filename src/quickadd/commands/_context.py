"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Holds settings and the process environment, builds
services, and centralizes result emission (stdout/stderr + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quickadd.config.logging import configure_logging
from quickadd.infrastructure.environment import SystemEnvironment
from quickadd.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from quickadd.config.settings import QuickAddSettings
    from quickadd.infrastructure.environment import Environment
    from quickadd.services.daily_note import DailyNoteService
    from quickadd.services.result import ServiceResult
    from quickadd.services.vaults import VaultService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: QuickAddSettings, env: Environment | None = None) -> None:
        self.settings = settings
        self.env: Environment = env or SystemEnvironment()

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from quickadd.services.telemetry import enable_telemetry

            enable_telemetry()

    def vault_service(self) -> VaultService:
        from quickadd.services.vaults import VaultService

        return VaultService(self.env, registry=self.settings.registry.path)

    def daily_note_service(self) -> DailyNoteService:
        from quickadd.services.daily_note import DailyNoteService

        return DailyNoteService(self.env)

    def resolve_vault_path(self, selector: str | None) -> str:
        """Resolve ``--vault`` (or the configured default) to a vault path.

        Emits the failure and exits when no single vault matches.
        """
        result = self.vault_service().resolve_vault(selector or self.settings.vault.default)
        if not result.ok:
            self.emit(result)
        return str(result.data["path"])

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr so they don't
          pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
