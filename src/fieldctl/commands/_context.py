"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy field type loading (config sections
and plugins) and centralized result emission (stdout/stderr routing +
exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fieldctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from fieldctl.config.settings import FieldctlSettings
    from fieldctl.plugins.manager import PluginManager
    from fieldctl.services.fields import FieldService
    from fieldctl.services.result import ServiceResult
    from fieldctl.services.values import ValueService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  Plugins and
    configured field types are loaded on first service access so
    ``--help`` and ``--version`` never import plugin code.
    """

    def __init__(self, settings: FieldctlSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None
        self._load_warnings: list[str] = []

        from fieldctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (discovered lazily on first access)."""
        if self._plugins is None:
            from fieldctl.plugins.manager import PluginManager
            from fieldctl.services.fields import register_configured_field_types

            self._load_warnings.extend(register_configured_field_types(self.settings))
            self._plugins = PluginManager()
            if self.settings.plugins.enabled:
                self._plugins.discover_and_load(local_dir=self.settings.local_plugin_dir)
        return self._plugins

    @property
    def value_service(self) -> ValueService:
        from fieldctl.services.values import ValueService

        _ = self.plugins
        return ValueService(self.settings)

    @property
    def field_service(self) -> FieldService:
        from fieldctl.services.fields import FieldService

        _ = self.plugins
        return FieldService(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        if self._load_warnings:
            result = result.model_copy(
                update={"warnings": [*self._load_warnings, *result.warnings]}
            )

        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
