"""Log Typer app factory."""

import typer

from svcctl.api.log.cmd_prune import cmd_prune
from svcctl.api.log.cmd_status import cmd_status
from svcctl.cli._handle_stage_result import _handle_stage_result


def log() -> typer.Typer:
    """Typer app for the unified logfile that service start and restart write to."""
    app = typer.Typer(
        name="log",
        help="Inspect and prune the svcctl logfile",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="status")
    def status_cmd() -> None:
        """Entry counts per level, after dropping entries past their retention."""
        _handle_stage_result(cmd_status)()

    @app.command(name="prune")
    def prune_cmd(
        debug: bool = typer.Option(True, "--debug/--no-debug", help="Drop DEBUG entries"),
        info: bool = typer.Option(True, "--info/--no-info", help="Drop INFO entries (start/stop progress)"),
        warnings: bool = typer.Option(False, "--warnings/--no-warnings", help="Drop WARN entries (escalations)"),
        errors: bool = typer.Option(False, "--errors/--no-errors", help="Drop ERROR entries (failed operations)"),
    ) -> None:
        """Remove entries by level; warnings and errors are kept unless asked for."""
        _handle_stage_result(cmd_prune)(
            prune_debug=debug,
            prune_info=info,
            prune_warnings=warnings,
            prune_errors=errors,
        )

    return app
