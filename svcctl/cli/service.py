"""Service Typer app factory."""

import typer

from svcctl.api.service.cmd_restart import cmd_restart
from svcctl.api.service.cmd_start import cmd_start
from svcctl.api.service.cmd_status import cmd_status
from svcctl.cli._handle_stage_result import _handle_stage_result


def service() -> typer.Typer:
    """Create and configure the service Typer app."""
    app = typer.Typer(
        name="service",
        help="Service lifecycle: status, start, force restart",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Service operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="status")
    def status_cmd(name: str = typer.Argument(..., help="Service name")) -> None:
        """Show a service's status."""
        _handle_stage_result(cmd_status)(name)

    @app.command(name="start")
    def start_cmd(
        name: str = typer.Argument(..., help="Service name"),
        timeout: float | None = typer.Option(None, "--timeout", "-t", help="Seconds to wait for Running"),
        passthru: bool = typer.Option(False, "--passthru", help="Include the final service descriptor"),
    ) -> None:
        """Start a service and wait for it to run."""
        _handle_stage_result(cmd_start)(name, timeout=timeout, passthrough=passthru)

    @app.command(name="restart")
    def restart_cmd(
        name: str = typer.Argument(..., help="Service name"),
        stop_timeout: float | None = typer.Option(None, "--stop-timeout", help="Seconds to wait for a graceful stop"),
        start_timeout: float | None = typer.Option(None, "--start-timeout", help="Seconds to wait for Running"),
        kill_dependents: bool = typer.Option(
            False, "--kill-dependents", help="Accepted but advisory: dependents are reported, never killed"
        ),
        passthru: bool = typer.Option(False, "--passthru", help="Include the final service descriptor"),
    ) -> None:
        """Restart a service, force-killing it if it will not stop."""
        _handle_stage_result(cmd_restart)(
            name,
            stop_timeout=stop_timeout,
            start_timeout=start_timeout,
            kill_dependents=kill_dependents,
            passthrough=passthru,
        )

    return app
