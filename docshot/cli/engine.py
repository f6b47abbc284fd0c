"""Engine Typer app factory."""

import typer

from docshot.api.engine.cmd_check import cmd_check
from docshot.api.engine.cmd_status import cmd_status
from docshot.cli._handle_stage_result import _display_format, _handle_stage_result


def engine() -> typer.Typer:
    """Create and configure the engine Typer app."""
    app = typer.Typer(
        name="engine",
        help="Operaton engine connectivity and status",
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

    @app.command(name="check")
    def check_cmd(ctx: typer.Context) -> None:
        """Check the REST API and web apps are reachable."""
        _handle_stage_result(cmd_check, _display_format(ctx))()

    @app.command(name="status")
    def status_cmd(ctx: typer.Context) -> None:
        """Show deployment, runtime, history and identity counts."""
        _handle_stage_result(cmd_status, _display_format(ctx))()

    return app
