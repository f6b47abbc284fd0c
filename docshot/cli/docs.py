"""Docs Typer app factory."""

import typer

from docshot.api.docs.cmd_analyze import cmd_analyze
from docshot.api.docs.cmd_images import cmd_images
from docshot.cli._handle_stage_result import _display_format, _handle_stage_result


def docs() -> typer.Typer:
    """Create and configure the docs Typer app."""
    app = typer.Typer(
        name="docs",
        help="Analyze documentation screenshots",
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

    @app.command(name="analyze")
    def analyze_cmd(
        ctx: typer.Context,
        root: str | None = typer.Argument(None, help="Documentation root (default: docs.root from config)"),
        output_dir: str | None = typer.Option(None, "--output-dir", "-o", help="Directory for the reports"),
    ) -> None:
        """Scan markdown for image references and write a replacement plan."""
        _handle_stage_result(cmd_analyze, _display_format(ctx))(root=root, output_dir=output_dir)

    @app.command(name="images")
    def images_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Markdown file to inspect"),
    ) -> None:
        """List and classify the images referenced by one document."""
        _handle_stage_result(cmd_images, _display_format(ctx))(path=path)

    return app
