"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Click handles usage errors itself and exits through SystemExit; anything
    else escaping a command is logged and reported as exit code 1.
    """
    import typer

    from docshot.cli._create_app import _create_app
    from docshot.utils.get_logger import get_logger

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        app(argv)
        return 0
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        get_logger("cli").exception("Unhandled error")
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
