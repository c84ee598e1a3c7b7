import typer

from .._version import __version__
from .config import app as config_app
from .convert import convert_command, units_command
from .parse import parse_command, scale_command


__all__ = ["app", "run"]


app = typer.Typer(help="Exact measurement extraction and conversion for recipes", add_completion=False)


@app.callback(invoke_without_command=True)
def version_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show mensura version and exit", is_eager=True),
) -> None:
    """Handle global options before any sub-command executes."""

    if version:
        typer.echo(f"mensura {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


app.command("parse", help="Find the measurements in a piece of text.")(parse_command)
app.command("convert", help="Convert a quantity or list its natural renderings.")(convert_command)
app.command("scale", help="Scale every measurement of a JSONL corpus.")(scale_command)
app.command("units", help="List the known units.")(units_command)
app.add_typer(config_app, name="config")


def run() -> None:
    """Entry point compatible with ``python -m mensura.cli.main`` and console scripts."""

    from typer.main import get_command

    cli = get_command(app)
    cli()


if __name__ == "__main__":
    run()
