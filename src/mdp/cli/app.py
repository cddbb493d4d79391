from typing import Optional

import typer
from pydantic import ValidationError

from mdp.config import ConfigManager, LogLevel, init_cli_logging


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        import mdp

        typer.echo(f"mdp version: {mdp.__version__}")
        raise typer.Exit()


app = typer.Typer(name="mdp", no_args_is_help=True)


@app.callback()
def app_callback(
    ctx: typer.Context,
    log_level: Optional[LogLevel] = typer.Option(
        None,
        "--log-level",
        case_sensitive=False,
        help="Log level for messages on stderr.",
        envvar="MDP_LOG_LEVEL",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """mdp - Tags, tasks and token trees of markdown diaries."""
    try:
        config = ConfigManager().config
    except ValidationError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(1)

    init_cli_logging(log_level or config.log_level)
    ctx.obj = config
