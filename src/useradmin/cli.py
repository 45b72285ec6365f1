"""Command line entry point: run the API server or prepare the database."""

from pathlib import Path

import typer
from rich.console import Console
from sqlalchemy.engine import make_url

from src.useradmin.runtime.context import get_config, set_config

console = Console()

app = typer.Typer(
    help="User Admin API server and maintenance commands",
    no_args_is_help=True,
    add_completion=False,
)

ConfigOption = typer.Option(
    None,
    "--config",
    "-c",
    exists=True,
    dir_okay=False,
    help="Path to the YAML configuration file (defaults to $APP_CONFIG_FILE or config.yaml).",
)


def _load_config(config_path: Path | None) -> None:
    if config_path is None:
        return

    from src.useradmin.runtime.config.config_template import load_templated_yaml

    try:
        set_config(load_templated_yaml(config_path))
    except ValueError as e:
        console.print(f"[red]❌ Failed to load config {config_path}: {e}[/red]")
        raise typer.Exit(code=1) from e


@app.command("serve")
def serve(
    config_path: Path | None = ConfigOption,
    host: str | None = typer.Option(None, "--host", help="Bind address (overrides config)."),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port (overrides config)."),
) -> None:
    """Start the HTTP server."""
    import uvicorn

    _load_config(config_path)
    config = get_config()

    # Imported after the config is in place: the app reads it at import time
    from src.useradmin.api.http.app import app as api_app

    uvicorn.run(
        api_app,
        host=host or config.app.host,
        port=port or config.app.port,
        access_log=False,  # We handle access logging in middleware
        log_config=None,  # Loguru intercepts uvicorn's loggers
    )


@app.command("init-db")
def init_db_command(config_path: Path | None = ConfigOption) -> None:
    """Create the database schema."""
    _load_config(config_path)

    from src.useradmin.api.utils.app_startup import configure_logging
    from src.useradmin.runtime.init_db import init_db

    configure_logging()
    database_url = make_url(get_config().database.url).render_as_string(hide_password=True)
    try:
        init_db()
    except Exception as e:
        console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
        raise typer.Exit(code=1) from e
    console.print(f"[green]✅ Database schema ready ({database_url})[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
