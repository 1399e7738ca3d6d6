"""Typer CLI root application with serve command."""

import typer

from election_api.core.config import get_settings
from election_api.core.logging import setup_logging

app = typer.Typer(name="election-api", help="Election results query and map reconciliation CLI")


@app.callback()
def _main_callback(
    log_level: str | None = typer.Option(None, "--log-level", help="Override LOG_LEVEL for this command"),
) -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(log_level or settings.log_level, log_dir=settings.log_dir)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("127.0.0.1", "--host", help="Bind host"),
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server; datasets are loaded once at startup."""
    import uvicorn

    settings = get_settings()
    typer.echo(f"Serving results from {settings.results_source} on http://{host}:{port}")
    uvicorn.run(
        "election_api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    from election_api.cli.check_cmd import check_app
    from election_api.cli.query_cmd import query_app

    app.add_typer(query_app, name="query", help="Filtered record listings and aggregate statistics")
    app.add_typer(check_app, name="check", help="Dataset consistency checks")


_register_subcommands()
