"""Command line entry point for the user registry service."""

import typer
from rich.console import Console

from src.user_registry.runtime.context import get_config

console = Console()

app = typer.Typer(
    help="User registry service commands",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Bind address (defaults to config)"),
    port: int | None = typer.Option(None, help="Bind port (defaults to config)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port
    console.print(
        f"[blue]Starting user registry on {bind_host}:{bind_port} "
        f"(store: {config.store.backend})[/blue]"
    )
    uvicorn.run(
        "src.user_registry.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,
    )


@app.command("init-db")
def init_db_command() -> None:
    """Create the users table in the configured database."""
    from src.user_registry.runtime.init_db import init_db

    config = get_config()
    init_db(config)
    console.print(f"[green]✓[/green] Tables created in {config.database.url}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
