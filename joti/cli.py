"""CLI joti: init d'une base, serveur web, sweep manuel"""

import logging
from datetime import timedelta
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from joti.core import database
from joti.core.config import settings
from joti.core.errors import Z

app = typer.Typer(name="joti", help="Simple text web pages.", no_args_is_help=True)
console = Console(soft_wrap=True)


def setup_logging():
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def require_dbfile(dbfile: Path):
    if not dbfile.exists():
        console.print(f"[red]dbfile '{dbfile}' doesn't exist. Create one with: joti init <dbfile>[/red]")
        raise typer.Exit(1)
    database.configure(f"sqlite:///{dbfile}")


@app.command()
def init(
    dbfile: Annotated[Path, typer.Argument(help="SQLite file to create")],
) -> None:
    """Initialize a new db file with a sample page."""
    setup_logging()
    from joti.services.page_service import initialize_store

    z = initialize_store(str(dbfile))
    if z == Z.EXISTS:
        console.print(f"[red]File '{dbfile}' exists[/red]")
        raise typer.Exit(1)
    if z != Z.OK:
        console.print(f"[red]{z.message}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Created {dbfile}[/green]")


@app.command()
def serve(
    dbfile: Annotated[Path, typer.Argument(help="SQLite db file")],
    port: Annotated[int, typer.Argument(help="Port to listen on")] = 8000,
    host: Annotated[str, typer.Option(help="Interface to bind")] = "0.0.0.0",
) -> None:
    """Start the web service."""
    setup_logging()
    require_dbfile(dbfile)
    import uvicorn
    from joti.main import app as web_app

    console.print(f"Listening on {port}...")
    uvicorn.run(web_app, host=host, port=port)


@app.command()
def sweep(
    dbfile: Annotated[Path, typer.Argument(help="SQLite db file")],
    days: Annotated[int, typer.Option(help="Retention in days")] = settings.RETENTION_DAYS,
) -> None:
    """Delete pages not read for DAYS days."""
    setup_logging()
    require_dbfile(dbfile)
    from joti.services.page_service import expiry_sweep

    db = database.SessionLocal()
    try:
        count = expiry_sweep(db, timedelta(days=days))
    finally:
        db.close()
    console.print(f"Deleted {count} page(s)")


if __name__ == "__main__":
    app()
