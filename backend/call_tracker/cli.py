from pathlib import Path
from typing import Optional

import typer

from call_tracker.core.config import get_settings
from call_tracker.core.logging import configure_logging
from call_tracker.errors import StorageError
from call_tracker.services.export import render_csv
from call_tracker.services.record_store import RecordStore

app = typer.Typer(help="Call tracker maintenance commands.")


def _open_store(db_path: Optional[str]) -> RecordStore:
    return RecordStore.from_path(db_path or get_settings().db_path)


@app.callback()
def main(log_level: str = typer.Option("WARNING", help="Root logging level.")):
    configure_logging(log_level)


@app.command()
def init_db(db_path: Optional[str] = typer.Option(None, help="SQLite file, defaults to DB_PATH.")):
    store = _open_store(db_path)
    try:
        store.init_schema()
        typer.echo("Schema ready")
    except StorageError as exc:
        typer.echo(f"Error: {exc.message}", err=True)
        raise typer.Exit(code=1) from exc
    finally:
        store.close()


@app.command()
def export_csv(
    db_path: Optional[str] = typer.Option(None, help="SQLite file, defaults to DB_PATH."),
    output: Optional[Path] = typer.Option(None, help="Write to this file instead of stdout."),
):
    store = _open_store(db_path)
    try:
        content = render_csv(store.list_records())
    except StorageError as exc:
        typer.echo(f"Error: {exc.message}", err=True)
        raise typer.Exit(code=1) from exc
    finally:
        store.close()
    if output:
        output.write_text(content, encoding="utf-8")
        typer.echo(f"Exported to {output}")
    else:
        typer.echo(content)


if __name__ == "__main__":
    app()
