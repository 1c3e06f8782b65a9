import asyncio
import json
import typer
from typing import Optional
from pathlib import Path
from .config import AppConfig, DEFAULT_CONNECTION
from .connectors.factory import get_connector
from .domain.models import HealthStatus
from .export import write_csv, write_parquet
from .logger import configure_logging
from .services import TableFetcher

app = typer.Typer(help="Main floor table status toolkit")

def _load_config(config: Path) -> AppConfig:
    try:
        app_config = AppConfig.from_yaml(config)
    except Exception as e:
        typer.echo(f"Error loading config: {e}", err=True)
        raise typer.Exit(code=1)
    configure_logging(app_config.log_level, app_config.log_colour)
    return app_config

@app.command()
def check_conn(
    config: Path = typer.Option(..., "--config", "-c", help="Path to configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """
    Connectivity health check for every configured connection string.
    """
    app_config = _load_config(config)
    typer.echo(f"Starting connectivity check for {len(app_config.connection_strings)} connections...")

    for name in app_config.connection_strings:
        connection_string = app_config.get_connection_string(name)
        if not connection_string:
            typer.secho(f"⚠️ {name}: connection string is empty", fg=typer.colors.YELLOW)
            continue

        try:
            with get_connector(connection_string, name) as connector:
                health = connector.check_health()
        except Exception as e:
            typer.secho(f"⚠️ Error processing {name}: {e}", fg=typer.colors.YELLOW)
            if verbose:
                raise e
            continue

        if health.status == HealthStatus.SUCCESS:
            typer.secho(f"✅ {name}: Connection Successful ({health.latency_ms}ms)", fg=typer.colors.GREEN)
        elif health.status == HealthStatus.TIMEOUT:
            typer.secho(f"🐢 {name}: Slow response ({health.latency_ms}ms)", fg=typer.colors.YELLOW)
        else:
            typer.secho(f"❌ {name}: Connection Failed. Error: {health.error_message}", fg=typer.colors.RED)

@app.command()
def tables(
    config: Path = typer.Option(..., "--config", "-c", help="Path to configuration file"),
    connection: str = typer.Option(DEFAULT_CONNECTION, "--connection", help="Name of the connection string to use"),
    use_async: bool = typer.Option(False, "--async", help="Use the asyncio driver"),
    as_json: bool = typer.Option(False, "--json", help="Print the tables as JSON"),
    to_csv: Optional[Path] = typer.Option(None, "--to-csv", help="Write the tables to a CSV file"),
    to_parquet: Optional[Path] = typer.Option(None, "--to-parquet", help="Write the tables to a Parquet file"),
):
    """
    Fetch the seating and reservation status of main floor tables 1-11.
    An empty listing means there were no rows or the fetch failed (see log).
    """
    app_config = _load_config(config)
    fetcher = TableFetcher(app_config, connection_name=connection)

    if use_async:
        records = asyncio.run(fetcher.fetch_main_floor_tables_async())
    else:
        records = fetcher.fetch_main_floor_tables()

    if to_csv:
        count = write_csv(records, to_csv)
        typer.secho(f"✅ Wrote {count} tables to {to_csv}", fg=typer.colors.GREEN)
    if to_parquet:
        count = write_parquet(records, to_parquet)
        typer.secho(f"✅ Wrote {count} tables to {to_parquet}", fg=typer.colors.GREEN)
    if to_csv or to_parquet:
        return

    if as_json:
        typer.echo(json.dumps([r.model_dump() for r in records]))
        return

    if not records:
        typer.echo("No tables found.")
        return

    for record in records:
        state = "reserved" if record.is_reserved else "free"
        typer.echo(f"Table {record.table_id:>2}: {record.seats} seats, {state}")

if __name__ == "__main__":
    app()
