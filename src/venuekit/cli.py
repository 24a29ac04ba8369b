"""Typer-based CLI for inspecting venue adapters and configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .errors import VenueError

def _load_settings(config_path: Optional[Path] = None):
    from .config import load_settings
    return load_settings(config_path)

def _exchanges():
    from .exchanges.factory import EXCHANGES
    return EXCHANGES

def _get_exchange_class(exchange: str):
    from .exchanges.factory import get_exchange_class
    return get_exchange_class(exchange)

def _configure_logging(log_dir: Path | None = None):
    from .logging import configure_logging
    return configure_logging(log_dir)

app = typer.Typer(help="Unified crypto venue adapter toolkit")
console = Console()
logger = logging.getLogger(__name__)


@app.callback()
def setup(
    log_dir: Optional[Path] = typer.Option(None, help="Directory for the rotating venuekit.log"),
) -> None:
    _configure_logging(log_dir)


@app.command()
def exchanges_list() -> None:
    """List registered venues and the subscriptions each supports."""
    table = Table(title="Exchanges")
    table.add_column("Name", style="cyan")
    table.add_column("Adapter", style="magenta")
    table.add_column("Subscriptions", style="green")

    for name, exchange_class in sorted(_exchanges().items()):
        table.add_row(
            name,
            exchange_class.__name__,
            ", ".join(sorted(exchange_class.supported_subscriptions)),
        )

    console.print(table)


@app.command()
def config_show(
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show the loaded configuration with secrets masked."""
    try:
        settings = _load_settings(config)
    except ValueError as e:
        logger.error("Failed to load configuration: %s", e)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print_json(json.dumps(settings.redacted(), indent=2))


@app.command()
def subscription_check(
    exchange: str = typer.Argument(..., help="Exchange name (nash, coinbase)"),
    kind: str = typer.Argument(..., help="Subscription kind, e.g. order_book_updates"),
    market: Optional[str] = typer.Option(None, help="Market pair, or asset for account_balance"),
) -> None:
    """Show the native subscribe request a venue would send, or why it refuses."""
    from .websocket import build_subscription

    try:
        exchange_class = _get_exchange_class(exchange)
        subscription = build_subscription(kind, market)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        request = exchange_class.subscription_request(subscription)
    except VenueError as e:
        console.print(f"[red]Rejected:[/red] {e}")
        raise typer.Exit(1)

    console.print(
        Panel(
            json.dumps(asdict(request), indent=2),
            title=f"{exchange_class.name} {subscription.kind}",
            border_style="green",
        )
    )


def main():
    """CLI main entry point."""
    app()


if __name__ == "__main__":
    main()
