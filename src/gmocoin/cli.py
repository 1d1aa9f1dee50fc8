"""Typer-based CLI for querying GMO Coin from the terminal."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .api import PrivateAPI, PublicAPI
from .config import load_credentials, load_settings
from .enums import Symbol
from .errors import GmoCoinError
from .logging import configure_logging
from .models import Execution, Order, Position
from .response import DEFAULT_COUNT, DEFAULT_PAGE
from .settings import Settings
from .transport import AiohttpClient, HttpClient

app = typer.Typer(help="GMO Coin REST API client")
console = Console()
logger = logging.getLogger(__name__)


@app.callback()
def main_callback(
    log_dir: Optional[Path] = typer.Option(None, help="Directory for rotating log files"),
    log_level: Optional[str] = typer.Option(None, help="Log level (default: GMOCOIN_LOG_LEVEL or INFO)"),
) -> None:
    """Configure logging before any command runs."""
    try:
        configure_logging(log_dir, log_level)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _load_settings(config_path: Optional[Path] = None) -> Settings:
    return load_settings(config_path)


def _build_http_client(settings: Settings) -> HttpClient:
    return AiohttpClient(timeout_seconds=settings.http.timeout_seconds, proxy=settings.http.proxy)


def _public_api(config: Optional[Path]) -> PublicAPI:
    settings = _load_settings(config)
    return PublicAPI(_build_http_client(settings), base_url=settings.endpoints.public)


def _private_api(config: Optional[Path]) -> PrivateAPI:
    settings = _load_settings(config)
    credentials = load_credentials(settings)
    return PrivateAPI(_build_http_client(settings), credentials, base_url=settings.endpoints.private)


def _run(action: str, coro) -> None:
    try:
        asyncio.run(coro)
    except (GmoCoinError, ValueError) as e:
        logger.error("Failed to %s: %s", action, e)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _fmt_time(value) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S")


def _orders_table(title: str, orders: list[Order]) -> Table:
    table = Table(title=title)
    table.add_column("Order ID", style="cyan")
    table.add_column("Symbol", style="green")
    table.add_column("Side", style="magenta")
    table.add_column("Type", style="blue")
    table.add_column("Size", justify="right")
    table.add_column("Executed", justify="right")
    table.add_column("Price", justify="right", style="yellow")
    table.add_column("Status", style="white")
    table.add_column("Time", style="dim")
    for order in orders:
        table.add_row(
            order.order_id,
            order.symbol,
            order.side.value,
            order.execution_type.value,
            f"{order.size:g}",
            f"{order.executed_size:g}",
            str(order.price),
            order.status,
            _fmt_time(order.timestamp),
        )
    return table


def _executions_table(title: str, executions: list[Execution]) -> Table:
    table = Table(title=title)
    table.add_column("Execution ID", style="cyan")
    table.add_column("Order ID", style="magenta")
    table.add_column("Symbol", style="green")
    table.add_column("Side", style="blue")
    table.add_column("Settle", style="white")
    table.add_column("Size", justify="right")
    table.add_column("Price", justify="right", style="yellow")
    table.add_column("P/L", justify="right", style="green")
    table.add_column("Fee", justify="right", style="red")
    table.add_column("Time", style="dim")
    for execution in executions:
        table.add_row(
            execution.execution_id,
            execution.order_id,
            execution.symbol,
            execution.side.value,
            execution.settle_type.value,
            f"{execution.size:g}",
            str(execution.price),
            str(execution.loss_gain),
            str(execution.fee),
            _fmt_time(execution.timestamp),
        )
    return table


def _positions_table(title: str, positions: list[Position]) -> Table:
    table = Table(title=title)
    table.add_column("Position ID", style="cyan")
    table.add_column("Symbol", style="green")
    table.add_column("Side", style="magenta")
    table.add_column("Size", justify="right")
    table.add_column("Ordered", justify="right")
    table.add_column("Price", justify="right", style="yellow")
    table.add_column("P/L", justify="right", style="green")
    table.add_column("Leverage", justify="right")
    table.add_column("Loss-cut", justify="right", style="red")
    table.add_column("Time", style="dim")
    for position in positions:
        table.add_row(
            position.position_id,
            position.symbol,
            position.side.value,
            f"{position.size:g}",
            f"{position.ordered_size:g}",
            str(position.price),
            str(position.loss_gain),
            str(position.leverage),
            str(position.losscut_price),
            _fmt_time(position.timestamp),
        )
    return table


@app.command()
def status(
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show the exchange status."""

    async def _status() -> None:
        async with _public_api(config) as api:
            response = await api.status()
        color = "green" if response.is_open() else "yellow"
        console.print(f"Exchange status: [{color}]{response.status}[/{color}]")

    _run("fetch status", _status())


@app.command()
def ticker(
    symbol: Optional[Symbol] = typer.Option(None, help="Symbol (all symbols when omitted)"),
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show the latest rates."""

    async def _ticker() -> None:
        async with _public_api(config) as api:
            response = await api.ticker(symbol)

        table = Table(title="Ticker")
        table.add_column("Symbol", style="green")
        table.add_column("Ask", justify="right", style="red")
        table.add_column("Bid", justify="right", style="cyan")
        table.add_column("Last", justify="right", style="yellow")
        table.add_column("High", justify="right")
        table.add_column("Low", justify="right")
        table.add_column("Volume", justify="right")
        table.add_column("Time", style="dim")
        for entry in response.tickers:
            table.add_row(
                entry.symbol,
                str(entry.ask),
                str(entry.bid),
                str(entry.last),
                str(entry.high),
                str(entry.low),
                f"{entry.volume:g}",
                _fmt_time(entry.timestamp),
            )
        console.print(table)

    _run("fetch ticker", _ticker())


@app.command()
def orderbooks(
    symbol: Symbol = typer.Argument(..., help="Symbol"),
    depth: int = typer.Option(5, min=1, help="Levels to show per side"),
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show the order book."""

    async def _orderbooks() -> None:
        async with _public_api(config) as api:
            response = await api.orderbooks(symbol)

        table = Table(title=f"Order book {response.symbol}")
        table.add_column("Side", style="magenta")
        table.add_column("Price", justify="right", style="yellow")
        table.add_column("Size", justify="right")
        for level in reversed(response.asks[:depth]):
            table.add_row("[red]ask[/red]", str(level.price), f"{level.size:g}")
        for level in response.bids[:depth]:
            table.add_row("[cyan]bid[/cyan]", str(level.price), f"{level.size:g}")
        console.print(table)

    _run("fetch order book", _orderbooks())


@app.command()
def trades(
    symbol: Symbol = typer.Argument(..., help="Symbol"),
    page: int = typer.Option(DEFAULT_PAGE, min=1, help="Page number"),
    count: int = typer.Option(DEFAULT_COUNT, min=1, help="Items per page"),
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show recent trades."""

    async def _trades() -> None:
        async with _public_api(config) as api:
            response = await api.trades_with_options(symbol, page, count)

        table = Table(title=f"Trades {symbol.value}")
        table.add_column("Time", style="dim")
        table.add_column("Side", style="magenta")
        table.add_column("Price", justify="right", style="yellow")
        table.add_column("Size", justify="right")
        for trade in response.trades:
            table.add_row(_fmt_time(trade.timestamp), trade.side.value, str(trade.price), f"{trade.size:g}")
        console.print(table)
        console.print(f"\n[bold]Page:[/bold] {response.current_page} ({len(response.trades)} trades)")

    _run("fetch trades", _trades())


@app.command()
def margin(
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show the account margin."""

    async def _margin() -> None:
        async with _private_api(config) as api:
            response = await api.margin()
        console.print(Panel.fit(
            f"Available amount: [bold]{response.available_amount}[/bold]\n"
            f"Actual P/L: {response.actual_profit_loss}\n"
            f"Margin: {response.margin}\n"
            f"P/L: {response.profit_loss}",
            title="Margin",
        ))

    _run("fetch margin", _margin())


@app.command()
def assets(
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show asset balances."""

    async def _assets() -> None:
        async with _private_api(config) as api:
            response = await api.assets()

        if not response.assets:
            console.print("[yellow]No assets found[/yellow]")
            return

        table = Table(title="Assets")
        table.add_column("Symbol", style="green")
        table.add_column("Amount", justify="right")
        table.add_column("Available", justify="right", style="cyan")
        table.add_column("Rate", justify="right", style="yellow")
        table.add_column("JPY", justify="right", style="magenta")
        for asset in response.assets:
            table.add_row(
                asset.symbol,
                f"{asset.amount:g}",
                f"{asset.available:g}",
                f"{asset.conversion_rate:g}",
                f"{asset.amount_as_jpy:,.0f}",
            )
        console.print(table)
        console.print(f"\n[bold]Total:[/bold] {response.total_as_jpy:,.0f} JPY")

    _run("fetch assets", _assets())


@app.command()
def active_orders(
    symbol: Symbol = typer.Argument(..., help="Symbol"),
    page: int = typer.Option(DEFAULT_PAGE, min=1, help="Page number"),
    count: int = typer.Option(DEFAULT_COUNT, min=1, help="Items per page"),
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show active orders."""

    async def _active_orders() -> None:
        async with _private_api(config) as api:
            response = await api.active_orders_with_options(symbol, page, count)
        if not response.active_orders:
            console.print("[yellow]No active orders[/yellow]")
            return
        console.print(_orders_table("Active orders", response.active_orders))

    _run("fetch active orders", _active_orders())


@app.command()
def open_positions(
    symbol: Symbol = typer.Argument(..., help="Symbol"),
    page: int = typer.Option(DEFAULT_PAGE, min=1, help="Page number"),
    count: int = typer.Option(DEFAULT_COUNT, min=1, help="Items per page"),
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show open positions."""

    async def _open_positions() -> None:
        async with _private_api(config) as api:
            response = await api.open_positions_with_options(symbol, page, count)
        if not response.open_positions:
            console.print("[yellow]No open positions[/yellow]")
            return
        console.print(_positions_table("Open positions", response.open_positions))

    _run("fetch open positions", _open_positions())


@app.command()
def position_summary(
    symbol: Optional[Symbol] = typer.Option(None, help="Symbol (all symbols when omitted)"),
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show the position summary."""

    async def _position_summary() -> None:
        async with _private_api(config) as api:
            response = await api.position_summary(symbol)
        if not response.position_summaries:
            console.print("[yellow]No positions[/yellow]")
            return

        table = Table(title="Position summary")
        table.add_column("Symbol", style="green")
        table.add_column("Side", style="magenta")
        table.add_column("Avg rate", justify="right", style="yellow")
        table.add_column("Positions", justify="right")
        table.add_column("Ordered", justify="right")
        table.add_column("P/L", justify="right", style="green")
        for entry in response.position_summaries:
            table.add_row(
                entry.symbol,
                entry.side.value,
                f"{entry.average_position_rate:g}",
                f"{entry.sum_position_quantity:g}",
                f"{entry.sum_order_quantity:g}",
                str(entry.position_loss_gain),
            )
        console.print(table)

    _run("fetch position summary", _position_summary())


@app.command()
def latest_executions(
    symbol: Symbol = typer.Argument(..., help="Symbol"),
    page: int = typer.Option(DEFAULT_PAGE, min=1, help="Page number"),
    count: int = typer.Option(DEFAULT_COUNT, min=1, help="Items per page"),
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show the latest executions."""

    async def _latest_executions() -> None:
        async with _private_api(config) as api:
            response = await api.latest_executions_with_options(symbol, page, count)
        if not response.latest_executions:
            console.print("[yellow]No executions[/yellow]")
            return
        console.print(_executions_table("Latest executions", response.latest_executions))

    _run("fetch latest executions", _latest_executions())


@app.command()
def cancel_order(
    order_id: str = typer.Argument(..., help="Order ID to cancel"),
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Cancel an order."""

    async def _cancel_order() -> None:
        async with _private_api(config) as api:
            await api.cancel_order(order_id)
        logger.info("Cancelled order %s", order_id)
        console.print(f"[green]✓ Cancel requested for order {order_id}[/green]")

    _run("cancel order", _cancel_order())


@app.command()
def config_show(
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Show the effective configuration with secrets masked."""
    try:
        settings = _load_settings(config)
    except ValueError as e:
        logger.error("Failed to load configuration: %s", e)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print_json(json.dumps(settings.redacted()))


def main():
    """CLI main entry point."""
    app()


if __name__ == "__main__":
    main()
