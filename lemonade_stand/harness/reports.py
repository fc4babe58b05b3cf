# Copyright (c) 2025 LemonadeBench Contributors
# BSD-3-Clause License

"""
Console reporting for Lemonade Stand games.

Renders weather, prices, receipts, stock and the end-of-game summary.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..game import DayReport, GameResult
from ..models import DailyPrices, PurchaseReceipt, Weather
from ..stand import LemonadeStand


WEATHER_EMOJI = {
    Weather.CLOUDY: "☁️",
    Weather.SUNNY: "☀️",
    Weather.HOT: "🔥",
}


def format_status(stand: LemonadeStand) -> str:
    """Cash and stock as a block of console markup."""
    stock = stand.inventory
    lines = [
        "[bold]--- Current Stand Status ---[/bold]",
        f"Cash: ${stand.cash:.2f}",
        "Inventory:",
        f"  Cups: {stock.cups}",
        f"  Lemons: {stock.lemons}",
        f"  Sugar: {stock.sugar} cups",
        f"  Ice: {stock.ice} cubes",
        "[bold]----------------------------[/bold]",
    ]
    return "\n".join(lines)


def format_prices(prices: DailyPrices) -> str:
    return "\n".join([
        "Today's prices are:",
        f"  Cups: ${prices.cups:.2f} each",
        f"  Lemons: ${prices.lemons:.2f} each",
        f"  Sugar: ${prices.sugar:.2f} per cup",
        f"  Ice: ${prices.ice:.2f} per 100 cubes",
    ])


def build_summary_table(result: GameResult) -> Table:
    """End-of-game numbers as a borderless two-column table."""
    table = Table(show_header=False, box=None)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Final Cash", f"${result.final_cash:.2f}")
    table.add_row("Total Profit", f"${result.total_profit:.2f}")
    table.add_row("Cups Sold", str(result.total_cups_sold))
    table.add_row("Days Played", str(result.days_played))
    if result.seed is not None:
        table.add_row("Seed", str(result.seed))
    return table


class ConsoleReporter:
    """Callback that prints the game as it happens."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def on_game_start(self, stand: LemonadeStand) -> None:
        self.console.print("[bold]═" * 40 + "[/bold]")
        self.console.print("[bold yellow]🍋 Welcome to the Lemonade Stand Sim![/bold yellow]")
        self.console.print("[bold]═" * 40 + "[/bold]")
        self.console.print(format_status(stand))
        self.console.print()

    def on_day_start(self, day: int, weather: Weather, prices: DailyPrices) -> None:
        emoji = WEATHER_EMOJI.get(weather, "🌡️")
        self.console.print()
        self.console.print(f"[cyan]---------- 📅 Day {day} ----------[/cyan]")
        self.console.print(f"Today's weather is: {emoji} {weather.label}")
        self.console.print(format_prices(prices))
        self.console.print()
        self.console.print("How much would you like to buy?")

    def on_purchase(self, receipt: PurchaseReceipt) -> None:
        message = escape(receipt.message)
        if receipt.success:
            self.console.print(f"[green]{message}[/green]")
        else:
            self.console.print(f"[red]{message}[/red]")

    def on_stock_report(self, day: int, stand: LemonadeStand) -> None:
        self.console.print()
        self.console.print(format_status(stand))
        self.console.print(
            f"[dim]Enough supplies for {stand.max_cups()} cups "
            f"(limited by {stand.limiting_resource()}).[/dim]"
        )

    def on_stock_out(self, day: int, cups_sold: int) -> None:
        self.console.print(
            "[yellow]⚠️  Ran out of supplies! Couldn't sell any more lemonade.[/yellow]"
        )

    def on_day_end(self, report: DayReport, stand: LemonadeStand) -> None:
        emoji = "📈" if report.profit > 0 else "📉"
        self.console.print()
        self.console.print("[bold]--- End of Day Report ---[/bold]")
        self.console.print(f"You sold {report.cups_sold} cups of lemonade.")
        self.console.print(
            f"{emoji} Revenue ${report.revenue:.2f}, "
            f"costs ${report.costs:.2f}, profit ${report.profit:.2f}"
        )
        self.console.print(format_status(stand))

    def on_game_end(self, result: GameResult) -> None:
        self.console.print()
        self.console.print("[bold]═" * 40 + "[/bold]")
        self.console.print("[bold green]🏆 GAME OVER![/bold green]")
        self.console.print("[bold]═" * 40 + "[/bold]")
        self.console.print(f"You finished with ${result.final_cash:.2f}.")
        self.console.print(build_summary_table(result))
