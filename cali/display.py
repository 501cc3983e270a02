"""
Terminal rendering for cali.

Every metric has a fixed color; headings are bold. Output goes through a
rich Console so color is dropped automatically when stdout is not a terminal.
"""
from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from cali.models import DailyEntry, Metric

STYLES = {
    Metric.CALORIES: "green",
    Metric.WATER: "blue",
    Metric.PROTEIN: "yellow",
    Metric.CARBS: "magenta",
    Metric.FAT: "red",
}

LABELS = {
    Metric.CALORIES: "Calories",
    Metric.WATER: "Water",
    Metric.PROTEIN: "Protein",
    Metric.CARBS: "Carbs",
    Metric.FAT: "Fat",
}

# what follows the amount in "Logged 16 fl oz of water"
UNITS = {
    Metric.CALORIES: "calories",
    Metric.WATER: "fl oz of water",
    Metric.PROTEIN: "grams of protein",
    Metric.CARBS: "grams of carbs",
    Metric.FAT: "grams of fat",
}

RULE = "-------------------------"


def format_amount(value: float) -> str:
    """Shortest text that reads back as the stored value, without a trailing .0."""
    if float(value).is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(float(value))


def format_value(metric: Metric, value: float) -> str:
    if metric is Metric.CALORIES:
        return format_amount(value)
    if metric is Metric.WATER:
        return f"{value:.1f} fl oz"
    return f"{value:.1f}g"


def make_console(stderr: bool = False, no_color: bool = False) -> Console:
    # None lets rich fall back to $NO_COLOR
    return Console(stderr=stderr, no_color=no_color or None, highlight=False)


def print_logged(console: Console, metric: Metric, amount: float, entry: DailyEntry) -> None:
    style = STYLES[metric]
    line = Text()
    line.append("Logged ", style=style)
    line.append(format_amount(amount), style=f"bold {style}")
    line.append(f" {UNITS[metric]}. ", style=style)
    line.append(f"Total for {entry.date.isoformat()}: ", style=style)
    line.append(format_amount(entry.value(metric)), style=f"bold {style}")
    console.print(line)


def _print_totals(console: Console, entry: DailyEntry) -> None:
    for metric in Metric:
        style = STYLES[metric]
        line = Text()
        line.append(LABELS[metric], style=style)
        line.append(": ")
        line.append(format_value(metric, entry.value(metric)), style=f"bold {style}")
        console.print(line)


def print_summary(console: Console, entry: DailyEntry, found: bool = True) -> None:
    if not found:
        console.print(f"No data found for {entry.date.isoformat()}")
        return
    console.print(f"[bold]Nutrition Summary for {entry.date.isoformat()}[/bold]")
    console.print(f"[bold]{RULE}[/bold]")
    _print_totals(console, entry)


def print_history(console: Console, entries: Iterable[DailyEntry]) -> None:
    entries = list(entries)
    if not entries:
        console.print("[bold]No nutrition data found.[/bold]")
        return
    console.print("[bold]All Nutrition Records[/bold]")
    console.print("[bold]===================[/bold]")
    for entry in entries:
        console.print()
        console.print(f"[bold]Date: {entry.date.isoformat()}[/bold]")
        console.print(f"[bold]{RULE}[/bold]")
        _print_totals(console, entry)


def print_reset(console: Console, entry: DailyEntry, existed: bool) -> None:
    if existed:
        console.print(f"[bold]Nutrition data for {entry.date.isoformat()} has been reset.[/bold]")
    else:
        console.print(f"[bold]No data for {entry.date.isoformat()} to reset; recorded an empty day.[/bold]")


def print_error(console: Console, message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)
