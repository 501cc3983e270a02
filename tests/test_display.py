"""Tests for terminal rendering."""

import io
from datetime import date

import pytest
from rich.console import Console

from cali.display import STYLES, format_amount, make_console, print_logged, print_summary
from cali.models import DailyEntry, Metric
from tests.conftest import DAY

ANSI = {
    Metric.CALORIES: "32",
    Metric.WATER: "34",
    Metric.PROTEIN: "33",
    Metric.CARBS: "35",
    Metric.FAT: "31",
}


def terminal(no_color=False):
    buf = io.StringIO()
    console = Console(file=buf, force_terminal=True, color_system="standard",
                      no_color=no_color, highlight=False, width=120)
    return console, buf


def test_metric_colors():
    assert STYLES == {
        Metric.CALORIES: "green",
        Metric.WATER: "blue",
        Metric.PROTEIN: "yellow",
        Metric.CARBS: "magenta",
        Metric.FAT: "red",
    }


@pytest.mark.parametrize("metric", list(Metric))
def test_print_logged_uses_metric_color(monkeypatch, metric):
    monkeypatch.delenv("NO_COLOR", raising=False)
    console, buf = terminal()
    entry = DailyEntry(date=DAY, **{metric.field: 12})
    print_logged(console, metric, 12, entry)
    out = buf.getvalue()
    assert f"\x1b[{ANSI[metric]}m" in out
    assert f"\x1b[1;{ANSI[metric]}m" in out


def test_no_color_drops_color_codes(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    console, buf = terminal(no_color=True)
    entry = DailyEntry(date=DAY, calories=100, water_fl_oz=8, protein_g=5, carbs_g=20, fat_g=3)
    print_logged(console, Metric.CALORIES, 100, entry)
    print_summary(console, entry)
    out = buf.getvalue()
    for code in ANSI.values():
        assert f"\x1b[{code}m" not in out
        assert f";{code}m" not in out
    assert "Calories: 100" in out


def test_make_console_no_color(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert make_console(no_color=True).no_color
    assert not make_console(no_color=False).no_color
    monkeypatch.setenv("NO_COLOR", "1")
    assert make_console(no_color=False).no_color


@pytest.mark.parametrize("value,expected", [
    (150.0, "150"),
    (0.0, "0"),
    (1234.5678, "1234.5678"),
    (2000000.0, "2000000"),
    (0.1 + 0.2, "0.30000000000000004"),
    (1.7e308, "1.7e+308"),
])
def test_format_amount(value, expected):
    assert format_amount(value) == expected


def test_summary_keeps_fractional_calories():
    console, buf = terminal(no_color=True)
    print_summary(console, DailyEntry(date=date(2026, 1, 1), calories=1234.5678))
    assert "Calories: 1234.5678" in buf.getvalue()
