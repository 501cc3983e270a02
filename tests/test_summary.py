"""Tests for totals and history aggregation."""

from datetime import date

from cali.domains.tracker import Store
from cali.models import DailyEntry
from cali.summary import all_entries, totals_for
from tests.conftest import DAY


def test_totals_for_missing_date_is_zeroed():
    store = Store()
    assert totals_for(store, DAY) == DailyEntry(date=DAY)
    assert len(store) == 0


def test_totals_for_returns_copy():
    store = Store()
    store.add_metric(DAY, "calories", 300)
    totals = totals_for(store, DAY)
    totals.calories = 0
    assert store.get(DAY).calories == 300


def test_totals_after_reset_is_zeroed():
    store = Store()
    store.add_metric(DAY, "water", 64)
    store.add_metric(DAY, "fat", 12)
    store.reset(DAY)
    assert totals_for(store, DAY) == DailyEntry(date=DAY)


def test_all_entries_sorted_ascending():
    store = Store()
    days = [date(2026, 10, 19), date(2025, 12, 31), date(2026, 1, 5), date(2026, 10, 2)]
    for d in days:
        store.add_metric(d, "calories", 1)
    store.reset(date(2024, 2, 29))
    result = all_entries(store)
    assert [e.date for e in result] == sorted(days + [date(2024, 2, 29)])


def test_all_entries_is_restartable_and_detached():
    store = Store()
    store.add_metric(DAY, "protein", 25)
    result = all_entries(store)
    assert list(result) == list(result)
    result[0].protein_g = 0
    assert store.get(DAY).protein_g == 25


def test_all_entries_empty():
    assert all_entries(Store()) == []
