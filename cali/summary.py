# cali/summary.py
from datetime import date
from typing import List

from cali.domains.tracker import Store
from cali.models import DailyEntry


def totals_for(store: Store, d: date) -> DailyEntry:
    """Totals for one date; a zeroed entry when nothing was logged."""
    entry = store.get(d)
    if entry is None:
        return DailyEntry(date=d)
    return entry.model_copy()


def all_entries(store: Store) -> List[DailyEntry]:
    return [e.model_copy() for e in sorted(store, key=lambda e: e.date)]
