import logging
import math
from datetime import date
from numbers import Real
from typing import Dict, Iterator, Optional, Union

from cali.errors import InvalidAmountError, UnknownMetricError
from cali.models import DailyEntry, Metric

logger = logging.getLogger(__name__)


def parse_metric(name: Union[str, Metric]) -> Metric:
    if isinstance(name, Metric):
        return name
    if not isinstance(name, str):
        raise UnknownMetricError(f"Metric must be a name, not {name!r}")
    try:
        return Metric.lookup(name)
    except KeyError:
        choices = ", ".join(m.cli_name for m in Metric)
        raise UnknownMetricError(f"Unknown metric '{name}' (choose from: {choices})") from None


def parse_amount(text: str) -> float:
    """Convert an amount given on the command line into a float."""
    try:
        amount = float(text)
    except (TypeError, ValueError):
        raise InvalidAmountError(f"Amount '{text}' is not a number") from None
    return _check_amount(amount)


def _check_amount(amount) -> float:
    if isinstance(amount, bool) or not isinstance(amount, Real):
        raise InvalidAmountError(f"Amount {amount!r} is not a number")
    amount = float(amount)
    if not math.isfinite(amount):
        raise InvalidAmountError(f"Amount {amount} is not finite")
    if amount < 0:
        raise InvalidAmountError(f"Amount {amount:g} is negative; amounts can only be added")
    return amount


class Store:
    """In-memory collection of daily entries, one per date."""

    def __init__(self, entries: Optional[Dict[date, DailyEntry]] = None):
        self._entries: Dict[date, DailyEntry] = dict(entries or {})

    def __contains__(self, d: date) -> bool:
        return d in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DailyEntry]:
        return iter(self._entries.values())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Store):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"Store({len(self._entries)} entries)"

    def get(self, d: date) -> Optional[DailyEntry]:
        return self._entries.get(d)

    def get_or_create(self, d: date) -> DailyEntry:
        entry = self._entries.get(d)
        if entry is None:
            entry = DailyEntry(date=d)
            self._entries[d] = entry
            logger.debug("Created entry for %s", d)
        return entry

    def add_metric(self, d: date, metric: Union[str, Metric], amount) -> DailyEntry:
        # validate before touching the store
        m = parse_metric(metric)
        amount = _check_amount(amount)
        existing = self._entries.get(d)
        total = (existing.value(m) if existing else 0.0) + amount
        if not math.isfinite(total):
            raise InvalidAmountError(f"Adding {amount:g} would overflow the {m.cli_name} total")
        entry = self.get_or_create(d)
        setattr(entry, m.field, total)
        logger.info("Added %g to %s for %s (total %g)", amount, m.field, d, entry.value(m))
        return entry

    def reset(self, d: date) -> DailyEntry:
        entry = DailyEntry(date=d)
        self._entries[d] = entry
        logger.info("Reset entry for %s", d)
        return entry
