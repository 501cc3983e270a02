from datetime import date
from enum import Enum
from typing import Dict

from pydantic import BaseModel, Field

# --- Metrics ---

class Metric(Enum):
    CALORIES = ("calories", "calories")
    WATER = ("water", "water_fl_oz")
    PROTEIN = ("protein", "protein_g")
    CARBS = ("carbs", "carbs_g")
    FAT = ("fat", "fat_g")

    def __init__(self, cli_name: str, field: str):
        self.cli_name = cli_name
        self.field = field

    @classmethod
    def lookup(cls, name: str) -> "Metric":
        """Find a metric by CLI name or field name. Raises KeyError."""
        key = name.strip().lower()
        for m in cls:
            if key in (m.cli_name, m.field):
                return m
        raise KeyError(name)

# --- Entries ---

def _accumulator():
    return Field(default=0.0, ge=0, allow_inf_nan=False)


class Totals(BaseModel):
    calories: float = _accumulator()
    water_fl_oz: float = _accumulator()
    protein_g: float = _accumulator()
    carbs_g: float = _accumulator()
    fat_g: float = _accumulator()

    def value(self, metric: Metric) -> float:
        return getattr(self, metric.field)


class DailyEntry(Totals):
    date: date

    def totals(self) -> Totals:
        return Totals(**self.model_dump(exclude={"date"}))

# --- On-disk document ---

class StoreDocument(BaseModel):
    entries: Dict[date, Totals] = Field(default_factory=dict)
