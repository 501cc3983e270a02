import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from cali.domains.tracker import Store
from cali.errors import CorruptDataError, SaveError
from cali.models import DailyEntry, StoreDocument

logger = logging.getLogger(__name__)


class DataFile:
    """The JSON document holding every daily entry."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Store:
        if not self.path.exists():
            logger.info("No data file at %s, starting empty", self.path)
            return Store()
        try:
            raw = self.path.read_text(encoding="utf-8")
            doc = StoreDocument.model_validate(json.loads(raw))
        except OSError as e:
            raise CorruptDataError(f"Cannot read {self.path}: {e.strerror or e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            raise CorruptDataError(f"{self.path} is not a valid cali data file") from e
        entries = {
            d: DailyEntry(date=d, **totals.model_dump())
            for d, totals in doc.entries.items()
        }
        logger.debug("Loaded %d entries from %s", len(entries), self.path)
        return Store(entries)

    def save(self, store: Store) -> None:
        doc = StoreDocument(entries={e.date: e.totals() for e in store})
        payload = json.dumps(doc.model_dump(mode="json"), indent=2, sort_keys=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as f:
                f.write(payload + "\n")
                f.flush()
                os.fsync(f.fileno())
            tmp.replace(self.path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise SaveError(f"Cannot write {self.path}: {e.strerror or e}") from e
        logger.debug("Saved %d entries to %s", len(store), self.path)
