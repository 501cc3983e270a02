import os
from pathlib import Path
from typing import Optional

DATA_FILE_ENV = "CALI_DATA_FILE"
DEFAULT_DATA_FILE = Path.home() / ".cali" / "cali_data.json"


def resolve_data_file(override: Optional[str] = None) -> Path:
    """Pick the data file: explicit override, then $CALI_DATA_FILE, then the default."""
    raw = override or os.getenv(DATA_FILE_ENV)
    if raw:
        return Path(raw).expanduser()
    return DEFAULT_DATA_FILE
