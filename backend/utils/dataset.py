import json
import logging
from pathlib import Path

from models.raw_record import RawRecord

logger = logging.getLogger(__name__)


def load_raw_records(path: Path) -> list[RawRecord]:
    """Read the source dataset (a JSON array of rows) into ``RawRecord``s."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"Dataset {path} must contain a JSON array of records")

    records = [RawRecord.model_validate(row) for row in raw]
    logger.info("Loaded %d raw records from %s", len(records), path)
    return records
