"""Local persistence of submitted applications as a JSON slot."""

import json
import logging
from pathlib import Path
from typing import Optional

from filelock import FileLock
from pydantic import TypeAdapter, ValidationError

from .models import ApplicationRecord

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[ApplicationRecord])


class JsonSlotStore:
    """One named slot on disk holding a JSON document, overwritten wholesale."""

    def __init__(self, directory: Path, key: str):
        self.path = Path(directory) / f"{key}.json"
        self.lock_path = self.path.with_suffix(".json.lock")

    def read(self) -> Optional[str]:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def write(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with FileLock(self.lock_path, timeout=10):
            tmp_path = self.path.with_suffix(".json.tmp")
            tmp_path.write_text(text, encoding="utf-8")
            tmp_path.replace(self.path)
        logger.debug(f"Wrote slot {self.path}")


class ApplicationLog:
    """Ordered, append-only list of application records.

    Loaded once from the store; every append rewrites the full list.
    """

    def __init__(self, store: JsonSlotStore, records: Optional[list[ApplicationRecord]] = None):
        self.store = store
        self._records: list[ApplicationRecord] = list(records or [])

    @classmethod
    def load(cls, store: JsonSlotStore) -> "ApplicationLog":
        """Read the slot, falling back to an empty log if missing or corrupt."""
        try:
            raw = store.read()
            records = _records_adapter.validate_json(raw) if raw else []
        except (OSError, ValidationError, ValueError) as e:
            logger.warning(f"Could not read stored applications, starting empty: {e}")
            records = []
        logger.info(f"Loaded {len(records)} stored applications")
        return cls(store, records)

    @property
    def records(self) -> list[ApplicationRecord]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def append(self, record: ApplicationRecord) -> None:
        self._records.append(record)
        self.save()

    def save(self) -> None:
        payload = [r.model_dump(by_alias=True) for r in self._records]
        self.store.write(json.dumps(payload, ensure_ascii=False))
