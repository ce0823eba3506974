"""Editing the candidate's language list."""

import logging
from typing import Sequence

from .catalog import DEFAULT_LEVEL, LANGUAGE_OPTIONS, LanguageLevel, LanguageOption
from .models import LanguageEntry

logger = logging.getLogger(__name__)


class LanguageList:
    """Add/remove/level operations over an ordered list of LanguageEntry.

    Operates on the list it is given, in place. Entries can only be copied
    from the catalog and a language id appears at most once.
    """

    def __init__(
        self,
        entries: list[LanguageEntry],
        catalog: Sequence[LanguageOption] = LANGUAGE_OPTIONS,
    ):
        self.entries = entries
        self.catalog = tuple(catalog)

    def _find(self, language_id: str):
        for entry in self.entries:
            if entry.id == language_id:
                return entry
        return None

    def add(self, language_id: str) -> None:
        option = next((o for o in self.catalog if o.id == language_id), None)
        if option is None or self._find(language_id) is not None:
            logger.debug(f"Ignoring add of language {language_id!r}")
            return
        self.entries.append(
            LanguageEntry(id=option.id, label=option.label, level=DEFAULT_LEVEL)
        )

    def remove(self, language_id: str) -> None:
        self.entries[:] = [e for e in self.entries if e.id != language_id]

    def set_level(self, language_id: str, level: int) -> None:
        entry = self._find(language_id)
        if entry is None:
            return
        entry.level = LanguageLevel(level)

    def remaining_options(self) -> list[LanguageOption]:
        """Catalog entries not yet in the list, in catalog order."""
        present = {e.id for e in self.entries}
        return [o for o in self.catalog if o.id not in present]

    def ids(self) -> list[str]:
        return [e.id for e in self.entries]
