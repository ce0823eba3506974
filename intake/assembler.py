"""Turning a validated draft into an application record."""

import time
from datetime import datetime
from typing import Callable, Optional

from .catalog import find_sales_type, find_schedule
from .models import ApplicationRecord, Draft, LanguageEntry, SubmissionPayload

TIMESTAMP_FORMAT = "%d.%m.%Y, %H:%M"


class IdSource:
    """Millisecond-clock ids, bumped so that no two are ever equal."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0

    def __call__(self) -> int:
        candidate = int(self._clock() * 1000)
        self._last = max(candidate, self._last + 1)
        return self._last


def format_schedule(schedule_id: str) -> str:
    schedule = find_schedule(schedule_id)
    return schedule.display() if schedule else schedule_id


def format_sales_types(sales_type_ids: list[str]) -> str:
    labels = []
    for sales_type_id in sales_type_ids:
        sales_type = find_sales_type(sales_type_id)
        labels.append(sales_type.label if sales_type else sales_type_id)
    return ", ".join(labels)


def format_languages(languages: list[LanguageEntry]) -> str:
    return "; ".join(entry.display() for entry in languages)


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def assemble_record(
    draft: Draft,
    now: Optional[datetime] = None,
    next_id: Optional[Callable[[], int]] = None,
) -> ApplicationRecord:
    """Build a new ApplicationRecord from a draft that passed validation.

    The draft is left untouched. `now` and `next_id` default to the wall clock
    and a fresh IdSource.
    """
    if now is None:
        now = datetime.now()
    if next_id is None:
        next_id = IdSource()

    return ApplicationRecord(
        id=next_id(),
        timestamp=format_timestamp(now),
        name=draft.name,
        phone=draft.phone,
        city=draft.city,
        schedule=format_schedule(draft.schedule),
        experience=draft.experience,
        sales_type=format_sales_types(draft.sales_type),
        salary=draft.salary,
        start_date=draft.start_date,
        languages=format_languages(draft.languages),
        about=draft.about,
        source=draft.source,
    )


def build_payload(draft: Draft, record: ApplicationRecord) -> SubmissionPayload:
    """Remote body: record's display strings, but languages as entries."""
    return SubmissionPayload(
        name=record.name,
        phone=record.phone,
        city=record.city,
        schedule=record.schedule,
        experience=record.experience,
        sales_type=record.sales_type,
        salary=record.salary,
        start_date=record.start_date,
        languages=[entry.model_copy() for entry in draft.languages],
        about=record.about,
        source=record.source,
    )
