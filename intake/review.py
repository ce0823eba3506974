"""HR review listing of stored applications."""

from pydantic import BaseModel, ConfigDict

from .models import ApplicationRecord


class ReviewEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int
    record: ApplicationRecord

    @property
    def time_range(self) -> str:
        """Time part of "emoji label · time", or the whole schedule string."""
        schedule = self.record.schedule
        if "·" in schedule:
            return schedule.split("·")[1].strip()
        return schedule


def review_entries(records: list[ApplicationRecord]) -> list[ReviewEntry]:
    """Newest first, numbered so the oldest application is 1."""
    total = len(records)
    return [
        ReviewEntry(number=total - i, record=record)
        for i, record in enumerate(reversed(records))
    ]
