"""Data models for candidate applications."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .catalog import INITIAL_LANGUAGES, LanguageLevel, find_language


class _CamelModel(BaseModel):
    """Serializes to the camelCase keys used on the wire and on disk."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LanguageEntry(_CamelModel):
    """A language the candidate speaks and how well."""

    id: str
    label: str
    level: LanguageLevel

    def display(self) -> str:
        return f"{self.label} — {self.level.label}"


def initial_languages() -> list[LanguageEntry]:
    entries = []
    for language_id, level in INITIAL_LANGUAGES:
        option = find_language(language_id)
        entries.append(LanguageEntry(id=option.id, label=option.label, level=level))
    return entries


class Draft(_CamelModel):
    """In-progress form state. Empty string means the field is unset."""

    name: str = ""
    phone: str = ""
    city: str = ""
    schedule: str = ""
    experience: str = ""
    sales_type: list[str] = Field(default_factory=list)
    salary: str = ""
    start_date: str = ""
    languages: list[LanguageEntry] = Field(default_factory=initial_languages)
    about: str = ""
    source: str = ""


class SubmissionPayload(_CamelModel):
    """Body posted to the remote collector, languages kept structured."""

    name: str
    phone: str
    city: str
    schedule: str
    experience: str
    sales_type: str
    salary: str
    start_date: str
    languages: list[LanguageEntry]
    about: str
    source: str


class ApplicationRecord(_CamelModel):
    """A submitted application, flattened to display strings."""

    model_config = ConfigDict(frozen=True)

    id: int
    timestamp: str
    name: str
    phone: str
    city: str
    schedule: str
    experience: str
    sales_type: str
    salary: str
    start_date: str
    languages: str
    about: str
    source: str

    def to_row(self, number: int) -> list:
        """Convert to spreadsheet row format, columns as in EXPORT_HEADERS."""
        return [
            number,
            self.timestamp,
            self.name,
            self.phone,
            self.city,
            self.schedule,
            self.experience,
            self.sales_type,
            self.salary,
            self.start_date,
            self.languages,
            self.about,
            self.source,
        ]


EXPORT_HEADERS = [
    "№",
    "Дата",
    "АИА",
    "Телефон",
    "Шаар",
    "График",
    "Тажрыйба",
    "Багыт",
    "Айлык",
    "Башталуу",
    "Тилдер",
    "Өзү жөнүндө",
    "Булак",
]
