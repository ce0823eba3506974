from datetime import datetime

from intake.assembler import IdSource, assemble_record, build_payload, format_schedule, format_sales_types
from intake.catalog import LanguageLevel
from intake.models import Draft, LanguageEntry

NOW = datetime(2026, 10, 18, 14, 5)


def make_draft() -> Draft:
    return Draft(
        name="Алиев Азамат",
        phone="+996 (700) 123-456",
        city="Бишкек",
        schedule="morning",
        experience="1–3 жыл",
        sales_type=["tele", "b2c"],
        salary="Талкуулоодо",
        languages=[
            LanguageEntry(id="ky", label="Кыргызча", level=LanguageLevel.FLUENT),
            LanguageEntry(id="en", label="Англисче", level=LanguageLevel.BEGINNER),
        ],
        about="Сатууну жакшы көрөм",
    )


def test_record_flattens_reference_fields() -> None:
    record = assemble_record(make_draft(), now=NOW, next_id=lambda: 42)
    assert record.schedule == "🌅 Эртең – Күндүз · 10:00 – 18:00"
    assert record.sales_type == "Телемаркетинг, B2C"
    assert record.languages == "Кыргызча — Эркин; Англисче — Башталгыч"
    assert record.timestamp == "18.10.2026, 14:05"
    assert record.id == 42
    assert record.name == "Алиев Азамат"
    assert record.start_date == ""


def test_unknown_identifiers_fall_back_to_raw_value() -> None:
    assert format_schedule("night") == "night"
    assert format_sales_types(["b2b", "door"]) == "B2B, door"


def test_assembly_does_not_touch_the_draft() -> None:
    draft = make_draft()
    before = draft.model_dump()
    assemble_record(draft, now=NOW, next_id=lambda: 1)
    assert draft.model_dump() == before


def test_same_inputs_give_same_record() -> None:
    draft = make_draft()
    first = assemble_record(draft, now=NOW, next_id=lambda: 7)
    second = assemble_record(draft, now=NOW, next_id=lambda: 7)
    assert first == second


def test_id_source_never_repeats_under_a_frozen_clock() -> None:
    ids = IdSource(clock=lambda: 1_700_000_000.0)
    values = [ids() for _ in range(5)]
    assert values == sorted(set(values))
    assert values[0] == 1_700_000_000_000


def test_payload_keeps_languages_structured() -> None:
    draft = make_draft()
    record = assemble_record(draft, now=NOW, next_id=lambda: 1)
    body = build_payload(draft, record).model_dump(by_alias=True, mode="json")
    assert set(body) == {
        "name", "phone", "city", "schedule", "experience", "salesType",
        "salary", "startDate", "languages", "about", "source",
    }
    assert body["languages"][1] == {"id": "en", "label": "Англисче", "level": 1}
    assert body["schedule"] == record.schedule
