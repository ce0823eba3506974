import json

from intake.models import ApplicationRecord
from intake.storage import ApplicationLog, JsonSlotStore


def make_record(record_id: int) -> ApplicationRecord:
    return ApplicationRecord(
        id=record_id,
        timestamp="05.03.2026, 09:07",
        name="Бермет",
        phone="+996 (555) 000-111",
        city="Ош",
        schedule="✅ Каалаган · Экөө тең",
        experience="3–5 жыл",
        sales_type="B2B",
        salary="",
        start_date="Дароо",
        languages="Орусча — Жакшы",
        about="",
        source="Башка",
    )


def test_missing_slot_loads_empty(store) -> None:
    assert len(ApplicationLog.load(store)) == 0


def test_corrupt_slot_loads_empty(store) -> None:
    store.write("{not json")
    assert ApplicationLog.load(store).records == []


def test_wrong_shape_loads_empty(store) -> None:
    store.write(json.dumps({"apps": []}))
    assert ApplicationLog.load(store).records == []


def test_append_persists_whole_log(store) -> None:
    log = ApplicationLog.load(store)
    log.append(make_record(1))
    log.append(make_record(2))

    saved = json.loads(store.path.read_text(encoding="utf-8"))
    assert [item["id"] for item in saved] == [1, 2]
    assert saved[0]["salesType"] == "B2B"
    assert saved[0]["startDate"] == "Дароо"

    reloaded = ApplicationLog.load(store)
    assert reloaded.records == [make_record(1), make_record(2)]


def test_records_returns_a_copy(store) -> None:
    log = ApplicationLog(store, [make_record(1)])
    log.records.clear()
    assert len(log) == 1
