import pytest
from conftest import FakeSink, fill_valid

from intake.catalog import LanguageLevel
from intake.navigation import InvalidTransition, Step
from intake.session import Session, SubmitState
from intake.storage import ApplicationLog


def test_successful_submit_stores_record_and_thanks(session, sink, store) -> None:
    fill_valid(session)
    before = len(session.log)

    assert session.submit() is True

    assert len(session.log) == before + 1
    assert session.step == Step.THANKS
    assert session.submit_state == SubmitState.SENT
    assert len(sink.sent) == 1
    assert len(ApplicationLog.load(store)) == 1
    record = session.log.records[-1]
    assert record.phone == "+996 (700) 123-456"
    assert record.timestamp == "05.03.2026, 09:07"


def test_failed_send_keeps_draft_and_shows_banner(config, store) -> None:
    session = Session(config, ApplicationLog.load(store), FakeSink(fail=True))
    fill_valid(session)
    draft_before = session.draft.model_dump()

    assert session.submit() is False

    assert len(session.log) == 0
    assert session.step == Step.FORM
    assert session.send_failed
    assert session.draft.model_dump() == draft_before
    assert not store.path.exists()


def test_retry_after_failure_clears_banner(session, sink) -> None:
    fill_valid(session)
    sink.fail = True
    session.submit()
    assert session.send_failed

    sink.fail = False
    assert session.submit() is True
    assert not session.send_failed
    assert len(session.log) == 1


def test_invalid_draft_has_no_side_effects(session, sink) -> None:
    session.update("name", "A")
    assert session.submit() is False
    assert "name" in session.errors
    assert sink.sent == []
    assert len(session.log) == 0
    assert session.submit_state == SubmitState.IDLE


def test_editing_a_field_clears_only_its_error(session) -> None:
    session.submit()
    assert {"name", "city"} <= set(session.errors)
    session.update("name", "Нурлан")
    assert "name" not in session.errors
    assert "city" in session.errors


def test_validation_replaces_previous_errors(session) -> None:
    session.submit()
    session.draft.city = "Ош"
    session.submit()
    assert "city" not in session.errors


def test_phone_is_normalized_on_update(session) -> None:
    session.update("phone", "0555 12 34 56")
    assert session.draft.phone == "+996 (555) 123-456"


def test_unknown_field_raises(session) -> None:
    with pytest.raises(KeyError):
        session.update("skills", "x")


def test_double_submit_is_ignored_while_sending(config, store) -> None:
    class ReentrantSink(FakeSink):
        def send(self, payload) -> None:
            self.nested = session.submit()
            super().send(payload)

    sink = ReentrantSink()
    session = Session(config, ApplicationLog.load(store), sink)
    fill_valid(session)

    assert session.submit() is True
    assert sink.nested is False
    assert len(sink.sent) == 1
    assert len(session.log) == 1


def test_toggle_sales_type_keeps_selection_order(session) -> None:
    session.toggle_sales_type("online")
    session.toggle_sales_type("b2c")
    session.toggle_sales_type("tele")
    session.toggle_sales_type("b2c")
    assert session.draft.sales_type == ["online", "tele"]


def test_language_edits_apply_in_order(session) -> None:
    session.add_language("en")
    session.set_language_level("en", 5)
    session.remove_language("ru")

    entries = session.draft.languages
    assert [(e.id, e.level) for e in entries] == [
        ("ky", LanguageLevel.FLUENT),
        ("en", LanguageLevel.FLUENT),
    ]


def test_wrong_then_right_passphrase(session) -> None:
    session.open_login()
    assert session.login("hr2023") is False
    assert session.step == Step.LOGIN
    assert session.login_failed

    assert session.login("hr2024") is True
    assert session.step == Step.ADMIN
    assert not session.login_failed


def test_back_from_login_and_admin(session) -> None:
    session.open_login()
    session.back()
    assert session.step == Step.FORM

    session.open_login()
    session.login("hr2024")
    session.back()
    assert session.step == Step.FORM

    with pytest.raises(InvalidTransition):
        session.back()


def test_submit_another_starts_fresh(session) -> None:
    fill_valid(session)
    session.submit()
    session.submit_another()

    assert session.step == Step.FORM
    assert session.draft.name == ""
    assert [e.id for e in session.draft.languages] == ["ky", "ru"]
    assert session.errors == {}
    assert session.submit_state == SubmitState.IDLE


def test_screen_changes_notify_listeners(session) -> None:
    entered = []
    session.navigator.on_enter(entered.append)
    fill_valid(session)
    session.submit()
    session.submit_another()
    assert entered == [Step.THANKS, Step.FORM]


def test_export_with_empty_log_is_a_noop(session, monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(
        "intake.session.export_applications", lambda *args: calls.append(args)
    )
    assert session.export() is None
    assert calls == []
    assert not session.config.export_dir.exists()


def test_export_writes_file_once_log_has_records(session) -> None:
    fill_valid(session)
    session.submit()
    path = session.export()
    assert path is not None and path.exists()
    assert path.parent == session.config.export_dir


def test_local_save_failure_still_thanks_the_candidate(session, sink, store, monkeypatch) -> None:
    def read_only(text: str) -> None:
        raise PermissionError("disk read-only")

    monkeypatch.setattr(store, "write", read_only)
    fill_valid(session)

    assert session.submit() is True

    assert len(sink.sent) == 1
    assert len(session.log) == 1
    assert session.step == Step.THANKS
    assert session.submit_state == SubmitState.SENT


def test_update_sales_type_drops_duplicates_keeping_order(session) -> None:
    session.update("sales_type", ["tele", "b2b", "tele", "b2c", "b2b"])
    assert session.draft.sales_type == ["tele", "b2b", "b2c"]
