from datetime import datetime

import pytest

from intake.config import Config
from intake.session import Session
from intake.storage import ApplicationLog, JsonSlotStore


class FakeSink:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent = []

    def send(self, payload) -> None:
        if self.fail:
            raise ConnectionError("network down")
        self.sent.append(payload)


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(
        submit_url="https://collector.example/exec",
        storage_dir=tmp_path / "data",
        export_dir=tmp_path / "exports",
    )


@pytest.fixture
def store(config) -> JsonSlotStore:
    return JsonSlotStore(config.storage_dir, config.storage_key)


@pytest.fixture
def sink() -> FakeSink:
    return FakeSink()


@pytest.fixture
def session(config, store, sink) -> Session:
    return Session(
        config,
        ApplicationLog.load(store),
        sink,
        clock=lambda: datetime(2026, 3, 5, 9, 7),
    )


def fill_valid(session: Session) -> None:
    session.update("name", "Алиев Азамат")
    session.update("phone", "0700123456")
    session.update("city", "Бишкек")
    session.update("schedule", "morning")
    session.update("experience", "1–3 жыл")
