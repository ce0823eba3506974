"""One interactive form session: draft editing, submission, HR access."""

import logging
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from .assembler import IdSource, assemble_record, build_payload
from .config import Config
from .export import export_applications
from .languages import LanguageList
from .models import Draft
from .navigation import Navigator, Step
from .phone import normalize_phone
from .remote import RemoteSink
from .review import ReviewEntry, review_entries
from .storage import ApplicationLog
from .validation import validate

logger = logging.getLogger(__name__)


class SubmitState(str, Enum):
    IDLE = "idle"
    SENDING = "sending"
    SENT = "sent"
    SEND_FAILED = "send-failed"


class Session:
    """Owns the draft and drives submission, navigation and the HR gate.

    The application log and the remote sink are injected; nothing here
    reaches for global state.
    """

    def __init__(
        self,
        config: Config,
        log: ApplicationLog,
        sink: RemoteSink,
        navigator: Optional[Navigator] = None,
        clock: Callable[[], datetime] = datetime.now,
        next_id: Optional[Callable[[], int]] = None,
    ):
        self.config = config
        self.log = log
        self.sink = sink
        self.navigator = navigator or Navigator()
        self.clock = clock
        self.next_id = next_id or IdSource()

        self.draft = Draft()
        self.errors: dict[str, str] = {}
        self.submit_state = SubmitState.IDLE
        self.login_failed = False

    @property
    def step(self) -> Step:
        return self.navigator.step

    @property
    def sending(self) -> bool:
        return self.submit_state == SubmitState.SENDING

    @property
    def send_failed(self) -> bool:
        return self.submit_state == SubmitState.SEND_FAILED

    @property
    def languages(self) -> LanguageList:
        return LanguageList(self.draft.languages)

    # Draft editing

    def update(self, field: str, value) -> None:
        """Set one draft field and drop its error."""
        if field not in Draft.model_fields:
            raise KeyError(field)
        if field == "phone":
            value = normalize_phone(value)
        elif field == "sales_type":
            value = list(dict.fromkeys(value))
        setattr(self.draft, field, value)
        self.errors.pop(field, None)

    def toggle_sales_type(self, sales_type_id: str) -> None:
        selected = self.draft.sales_type
        if sales_type_id in selected:
            self.update("sales_type", [s for s in selected if s != sales_type_id])
        else:
            self.update("sales_type", [*selected, sales_type_id])

    def add_language(self, language_id: str) -> None:
        self.languages.add(language_id)
        self.errors.pop("languages", None)

    def remove_language(self, language_id: str) -> None:
        self.languages.remove(language_id)
        self.errors.pop("languages", None)

    def set_language_level(self, language_id: str, level: int) -> None:
        self.languages.set_level(language_id, level)
        self.errors.pop("languages", None)

    # Submission

    def submit(self) -> bool:
        """Validate, send, store. Returns True once the collector has accepted it."""
        if self.sending:
            logger.warning("Submission already in progress, ignoring")
            return False

        result = validate(self.draft)
        self.errors = dict(result.errors)
        if not result.is_valid:
            logger.info(f"Form has errors in: {', '.join(result.errors)}")
            return False

        self.submit_state = SubmitState.SENDING
        record = assemble_record(self.draft, now=self.clock(), next_id=self.next_id)
        payload = build_payload(self.draft, record)

        try:
            self.sink.send(payload)
        except Exception as e:
            logger.error(f"Failed to send application {record.id}: {e}")
            self.submit_state = SubmitState.SEND_FAILED
            return False

        self.submit_state = SubmitState.SENT
        try:
            self.log.append(record)
            logger.info(f"Stored application {record.id}, {len(self.log)} total")
        except OSError as e:
            logger.error(f"Could not save application {record.id} locally: {e}")

        if self.step == Step.FORM:
            self.navigator.go(Step.THANKS)
        return True

    def submit_another(self) -> None:
        """Start over with a blank draft."""
        self.draft = Draft()
        self.errors = {}
        self.submit_state = SubmitState.IDLE
        self.navigator.go(Step.FORM)

    # HR access

    def open_login(self) -> None:
        self.navigator.go(Step.LOGIN)

    def login(self, secret: str) -> bool:
        if secret == self.config.hr_passphrase:
            self.login_failed = False
            self.navigator.go(Step.ADMIN)
            return True
        logger.info("Rejected HR login attempt")
        self.login_failed = True
        return False

    def back(self) -> None:
        """Return to the form from the login or admin screen."""
        self.navigator.go(Step.FORM)

    def review(self) -> list[ReviewEntry]:
        return review_entries(self.log.records)

    def export(self, today: Optional[date] = None) -> Optional[Path]:
        """Write the log to a spreadsheet. Does nothing when the log is empty."""
        if not len(self.log):
            logger.info("Nothing to export")
            return None
        return export_applications(self.log.records, self.config.export_dir, today)
