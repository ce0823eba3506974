"""Remote collectors that receive each submitted application."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Protocol
from zoneinfo import ZoneInfo

import requests
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .assembler import format_languages
from .config import Config
from .models import EXPORT_HEADERS, SubmissionPayload

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
SHEET_TIMESTAMP_FORMAT = "%d.%m.%Y %H:%M"


class SubmissionError(Exception):
    """The remote collector could not be reached or rejected the call."""


class RemoteSink(Protocol):
    def send(self, payload: SubmissionPayload) -> None: ...


class WebhookSink:
    """POSTs the payload as JSON to a web endpoint.

    Any HTTP response counts as delivered; only transport errors fail.
    """

    def __init__(self, url: str, timeout: Optional[float] = None):
        self.url = url
        self.timeout = timeout

    def send(self, payload: SubmissionPayload) -> None:
        body = payload.model_dump(by_alias=True, mode="json")
        logger.debug(f"Sending application: {body}")
        try:
            response = requests.post(
                self.url,
                headers={"Content-Type": "application/json"},
                json=body,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise SubmissionError(f"Submission request failed: {e}") from e

        if not response.ok:
            logger.warning(f"Collector answered HTTP {response.status_code}")
        else:
            logger.info(f"Application from {payload.name} delivered")


def get_credentials(credentials_path: Path, token_path: Path) -> Credentials:
    """Load the cached Sheets token, refreshing or re-authorizing as needed.

    A fresh token is written back to `token_path`. The OAuth client file is
    only read when there is no usable token.
    """
    creds = None
    if token_path.exists():
        creds = Credentials.from_authorized_user_file(str(token_path), SCOPES)

    if creds and creds.valid:
        return creds

    if creds and creds.expired and creds.refresh_token:
        logger.info("Refreshing expired Sheets token")
        creds.refresh(Request())
    else:
        if not credentials_path.exists():
            raise FileNotFoundError(
                f"Google OAuth client file not found: {credentials_path}. "
                "Set google_credentials_file in config/config.yaml."
            )
        logger.info("No usable Sheets token, starting OAuth flow")
        flow = InstalledAppFlow.from_client_secrets_file(str(credentials_path), SCOPES)
        creds = flow.run_local_server(port=0)

    token_path.parent.mkdir(parents=True, exist_ok=True)
    token_path.write_text(creds.to_json(), encoding="utf-8")
    logger.info(f"Saved Sheets token to {token_path}")
    return creds


def _last_column() -> str:
    return chr(ord("A") + len(EXPORT_HEADERS) - 1)


def ensure_headers(service, spreadsheet_id: str, sheet_name: str) -> None:
    """Write the header row if the sheet does not have it yet."""
    header_range = f"{sheet_name}!A1:{_last_column()}1"
    result = (
        service.spreadsheets()
        .values()
        .get(spreadsheetId=spreadsheet_id, range=header_range)
        .execute()
    )

    existing = result.get("values", [[]])[0] if result.get("values") else []

    if existing != EXPORT_HEADERS:
        service.spreadsheets().values().update(
            spreadsheetId=spreadsheet_id,
            range=header_range,
            valueInputOption="RAW",
            body={"values": [EXPORT_HEADERS]},
        ).execute()
        logger.info("Added headers to spreadsheet")


def count_rows(service, spreadsheet_id: str, sheet_name: str) -> int:
    result = (
        service.spreadsheets()
        .values()
        .get(spreadsheetId=spreadsheet_id, range=f"{sheet_name}!A:A")
        .execute()
    )
    return len(result.get("values", []))


class SheetsSink:
    """Appends one row per application straight into a Google Sheet.

    Row number and timestamp are computed on arrival, the way the sheet-side
    web app does it: the number is the last occupied row (header included).
    """

    def __init__(
        self,
        spreadsheet_id: str,
        sheet_name: str,
        timezone: str = "Asia/Bishkek",
        credentials_path: Path = Path("config/credentials.json"),
        token_path: Path = Path("config/sheets_token.json"),
        service=None,
    ):
        self.credentials_path = Path(credentials_path)
        self.token_path = Path(token_path)
        self.spreadsheet_id = spreadsheet_id
        self.sheet_name = sheet_name
        self.timezone = ZoneInfo(timezone)
        self._service = service

    @property
    def service(self):
        if self._service is None:
            creds = get_credentials(self.credentials_path, self.token_path)
            self._service = build("sheets", "v4", credentials=creds)
        return self._service

    def to_row(self, payload: SubmissionPayload, number: int) -> list:
        timestamp = datetime.now(self.timezone).strftime(SHEET_TIMESTAMP_FORMAT)
        return [
            number,
            timestamp,
            payload.name,
            payload.phone,
            payload.city,
            payload.schedule,
            payload.experience,
            payload.sales_type,
            payload.salary,
            payload.start_date,
            format_languages(payload.languages),
            payload.about,
            payload.source,
        ]

    def send(self, payload: SubmissionPayload) -> None:
        try:
            service = self.service
            ensure_headers(service, self.spreadsheet_id, self.sheet_name)
            number = count_rows(service, self.spreadsheet_id, self.sheet_name)
            row = self.to_row(payload, number)

            service.spreadsheets().values().append(
                spreadsheetId=self.spreadsheet_id,
                range=f"{self.sheet_name}!A:{_last_column()}",
                valueInputOption="RAW",
                insertDataOption="INSERT_ROWS",
                body={"values": [row]},
            ).execute()
        except (HttpError, GoogleAuthError, OSError) as e:
            raise SubmissionError(f"Sheets append failed: {e}") from e

        logger.info(f"Appended row {number} to spreadsheet: {payload.name}")


def create_sink(config: Config) -> RemoteSink:
    """Build the collector selected by `remote_backend`."""
    if config.remote_backend == "sheets":
        if not config.spreadsheet_id:
            raise ValueError("spreadsheet_id is required for the sheets backend")
        return SheetsSink(
            config.spreadsheet_id,
            config.sheet_name,
            config.timezone,
            credentials_path=config.google_credentials_file,
            token_path=config.google_token_file,
        )
    return WebhookSink(config.submit_url, timeout=config.request_timeout)
