"""Excel export of the application log."""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from .models import EXPORT_HEADERS, ApplicationRecord

logger = logging.getLogger(__name__)

SHEET_TITLE = "Арыздар"
COLUMN_WIDTHS = [4, 16, 24, 16, 14, 22, 20, 22, 18, 16, 28, 35, 16]


def export_filename(today: date) -> str:
    return f"Арыздар_{today.strftime('%d-%m-%Y')}.xlsx"


def build_workbook(records: list[ApplicationRecord]) -> Workbook:
    """One sheet: header row, then one row per record in log order."""
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE
    ws.append(EXPORT_HEADERS)

    for i, width in enumerate(COLUMN_WIDTHS, start=1):
        ws.column_dimensions[get_column_letter(i)].width = width

    for number, record in enumerate(records, start=1):
        ws.append(record.to_row(number))
    return wb


def export_applications(
    records: list[ApplicationRecord],
    directory: Path,
    today: Optional[date] = None,
) -> Path:
    """Write the records to `directory` and return the file path."""
    if today is None:
        today = date.today()
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_filename(today)

    build_workbook(records).save(path)
    logger.info(f"Exported {len(records)} applications to {path}")
    return path
