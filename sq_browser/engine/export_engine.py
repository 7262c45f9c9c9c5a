from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence

from sq_browser.core.cells import Cell, Text, cell_text
from sq_browser.core.collaborators import FileDownloader
from sq_browser.core.record import Record

logger = logging.getLogger(__name__)

CSV_MIME_TYPE = "text/csv"
FILENAME_PREFIX = "stock-query-results"
NOTHING_TO_EXPORT = "No data to export"


@dataclass(frozen=True)
class ExportOutcome:
    """
    Result of an export request.

    - exported: True if a file was handed to the downloader
    - filename: name of the generated file, if any
    - row_count: number of data rows written
    - message: user-facing text when nothing was exported
    """

    exported: bool
    filename: Optional[str] = None
    row_count: int = 0
    message: Optional[str] = None


def export_filename(today: Optional[date] = None, prefix: str = FILENAME_PREFIX) -> str:
    today = today or date.today()
    return f"{prefix}-{today.isoformat()}.csv"


def csv_field(cell: Cell) -> str:
    """
    Text containing a comma or a double quote is wrapped in quotes with
    inner quotes doubled. Numbers and missing cells use their plain form.
    """
    text = cell_text(cell)
    if isinstance(cell, Text) and ("," in text or '"' in text):
        return '"' + text.replace('"', '""') + '"'
    return text


def render_csv(records: Sequence[Record]) -> str:
    """
    Header is the column order of the first record; every row is
    projected onto exactly those columns.
    """
    if not records:
        return ""
    columns = list(records[0].columns)
    lines: List[str] = [",".join(columns)]
    for record in records:
        lines.append(",".join(csv_field(record.cell(col)) for col in columns))
    return "\n".join(lines)


def export_csv(
        records: Sequence[Record],
        downloader: FileDownloader,
        *,
        today: Optional[date] = None,
        prefix: str = FILENAME_PREFIX,
) -> ExportOutcome:
    """
    Serialise the current view and hand it to the downloader.
    An empty view produces no file and a user-facing message.
    """
    if not records:
        logger.info("Export skipped: empty result set")
        return ExportOutcome(exported=False, message=NOTHING_TO_EXPORT)

    filename = export_filename(today, prefix)
    content = render_csv(records).encode("utf-8")
    downloader.download(filename, content, CSV_MIME_TYPE)

    logger.info(
        "Exported query results",
        extra={"export_filename": filename, "rows": len(records)},
    )
    return ExportOutcome(exported=True, filename=filename, row_count=len(records))
