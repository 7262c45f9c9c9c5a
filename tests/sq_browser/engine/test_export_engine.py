from __future__ import annotations

from datetime import date

from sq_browser.core.cells import MISSING, Number, Text
from sq_browser.core.collaborators import BufferedDownloader
from sq_browser.core.record import records_from_raw
from sq_browser.engine.export_engine import (
    CSV_MIME_TYPE,
    NOTHING_TO_EXPORT,
    csv_field,
    export_csv,
    export_filename,
    render_csv,
)

ROWS = records_from_raw([
    {"S.No": 1, "Name": "Alpha", "P/E": 12},
    {"S.No": 2, "Name": "Beta", "P/E": 30},
])


def test_render_csv_alpha_beta():
    assert render_csv(ROWS) == "S.No,Name,P/E\n1,Alpha,12\n2,Beta,30"


def test_csv_field_quoting():
    assert csv_field(Text("Smith, Inc.")) == '"Smith, Inc."'
    assert csv_field(Text('The "Best" Co')) == '"The ""Best"" Co"'
    assert csv_field(Text("plain")) == "plain"
    assert csv_field(Number(12.5)) == "12.5"
    assert csv_field(MISSING) == ""


def test_rows_are_projected_onto_first_record_columns():
    records = records_from_raw([
        {"Name": "A", "P/E": 1},
        {"P/E": 2, "Extra": "x"},
    ])
    assert render_csv(records) == "Name,P/E\nA,1\n,2"


def test_export_filename_uses_date():
    assert export_filename(date(2024, 3, 9)) == "stock-query-results-2024-03-09.csv"


def test_export_hands_file_to_downloader():
    downloader = BufferedDownloader()
    outcome = export_csv(ROWS, downloader, today=date(2024, 3, 9))

    assert outcome.exported
    assert outcome.row_count == 2
    assert outcome.filename == "stock-query-results-2024-03-09.csv"
    filename, content, mime_type = downloader.last
    assert filename == outcome.filename
    assert mime_type == CSV_MIME_TYPE
    assert content.decode("utf-8").splitlines()[0] == "S.No,Name,P/E"


def test_export_of_empty_view_produces_no_file():
    downloader = BufferedDownloader()
    outcome = export_csv([], downloader)

    assert not outcome.exported
    assert outcome.message == NOTHING_TO_EXPORT
    assert downloader.files == []
