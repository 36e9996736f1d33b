"""Input adapters that turn raw roster tables into normalized records."""

from .roster import (
    IngestReport,
    Roster,
    check_upload,
    decode_upload,
    load_roster,
    load_roster_file,
    parse_number,
    read_table,
    resolve_columns,
    rows_to_records,
)
from .sanitize import sanitize_cell, sanitize_row, sanitize_rows

__all__ = [
    "IngestReport",
    "Roster",
    "check_upload",
    "decode_upload",
    "load_roster",
    "load_roster_file",
    "parse_number",
    "read_table",
    "resolve_columns",
    "rows_to_records",
    "sanitize_cell",
    "sanitize_row",
    "sanitize_rows",
]
