"""Load roster tables and emit normalized player records."""

from __future__ import annotations

import csv
import logging
import math
from dataclasses import dataclass
from io import StringIO
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from tradeval.config import AnalyzerSettings, column_key, iter_aliases
from tradeval.errors import FileTypeError, FormatError, SizeError, ValidationError
from tradeval.models import MAX_MAGNITUDE, PlayerRecord, split_positions
from tradeval.stats import ScoreDistribution, normalize_scores
from tradeval.trade.index import LookupIndex

from .sanitize import GROUPED_NUMBER_PATTERN, sanitize_rows


logger = logging.getLogger(__name__)

_CANDIDATE_DELIMITERS = ",;\t|"


@dataclass(frozen=True)
class IngestReport:
    total_rows: int
    players: int
    scored_players: int
    skipped_rows: int


@dataclass(frozen=True)
class Roster:
    """The active entity set: normalized players plus their lookup index."""

    players: Tuple[PlayerRecord, ...]
    distribution: ScoreDistribution
    columns: Tuple[str, ...]
    index: LookupIndex
    report: IngestReport

    @property
    def mean(self) -> float:
        return self.distribution.mean

    @property
    def std_dev(self) -> float:
        return self.distribution.std_dev

    def __len__(self) -> int:
        return len(self.players)


def check_upload(filename: str | None, size: int, settings: AnalyzerSettings | None = None) -> None:
    """Reject oversized or non-delimited uploads before any parsing."""

    settings = settings or AnalyzerSettings()
    if size > settings.max_upload_bytes:
        limit_mb = settings.max_upload_bytes / (1024 * 1024)
        raise SizeError(f"File is too large ({size} bytes); the limit is {limit_mb:g} MB")
    suffix = Path(filename or "").suffix.lower()
    if suffix not in settings.allowed_extensions:
        allowed = ", ".join(settings.allowed_extensions)
        raise FileTypeError(f"Unsupported file type {suffix or '(none)'!r}; expected one of {allowed}")


def decode_upload(contents: bytes) -> str:
    try:
        return contents.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise FormatError(f"Roster file is not valid UTF-8 text: {exc}") from exc


def _sniff_delimiter(header_line: str) -> str:
    try:
        return csv.Sniffer().sniff(header_line, delimiters=_CANDIDATE_DELIMITERS).delimiter
    except csv.Error:
        return ","


def read_table(text: str) -> List[Dict[Optional[str], Any]]:
    """Parse delimiter-separated text with a header row into raw row dicts."""

    text = text.lstrip("\ufeff")
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise FormatError("Roster file is empty")
    delimiter = _sniff_delimiter(lines[0])
    reader = csv.DictReader(StringIO(text), delimiter=delimiter, strict=True)
    try:
        fieldnames = reader.fieldnames
        rows = list(reader)
    except csv.Error as exc:
        raise FormatError(f"Unable to parse roster file: {exc}") from exc
    if not fieldnames or not any((name or "").strip() for name in fieldnames):
        raise FormatError("Roster file has no header row")
    logger.debug("Read %d rows with delimiter %r", len(rows), delimiter)
    return rows


def parse_number(value: Any) -> Optional[float]:
    """Tolerant float parser.

    Returns ``None`` for anything non-numeric, non-finite, or larger in
    magnitude than ``MAX_MAGNITUDE``.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if text.startswith("$"):
            text = text[1:].strip()
        if GROUPED_NUMBER_PATTERN.match(text):
            text = text.replace(",", "")
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if not math.isfinite(number) or abs(number) > MAX_MAGNITUDE:
        return None
    return number


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _cell(row: Mapping[str, Any], columns: Mapping[str, str], field_name: str) -> Any:
    header = columns.get(field_name)
    if header is None:
        return None
    return row.get(header)


def _number_or_zero(row: Mapping[str, Any], columns: Mapping[str, str], field_name: str) -> float:
    value = parse_number(_cell(row, columns, field_name))
    return value if value is not None else 0.0


def _headers(rows: Iterable[Mapping[str, Any]]) -> List[str]:
    seen: Dict[str, None] = {}
    for row in rows:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


def resolve_columns(
    headers: Sequence[str],
    *,
    mapping: Mapping[str, str] | None = None,
    settings: AnalyzerSettings | None = None,
) -> Dict[str, str]:
    """Match headers to canonical fields; explicit ``mapping`` entries win."""

    settings = settings or AnalyzerSettings()
    by_key: Dict[str, str] = {}
    for header in headers:
        by_key.setdefault(column_key(header), header)

    columns: Dict[str, str] = {}
    for field_name, aliases in iter_aliases(settings.tracked_stats):
        for alias in aliases:
            header = by_key.get(column_key(alias))
            if header is not None and header not in columns.values():
                columns[field_name] = header
                break
    for field_name, header in (mapping or {}).items():
        columns[field_name] = by_key.get(column_key(header), header)
    return columns


def rows_to_records(
    rows: Sequence[Mapping[str, Any]],
    *,
    mapping: Mapping[str, str] | None = None,
    settings: AnalyzerSettings | None = None,
) -> List[PlayerRecord]:
    """Validate sanitized rows and build candidate records (relative value unset)."""

    settings = settings or AnalyzerSettings()
    headers = _headers(rows)
    columns = resolve_columns(headers, mapping=mapping, settings=settings)
    name_col = columns.get("name")
    score_col = columns.get("score")

    if not name_col or not score_col or not any(
        _text(row.get(name_col)) and _text(row.get(score_col)) for row in rows
    ):
        raise ValidationError("Missing required columns: a player name and a Score column are required")

    used = set(columns.values())
    records: List[PlayerRecord] = []
    for line_no, row in enumerate(rows, start=2):
        name = _text(row.get(name_col))
        if not name:
            logger.debug("Skipping row %d without a player name", line_no)
            continue
        score = parse_number(row.get(score_col))
        if score is None:
            logger.debug("Row %d (%s) has no numeric score", line_no, name)
        position = _text(_cell(row, columns, "position"))
        if not split_positions(position):
            position = settings.unknown_position
        extras = {
            header: "" if value is None else str(value)
            for header, value in row.items()
            if header not in used
        }
        records.append(
            PlayerRecord(
                name=name,
                position=position,
                score=score if score is not None else 0.0,
                has_score=score is not None,
                salary=_number_or_zero(row, columns, "salary"),
                age=_number_or_zero(row, columns, "age"),
                stats={stat.key: _number_or_zero(row, columns, stat.key) for stat in settings.tracked_stats},
                extras=extras,
            )
        )

    if not any(record.has_score for record in records):
        raise ValidationError("No numeric score data: no row has a numeric Score value")
    return records


def load_roster(
    text: str,
    *,
    mapping: Mapping[str, str] | None = None,
    settings: AnalyzerSettings | None = None,
) -> Roster:
    """Run sanitize, ingest, normalize and index over one table.

    Either returns a complete :class:`Roster` or raises; nothing partial leaks.
    """

    raw_rows = read_table(text)
    rows = sanitize_rows(raw_rows)
    records = rows_to_records(rows, mapping=mapping, settings=settings)
    players, distribution = normalize_scores(records)
    report = IngestReport(
        total_rows=len(rows),
        players=len(players),
        scored_players=distribution.count,
        skipped_rows=len(rows) - len(players),
    )
    logger.info(
        "Loaded roster with %d players (%d scored, %d rows skipped)",
        report.players,
        report.scored_players,
        report.skipped_rows,
    )
    return Roster(
        players=tuple(players),
        distribution=distribution,
        columns=tuple(_headers(rows)),
        index=LookupIndex.build(players),
        report=report,
    )


def load_roster_file(
    path: Path,
    *,
    mapping: Mapping[str, str] | None = None,
    settings: AnalyzerSettings | None = None,
) -> Roster:
    contents = path.read_bytes()
    check_upload(path.name, len(contents), settings)
    return load_roster(decode_upload(contents), mapping=mapping, settings=settings)
