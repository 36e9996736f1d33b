"""Cell-level cleanup applied to every uploaded row before numeric parsing."""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Mapping, Optional

_FORMULA_PREFIXES = ("=", "+", "-", "@")
GROUPED_NUMBER_PATTERN = re.compile(r"^\d{1,3}(?:,\d{3})*(?:\.\d+)?$")


def sanitize_cell(value: Any) -> Any:
    """Neutralize spreadsheet formula prefixes and strip thousands separators.

    Only strings are touched. A leading ``=``, ``+``, ``-`` or ``@`` is dropped
    so the value cannot be evaluated when an export is opened in a spreadsheet.
    Independently, grouped numbers such as ``"1,234.56"`` lose their commas so
    they parse as floats further down the pipeline.
    """

    if not isinstance(value, str):
        return value
    text = value
    if text.startswith(_FORMULA_PREFIXES):
        text = text[1:]
    if GROUPED_NUMBER_PATTERN.match(text):
        text = text.replace(",", "")
    return text


def sanitize_row(row: Mapping[Optional[str], Any]) -> dict[str, Any]:
    """Trim header keys and sanitize each cell of a parsed row.

    ``csv.DictReader`` stores overflow fields under a ``None`` key; those have
    no header to attach to and are dropped.
    """

    cleaned: dict[str, Any] = {}
    for key, value in row.items():
        if key is None:
            continue
        cleaned[key.strip()] = sanitize_cell(value)
    return cleaned


def sanitize_rows(rows: Iterable[Mapping[Optional[str], Any]]) -> List[dict[str, Any]]:
    return [sanitize_row(row) for row in rows]
