"""Persist and load CLI column mapping profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict


@dataclass
class ColumnProfile:
    column_mapping: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "ColumnProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(column_mapping=data.get("column_mapping", {}))

    def save(self, path: Path) -> None:
        payload = {"column_mapping": self.column_mapping}
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
