"""A JSON array on disk, shared by the JSON-file repositories."""

from __future__ import annotations

import json
from pathlib import Path


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self.path = file_path
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")

    def load(self) -> list[dict]:
        return json.loads(self.path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        self.path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")

    @staticmethod
    def next_id(records: list[dict]) -> int:
        if not records:
            return 1
        return max(r["id"] for r in records) + 1

    @staticmethod
    def replace(records: list[dict], record: dict) -> None:
        for i, raw in enumerate(records):
            if raw["id"] == record["id"]:
                records[i] = record
                return
        raise KeyError(record["id"])
