"""JSON Lines export of coordinate records for a downstream importer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from mc_seed_atlas.models import Category, CoordinateRecord, Dimension, LocationType


class JsonlCoordinateExporter:
    """Appends coordinate records to a JSONL file, one record per line."""

    def __init__(self, file_path: str | Path) -> None:
        self._path = Path(file_path)
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    def append(self, records: Iterable[CoordinateRecord]) -> int:
        written = 0
        with self._path.open("a", encoding="utf-8") as handle:
            for record in records:
                handle.write(json.dumps(record.to_dict()) + "\n")
                written += 1
        return written

    def read_all(self) -> list[CoordinateRecord]:
        if not self._path.exists():
            return []

        records: list[CoordinateRecord] = []
        with self._path.open("r", encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                payload = json.loads(line)
                records.append(
                    CoordinateRecord(
                        world_id=payload["world_id"],
                        x=payload["x"],
                        y=payload["y"],
                        z=payload["z"],
                        dimension=Dimension(payload["dimension"]),
                        name=payload["name"],
                        description=payload["description"],
                        category=Category(payload["category"]),
                        location_type=LocationType(payload["location_type"]),
                        is_manually_edited=payload.get("is_manually_edited", False),
                        tags=tuple(payload.get("tags", ())),
                        screenshot_path=payload.get("screenshot_path"),
                        thumbnail_path=payload.get("thumbnail_path"),
                    )
                )
        return records
