from __future__ import annotations
import csv, os
from typing import Dict, Any

EVENT_KEYS = ["frame", "event", "score", "length", "head_x", "head_y", "reason"]


class NullEventLog:
    def log(self, frame: int, row: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


class CSVEventLog:
    """Append-only CSV log of game events. Header is written once per file."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames or EVENT_KEYS
        self._file = open(path, "a", newline="")
        self._writer = csv.DictWriter(
            self._file,
            fieldnames=self._fieldnames,
            extrasaction="ignore",
        )
        if self._file.tell() == 0:
            self._writer.writeheader()

    def log(self, frame: int, row: Dict[str, Any]) -> None:
        self._writer.writerow({"frame": frame, **row})

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


def make_event_log(path: str | None):
    return CSVEventLog(path) if path else NullEventLog()
