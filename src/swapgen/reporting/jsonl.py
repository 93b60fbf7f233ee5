from __future__ import annotations

import json
import sys
from typing import Any, Optional

from .base import Reporter, TaskRecord, TaskStatus, get_verbosity


class JsonLinesReporter(Reporter):
    """Machine-readable JSON lines reporter."""

    def __init__(self, stream=None):
        super().__init__()
        self.stream = stream or sys.stdout

    def _emit(self, obj: dict) -> None:
        self.stream.write(json.dumps(obj, sort_keys=True, default=str) + "\n")

    def start_task(self, task_id: str, name: str, **meta: Any) -> None:
        super().start_task(task_id, name, **meta)
        self._emit({"event": "task_start", "id": task_id, "name": name, **meta})

    def end_task(
        self,
        task_id: str,
        status: TaskStatus = TaskStatus.SUCCESS,
        **final_meta: Any,
    ) -> Optional[TaskRecord]:
        rec = super().end_task(task_id, status, **final_meta)
        if rec is None:
            return None
        self._emit(
            {
                "event": "task_end",
                "id": task_id,
                "status": status.name.lower(),
                "duration": round(rec.duration, 6),
                **rec.meta,
            }
        )
        return rec

    def status(self, message: str, **fields: Any) -> None:
        self._emit({"event": "status", "message": message, **fields})

    def verbose(self, message: str, *, level: int = 1, **fields: Any) -> None:
        if get_verbosity() < level:
            return
        self._emit(
            {"event": "verbose", "level": level, "message": message, **fields}
        )

    def error(self, message: str, **fields: Any) -> None:
        self._emit({"event": "error", "message": message, **fields})

    def warning(self, message: str, **fields: Any) -> None:
        self._emit({"event": "warning", "message": message, **fields})

    def section(self, title: str) -> None:
        self._emit({"event": "section", "title": title})

    def flush(self) -> None:
        self.stream.flush()
