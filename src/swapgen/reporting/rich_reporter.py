from __future__ import annotations

import os
import time
from typing import Any, Optional

from rich.console import Console
from rich.text import Text

from .base import Reporter, TaskRecord, TaskStatus, get_verbosity

_STATUS_STYLE = {
    TaskStatus.SUCCESS: ("✔", "green"),
    TaskStatus.FAILED: ("✖", "bold red"),
}


class RichReporter(Reporter):
    def __init__(self, console: Console | None = None):
        super().__init__()
        self.console = console or Console(
            stderr=True, highlight=False, soft_wrap=False
        )
        self._timestamps = os.getenv(
            "SWAPGEN_RICH_TIMESTAMPS", "0"
        ).lower() in ("1", "true", "yes")

    def _line(self, label: str, style: str, message: str) -> None:
        text = Text()
        if self._timestamps:
            text.append(time.strftime("%H:%M:%S "), style="dim")
        text.append(label, style=style)
        text.append(" ")
        text.append(message)
        self.console.print(text)

    def end_task(
        self,
        task_id: str,
        status: TaskStatus = TaskStatus.SUCCESS,
        **final_meta: Any,
    ) -> Optional[TaskRecord]:
        rec = super().end_task(task_id, status, **final_meta)
        if rec is None:
            return None
        icon, style = _STATUS_STYLE.get(status, ("?", "white"))
        text = Text(f" {icon} ", style=style)
        text.append(rec.name, style="bold")
        text.append(f" ({rec.duration:.2f}s)", style="dim")
        text.append(rec.summary(), style="cyan")
        self.console.print(text)
        return rec

    def status(self, message: str, **fields: Any) -> None:
        self._line("INFO", "green", message)

    def verbose(self, message: str, *, level: int = 1, **fields: Any) -> None:
        if get_verbosity() < level:
            return
        self._line(f"VERB{level}", "cyan", message)

    def error(self, message: str, **fields: Any) -> None:
        self._line("ERROR", "bold red", message)

    def warning(self, message: str, **fields: Any) -> None:
        self._line("WARN", "yellow", message)

    def section(self, title: str) -> None:
        self.console.rule(title, style="blue")
