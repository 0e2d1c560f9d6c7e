"""Terminal progress bar for batch lookups.

Wraps Rich's ``Progress`` behind :class:`IProgressSink` so the batch engine
never touches the terminal.  The bar renders on stderr and is transient:
it disappears once the batch finishes, leaving only the result lines on
stdout.
"""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeRemainingColumn,
)

from src.interfaces.progress_sink import IProgressSink


class RichProgressSink(IProgressSink):
    """Determinate progress bar advanced once per finished key.

    Args:
        description: Text shown to the left of the bar.
        disabled: Suppress all rendering (non-interactive runs).
        console: Console to draw on; a stderr console by default.
    """

    def __init__(
        self,
        description: str = "Resolving",
        *,
        disabled: bool = False,
        console: Console | None = None,
    ) -> None:
        self._description = description
        self._progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeRemainingColumn(),
            console=console or Console(stderr=True),
            disable=disabled,
            transient=True,
        )
        self._task_id: TaskID | None = None

    def start(self, total: int) -> None:
        self._task_id = self._progress.add_task(self._description, total=total)
        self._progress.start()

    def advance(self) -> None:
        if self._task_id is not None:
            self._progress.advance(self._task_id)

    def stop(self) -> None:
        self._progress.stop()
        if self._task_id is not None:
            self._progress.remove_task(self._task_id)
            self._task_id = None
