"""Full-screen timer UI for focus sessions."""

from __future__ import annotations

import time
from collections.abc import Callable

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.text import Text

from pomotodo.models import SessionSnapshot, SessionStatus, Task
from pomotodo.services.clock import PollingTickSource
from pomotodo.services.focus_service import FocusService

from .keyboard import KeyboardHandler

BAR_WIDTH = 40


class TimerDisplay:
    """Renders the session and drives the tick source while it is shown."""

    def __init__(self, console: Console | None = None, refresh_interval: float = 0.1):
        self.console = console or Console()
        self.refresh_interval = refresh_interval

    def create_layout(self, snapshot: SessionSnapshot, task: Task | None) -> Layout:
        """Create the timer layout with header, body and key hints."""
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        if snapshot.status == "paused":
            title, color = "⏸  PAUSED", "yellow"
        elif snapshot.status == "running":
            title, color = "🍅  Pomotodo Focus", "cyan"
        else:
            title, color = "✓  SESSION COMPLETE", "green"

        header_text = Text(title, style=f"bold {color}", justify="center")
        layout["header"].update(Align.center(header_text, vertical="middle"))
        layout["body"].update(Align.center(self.create_body(snapshot, task), vertical="middle"))
        layout["footer"].update(Align.center(self._footer_text(snapshot.status), vertical="middle"))
        return layout

    def create_body(self, snapshot: SessionSnapshot, task: Task | None) -> Group:
        """Task label, countdown and progress bar."""
        components = []

        if task is not None:
            task_text = Text(f"Current task: {task.text[:50]}", style="bold white", justify="center")
            task_text.append(f"  {task.completed_sessions}/{task.target_sessions}", style="dim")
            components.append(task_text)
            components.append(Text(""))

        if snapshot.status == "paused":
            timer_color = "yellow"
        elif snapshot.remaining < 60:
            timer_color = "red"
        else:
            timer_color = "cyan"
        components.append(Text(snapshot.clock_text, style=f"bold {timer_color}", justify="center"))
        components.append(Text(""))

        percent = int(snapshot.progress_percent)
        filled = BAR_WIDTH * percent // 100
        bar = "▓" * filled + "░" * (BAR_WIDTH - filled)
        components.append(Text(f"{bar}  {percent}% done", style="dim", justify="center"))

        return Group(*components)

    @staticmethod
    def _footer_text(status: SessionStatus) -> Text:
        if status == "paused":
            hints = "Press 'p' to resume  •  's' to stop"
        else:
            hints = "Press 'p' to pause  •  's' to stop"
        return Text(hints, style="dim", justify="center")

    def run_timer(
        self,
        service: FocusService,
        clock: PollingTickSource,
        keyboard_factory: Callable[[], KeyboardHandler] = KeyboardHandler,
        sleep: Callable[[float], None] = time.sleep,
    ) -> str:
        """Run the session until it expires or the user stops it.

        Returns the final outcome: 'completed', 'stopped' or 'interrupted'.
        Stopping and interrupting both stop the engine without credit.
        """
        expired: list[bool] = []
        service.engine.add_listener(
            lambda previous, current: expired.append(True) if current == "expired" else None
        )
        # Label captured up front: the engine clears its binding on expiry
        task = service.current_task()

        keyboard = keyboard_factory()
        try:
            with Live(
                self.create_layout(service.engine.snapshot(), task),
                console=self.console,
                refresh_per_second=10,
                screen=True,
            ) as live:
                while True:
                    key = keyboard.get_key()
                    if key == "p":
                        service.toggle_pause()
                    elif key in ("s", "q"):
                        service.stop_session()
                        return "stopped"

                    clock.poll()
                    if expired:
                        return "completed"

                    task = service.current_task() or task
                    live.update(self.create_layout(service.engine.snapshot(), task))
                    sleep(self.refresh_interval)
        except KeyboardInterrupt:
            service.stop_session()
            return "interrupted"
        finally:
            keyboard.stop()
