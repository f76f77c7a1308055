from rich.table import Table
from rich.panel import Panel
from rich.console import Console
from rich.text import Text
from typing import Iterable, Optional

from .config import config
from .domain import Displayable, Priority, Status, Task


class RichFormatter:
    """Rich formatting utilities for console output"""

    STATUS_CONFIG = {
        Status.TODO: {'color': 'yellow', 'symbol': '⏳'},
        Status.IN_PROGRESS: {'color': 'blue', 'symbol': '⚡'},
        Status.DONE: {'color': 'green', 'symbol': '✅'},
    }

    PRIORITY_STYLES = {
        Priority.LOW: 'dim',
        Priority.MEDIUM: 'bold yellow',
        Priority.HIGH: 'bold red',
    }

    @staticmethod
    def make_console(file=None) -> Console:
        """Console honouring the colour setting"""
        return Console(file=file, no_color=config.NO_COLOR, highlight=False)

    @staticmethod
    def format_status(status: Status) -> Text:
        status_info = RichFormatter.STATUS_CONFIG[status]
        status_text = Text(f"{status_info['symbol']} {status.label}")
        status_text.stylize(status_info['color'])
        return status_text

    @staticmethod
    def format_priority(priority: Priority) -> Text:
        priority_text = Text(priority.label)
        priority_text.stylize(RichFormatter.PRIORITY_STYLES[priority])
        return priority_text

    @staticmethod
    def format_item(item: Displayable) -> Text:
        """Summary line for any displayable item"""
        text = Text(item.display())
        if isinstance(item, Task) and item.status == Status.DONE:
            text.stylize("green")
        return text

    @staticmethod
    def create_task_table(tasks: Iterable[Task], title: Optional[str] = None) -> Panel:
        """Create a Rich table for displaying tasks with color coding and symbols"""
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("ID", style="cyan", no_wrap=True, justify="right")
        table.add_column("Title", style="white")
        table.add_column("Status", style="white")
        table.add_column("Priority", style="white", justify="center")
        table.add_column("Tags", style="white")

        for task in tasks:
            table.add_row(
                str(task.id),
                task.title,
                RichFormatter.format_status(task.status),
                RichFormatter.format_priority(task.priority),
                ", ".join(task.tags),
            )

        return Panel(
            table,
            title=f"[bold cyan]{title or 'TASKS'}[/bold cyan]",
            border_style="blue",
            padding=(0, 1)
        )
