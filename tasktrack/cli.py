import click
import logging
from rich.console import Console

from .config import config
from .domain import Priority, Status, User, UserId
from .exceptions import ConfigurationError
from .formatters import RichFormatter
from .operations import (
    add_tag_to_task,
    assign_task,
    create_task,
    get_tasks_by_priority,
    print_displayable_item,
    set_task_project,
    update_task_priority,
    update_task_status,
)
from .results import handle_operation_result
from .service import TaskManagerService

logger = logging.getLogger(__name__)


def _report(console: Console, operation_name: str, result) -> None:
    """Print the outcome of a store operation."""
    handle_operation_result(
        operation_name,
        result,
        lambda _: console.print(f"[green]OK[/green] ({operation_name})"),
        lambda error: console.print(f"[red]ERROR[/red] ({operation_name}): {error}"),
    )


def run_demo(console: Console) -> TaskManagerService:
    """Walk through the record model and the task store, printing each step."""
    console.print("[bold cyan]--- Records ---[/bold cyan]")
    user = User(UserId(1), "Kateryna")
    print_displayable_item(user, console)
    console.print(
        "Status:", RichFormatter.format_status(Status.IN_PROGRESS),
        "Priority:", RichFormatter.format_priority(Priority.HIGH),
    )

    console.print("\n[bold cyan]--- Operations ---[/bold cyan]")
    task = create_task(101, "Task from the demo")
    console.print(f"Created task: id={task.id}, title='{task.title}'")
    task = update_task_status(Status.IN_PROGRESS, task)
    task = update_task_priority(Priority.HIGH, task)
    task = add_tag_to_task("demo_tag", task)
    task = assign_task(user.id, task)
    task = set_task_project("tasktrack", task)
    print_displayable_item(task, console)

    task_map = {t.id: t for t in [task, create_task(102, "Another task")]}
    high = get_tasks_by_priority(Priority.HIGH, task_map)
    console.print(f"Found {len(high)} high priority task(s):")
    for item in high:
        print_displayable_item(item, console)

    console.print("\n[bold cyan]--- Task store ---[/bold cyan]")
    service = TaskManagerService()
    console.print(f"Initial task count: {service.task_count}")

    _report(
        console,
        "add task 201",
        service.add_task(
            201,
            "Task from the service",
            description="Detailed description for the service task",
            priority=Priority.MEDIUM,
        ),
    )
    _report(console, "add task 201 again", service.add_task(201, "Duplicate"))
    console.print(f"Task count: {service.task_count}")

    stored = service.try_get_task_by_id(201)
    if stored is not None:
        console.print(f"Retrieved: {stored.title}")
        print_displayable_item(stored, console)
    else:
        console.print("Task 201 not found.")

    _report(console, "update task 201", service.update_task(201, lambda t: update_task_status(Status.DONE, t)))
    _report(console, "update task 999", service.update_task(999, lambda t: update_task_status(Status.DONE, t)))

    console.print(RichFormatter.create_task_table(service.all_tasks, title="ALL TASKS"))
    return service


@click.group()
@click.option('--log-level', default=None, help='Logging level (default: TASKTRACK_LOG_LEVEL or WARNING)')
def cli(log_level):
    """tasktrack - in-memory task tracking"""
    try:
        level = config.log_level(log_level)
    except ConfigurationError as e:
        raise click.BadParameter(str(e), param_hint='--log-level')
    logging.basicConfig(level=level)


@cli.command()
def demo():
    """Run the demonstration scenario"""
    console = RichFormatter.make_console()
    service = run_demo(console)
    logger.info(f"Demo finished with {service.task_count} task(s)")
