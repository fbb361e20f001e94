# -*- coding: utf-8 -*-

"""
Console presentation for TaskFlow.

TodoCLI renders tasks and reports service errors as messages instead of
raising. run_demo() drives the fixed demonstration sequence used by the
`taskflow-demo` console script.
"""

import asyncio
import sys
from typing import Any, List, Optional

from loguru import logger

from taskflow.app import build_components
from taskflow.exceptions import TaskflowError
from taskflow.logging_setup import setup_logging
from taskflow.models_tasks import Task, TaskPriority, TaskStatus
from taskflow.ports import TaskServicePort

STATUS_GLYPHS = {
    TaskStatus.completed: "✓",
    TaskStatus.in_progress: "◐",
    TaskStatus.pending: "○",
}


def format_task(task: Task, index: int) -> str:
    """Two-line rendering: summary line and indented id line."""
    glyph = STATUS_GLYPHS.get(task.status, "○")
    due = f" (Due: {task.due_date.strftime('%Y-%m-%d')})" if task.due_date else ""
    return (
        f"{index}. [{glyph}] {task.description} [{task.priority.value}]{due}\n"
        f"   ID: {task.id}"
    )


class TodoCLI:
    def __init__(self, service: TaskServicePort):
        self.service = service

    def _print_tasks(self, tasks: List[Task], title: str) -> None:
        print(f"\n=== {title} ===")
        for index, task in enumerate(tasks, start=1):
            print(format_task(task, index))
        print("")

    async def display_all_tasks(self) -> None:
        tasks = await self.service.get_all_tasks()
        if not tasks:
            print("No tasks found.")
            return
        self._print_tasks(tasks, "All Tasks")

    async def add_task(
        self, description: str, priority: Any = TaskPriority.medium, due_date: Any = None
    ) -> Optional[Task]:
        try:
            task = await self.service.add_task(description, priority, due_date)
        except TaskflowError as e:
            print(f"✗ Error adding task: {e}")
            return None
        print(f'✓ Task added: "{task.description}" (ID: {task.id})')
        return task

    async def complete_task(self, task_id: str) -> None:
        try:
            task = await self.service.complete_task(task_id)
        except TaskflowError as e:
            print(f"✗ Error completing task: {e}")
            return
        print(f'✓ Task completed: "{task.description}"')

    async def uncomplete_task(self, task_id: str) -> None:
        try:
            task = await self.service.uncomplete_task(task_id)
        except TaskflowError as e:
            print(f"✗ Error uncompleting task: {e}")
            return
        print(f'✓ Task marked as pending: "{task.description}"')

    async def delete_task(self, task_id: str) -> None:
        try:
            await self.service.delete_task(task_id)
        except TaskflowError as e:
            print(f"✗ Error deleting task: {e}")
            return
        print(f"✓ Task deleted (ID: {task_id})")

    async def update_task(self, task_id: str, **updates: Any) -> None:
        try:
            task = await self.service.update_task(task_id, updates)
        except TaskflowError as e:
            print(f"✗ Error updating task: {e}")
            return
        print(f'✓ Task updated: "{task.description}"')

    async def filter_by_status(self, status: Any) -> None:
        try:
            tasks = await self.service.filter_by_status(status)
        except TaskflowError as e:
            print(f"✗ Error filtering tasks: {e}")
            return
        label = getattr(status, "value", status)
        if not tasks:
            print(f'No tasks with status "{label}".')
            return
        self._print_tasks(tasks, f"Tasks with status: {label}")

    async def filter_by_priority(self, priority: Any) -> None:
        try:
            tasks = await self.service.filter_by_priority(priority)
        except TaskflowError as e:
            print(f"✗ Error filtering tasks: {e}")
            return
        label = getattr(priority, "value", priority)
        if not tasks:
            print(f'No tasks with priority "{label}".')
            return
        self._print_tasks(tasks, f"Tasks with priority: {label}")

    async def search(self, query: str) -> None:
        tasks = await self.service.search(query)
        if not tasks:
            print(f'No tasks found matching "{query}".')
            return
        self._print_tasks(tasks, f'Search results for "{query}"')


async def run_demo(service: TaskServicePort, cli: TodoCLI) -> None:
    """Scripted walkthrough of every service operation."""
    print("🚀 TaskFlow Started\n")

    print("📝 Adding tasks...")
    task1 = await service.add_task("Complete project documentation", TaskPriority.high)
    task2 = await service.add_task("Review pull requests", TaskPriority.medium)
    task3 = await service.add_task("Update dependencies", TaskPriority.low)
    await service.add_task("Write unit tests for API", TaskPriority.high)

    print("\n📋 All Tasks:")
    await cli.display_all_tasks()

    print("✅ Marking task as complete...")
    await service.complete_task(task1.id)

    print("\n🔍 Filtering by status (Completed):")
    await cli.filter_by_status(TaskStatus.completed)

    print("🔍 Filtering by status (Pending):")
    await cli.filter_by_status(TaskStatus.pending)

    print("🔍 Filtering by priority (High):")
    await cli.filter_by_priority(TaskPriority.high)

    print('🔍 Searching for "tests":')
    await cli.search("tests")

    print("✏️ Updating task priority...")
    await service.update_task(task3.id, {"priority": TaskPriority.high})

    print("\n📋 All Tasks (After Updates):")
    await cli.display_all_tasks()

    print("🗑️ Deleting a task...")
    await service.delete_task(task2.id)

    print("\n📋 Final Task List:")
    await cli.display_all_tasks()

    print("✨ Demo completed successfully!")


async def _main_async() -> None:
    components = build_components()
    await run_demo(components.service, TodoCLI(components.service))


def main() -> int:
    """Entry point of `taskflow-demo`. Returns the process exit code."""
    setup_logging()
    try:
        asyncio.run(_main_async())
    except Exception as e:
        logger.opt(exception=e).error(f"Demo failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
