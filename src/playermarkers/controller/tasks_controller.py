"""
Player Tasks Controller
=======================
Owns the list of player tasks and persists it as JSON.

Why is this file needed?
------------------------
1. Single writer: every change to the task list goes through here, so the
   list's change signals are the one source of truth for the map markers.
2. Persistence: saving, loading, importing and exporting tasks.

Classes:
    TaskStoreError: Raised when a tasks file cannot be read or written.
    PlayerTasksController: The task list owner.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Optional

from playermarkers import config
from playermarkers.app.observable import ObservableList
from playermarkers.app.task_factory import PlayerTasksFactory
from playermarkers.app.task_vm import PlayerTaskViewModel
from playermarkers.model.task import PlayerTask

logger = logging.getLogger(__name__)

FILE_FORMAT_VERSION = 1


class TaskStoreError(Exception):
    """A tasks file could not be read or written."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class PlayerTasksController:
    def __init__(self, factory: PlayerTasksFactory, tasks_path: Optional[str] = None) -> None:
        self.factory = factory
        self._tasks_path = tasks_path
        self.player_tasks = ObservableList()

    @property
    def tasks_path(self) -> str:
        # Resolved lazily: Qt needs the application name before it can answer
        if self._tasks_path is None:
            self._tasks_path = config.get_tasks_path()
        return self._tasks_path

    def find_task(self, task_id: str) -> Optional[PlayerTaskViewModel]:
        return self.player_tasks.first_or_none(lambda vm: vm.id == task_id)

    def add_or_update_task(self, task_vm: PlayerTaskViewModel) -> None:
        """
        Add a task, or update the stored task with the same id.

        An update copies the new values into the stored view-model, which
        stays in the list; observers see property changes, not a swap.
        Re-adding the very same view-model is a no-op.
        """
        existing = self.find_task(task_vm.id)
        if existing is None:
            logger.debug(f"Adding task {task_vm.id}")
            self.player_tasks.append(task_vm)
        elif existing is not task_vm:
            logger.debug(f"Updating task {task_vm.id}")
            existing.update_from(task_vm.task)

    def delete_task(self, task_vm: PlayerTaskViewModel) -> None:
        existing = self.find_task(task_vm.id)
        if existing is not None:
            logger.debug(f"Deleting task {task_vm.id}")
            self.player_tasks.remove(existing)

    def delete_all_tasks(self) -> None:
        logger.info(f"Deleting all {len(self.player_tasks)} tasks.")
        self.player_tasks.clear()

    def load_tasks(self) -> None:
        """
        Replace the task list with the contents of the user tasks file.

        The list is cleared and then refilled, so observers see the loaded
        tasks arrive as additions. A missing file loads nothing.
        """
        path = self.tasks_path
        if not os.path.exists(path):
            logger.info(f"No saved tasks at {path}")
            tasks: list[PlayerTask] = []
        else:
            tasks = self._read_tasks(path)

        self.player_tasks.clear()
        self.player_tasks.extend(self.factory.get_player_task_view_model(t) for t in tasks)
        logger.info(f"Loaded {len(tasks)} tasks from {path}")

    def save_tasks(self) -> None:
        path = self.tasks_path
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        self._write_tasks(path)
        logger.info(f"Saved {len(self.player_tasks)} tasks to {path}")

    def import_tasks(self, path: str) -> None:
        """Merge tasks from a file; tasks with a known id are replaced."""
        tasks = self._read_tasks(path)
        for task in tasks:
            self.add_or_update_task(self.factory.get_player_task_view_model(task))
        logger.info(f"Imported {len(tasks)} tasks from {path}")

    def export_tasks(self, path: str) -> None:
        self._write_tasks(path)
        logger.info(f"Exported {len(self.player_tasks)} tasks to {path}")

    def _read_tasks(self, path: str) -> list[PlayerTask]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data: Any = json.load(f)
            entries = data["tasks"] if isinstance(data, dict) else data
            return [PlayerTask.from_dict(entry) for entry in entries]
        except (OSError, json.JSONDecodeError) as e:
            logger.exception(f"Failed to read tasks from {path}")
            raise TaskStoreError(path, str(e)) from e
        except (KeyError, TypeError, ValueError) as e:
            logger.exception(f"Malformed tasks file {path}")
            raise TaskStoreError(path, f"malformed tasks file ({e!r})") from e

    def _write_tasks(self, path: str) -> None:
        data = {
            "version": FILE_FORMAT_VERSION,
            "tasks": [vm.task.to_dict() for vm in self.player_tasks],
        }
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.exception(f"Failed to write tasks to {path}")
            raise TaskStoreError(path, str(e)) from e
