from __future__ import annotations

from playermarkers.app.observable import ObservableList
from playermarkers.controller.tasks_controller import PlayerTasksController


class TaskTrackerViewModel:
    """The task list panel: exposes the tasks and the list-wide actions."""

    def __init__(self, controller: PlayerTasksController) -> None:
        self.controller = controller

    @property
    def player_tasks(self) -> ObservableList:
        return self.controller.player_tasks

    def load_tasks(self) -> None:
        self.controller.load_tasks()

    def import_tasks(self, path: str) -> None:
        self.controller.import_tasks(path)

    def export_tasks(self, path: str) -> None:
        self.controller.export_tasks(path)

    def delete_all(self) -> None:
        self.controller.delete_all_tasks()
