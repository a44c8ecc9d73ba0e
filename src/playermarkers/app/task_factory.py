from __future__ import annotations

from playermarkers.app.task_vm import PlayerTaskViewModel
from playermarkers.model.task import PlayerTask


class PlayerTasksFactory:
    """Creates blank tasks and their view-models."""

    def get_player_task(self) -> PlayerTask:
        return PlayerTask()

    def get_player_task_view_model(self, task: PlayerTask) -> PlayerTaskViewModel:
        return PlayerTaskViewModel(task)
