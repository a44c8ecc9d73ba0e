# tests/fakes.py

from __future__ import annotations

from typing import Optional

from playermarkers.app.task_vm import PlayerTaskViewModel
from playermarkers.controller.tasks_controller import PlayerTasksController
from playermarkers.model.task import Point


class FakeZoneService:
    def __init__(self, names: Optional[dict[int, str]] = None) -> None:
        self.names = names or {}
        self.calls: list[int] = []

    def get_zone_name(self, map_id: int) -> str:
        self.calls.append(map_id)
        return self.names.get(map_id, "")


class FakePlayerService:
    def __init__(self, character_location: Optional[Point] = None) -> None:
        self.character_location = character_location


class RecordingTasksController(PlayerTasksController):
    """
    Real controller that also records every add_or_update_task call.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.saved: list[PlayerTaskViewModel] = []

    def add_or_update_task(self, task_vm: PlayerTaskViewModel) -> None:
        self.saved.append(task_vm)
        super().add_or_update_task(task_vm)
