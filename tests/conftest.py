# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest

from playermarkers.app.player_markers import PlayerMarkersViewModel
from playermarkers.app.task_factory import PlayerTasksFactory
from playermarkers.app.task_tracker import TaskTrackerViewModel
from playermarkers.app.task_vm import PlayerTaskViewModel
from playermarkers.model.task import PlayerTask, Point

from .fakes import FakePlayerService, FakeZoneService, RecordingTasksController


@pytest.fixture()
def factory() -> PlayerTasksFactory:
    return PlayerTasksFactory()


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "player_tasks.json"


@pytest.fixture()
def controller(factory: PlayerTasksFactory, tasks_path: Path) -> RecordingTasksController:
    return RecordingTasksController(factory, tasks_path=str(tasks_path))


@pytest.fixture()
def make_task(factory: PlayerTasksFactory) -> Callable[..., PlayerTaskViewModel]:
    """Build a task view-model, placed on the map when `location` is given."""

    def _make(task_id: str, location: Optional[Point] = None, icon: str = "/Images/Map/Markers/book.png",
              name: str = "") -> PlayerTaskViewModel:
        task = PlayerTask(id=task_id, name=name or task_id, icon_uri=icon, continent_location=location)
        return factory.get_player_task_view_model(task)

    return _make


@pytest.fixture()
def build_markers_vm(
    factory: PlayerTasksFactory, controller: RecordingTasksController
) -> Callable[[], PlayerMarkersViewModel]:
    """
    Deferred construction, so a test can fill the task list first.
    """

    def _build() -> PlayerMarkersViewModel:
        return PlayerMarkersViewModel(
            task_tracker=TaskTrackerViewModel(controller),
            task_factory=factory,
            tasks_controller=controller,
            zone_service=FakeZoneService({15: "Queensdale"}),
            player_service=FakePlayerService(Point(0.0, 0.0)),
        )

    return _build
