"""
Application Initialization
==========================
This module wires the task list and the map markers together.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the task factory and the task list controller.
2. Instantiates the task tracker and the map markers view-model.
3. Passes the lookup services into the markers.
4. Prevents circular import errors by being the orchestrator.

Without a map surface attached it loads the saved tasks, reports what
would be drawn and writes the tasks back.
"""
from __future__ import annotations

import logging
from typing import Optional

from playermarkers import config
from playermarkers.app.application import create_app
from playermarkers.app.player_markers import PlayerMarkersViewModel
from playermarkers.app.services import NullPlayerService, NullZoneService
from playermarkers.app.task_factory import PlayerTasksFactory
from playermarkers.app.task_tracker import TaskTrackerViewModel
from playermarkers.controller.tasks_controller import PlayerTasksController, TaskStoreError
from playermarkers.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_player_markers(tasks_path: Optional[str] = None) -> PlayerMarkersViewModel:
    factory = PlayerTasksFactory()
    controller = PlayerTasksController(factory, tasks_path=tasks_path)
    tracker = TaskTrackerViewModel(controller)
    return PlayerMarkersViewModel(
        task_tracker=tracker,
        task_factory=factory,
        tasks_controller=controller,
        zone_service=NullZoneService(),
        player_service=NullPlayerService(),
    )


def main(tasks_path: Optional[str] = None) -> int:
    # PLAYERMARKERS_TRACE_MARKERS=1 follows every marker change
    setup_logging(level=logging.INFO, trace_markers=config.trace_markers_enabled())

    create_app()
    markers_vm = build_player_markers(tasks_path)

    try:
        markers_vm.load()
    except TaskStoreError as e:
        logger.error(f"Could not load tasks: {e}")
        return 1

    logger.info(f"{len(markers_vm.player_tasks)} tasks, "
                f"{len(markers_vm.player_markers)} on the map, "
                f"{len(markers_vm.marker_templates)} marker templates.")

    try:
        markers_vm.tasks_controller.save_tasks()
    except TaskStoreError as e:
        logger.error(f"Could not save tasks: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
