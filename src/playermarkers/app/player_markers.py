"""
Player Markers View-Model
=========================
Keeps the markers shown on the map in step with the player task list.

Why is this file needed?
------------------------
1. Mirroring: every task with a continent location has exactly one marker,
   and every marker belongs to such a task.
2. Templates: a fixed palette of unsaved markers offers icons to drag onto
   the map. Dropping one saves its task and puts a fresh template with the
   same icon back in the same palette slot.

Notifications are handled through a FIFO queue. A change raised while
another one is being handled (e.g. adding a marker from inside a task-list
handler) waits until the current handler returns.
"""
from __future__ import annotations

from collections import deque
import logging
import weakref
from typing import Any, Callable, Deque, Iterable, Optional, Sequence, Tuple

from PySide6.QtCore import QObject

from playermarkers.app.marker_vm import PlayerMarkerViewModel
from playermarkers.app.observable import ObservableList
from playermarkers.app.services import PlayerService, ZoneService
from playermarkers.app.task_factory import PlayerTasksFactory
from playermarkers.app.task_tracker import TaskTrackerViewModel
from playermarkers.app.task_vm import HAS_CONTINENT_LOCATION, PlayerTaskViewModel
from playermarkers.config import TEMPLATE_ICONS
from playermarkers.controller.tasks_controller import PlayerTasksController
from playermarkers.model.task import Point

logger = logging.getLogger(__name__)


class PlayerMarkersViewModel(QObject):
    def __init__(self,
                 task_tracker: TaskTrackerViewModel,
                 task_factory: PlayerTasksFactory,
                 tasks_controller: PlayerTasksController,
                 zone_service: ZoneService,
                 player_service: PlayerService,
                 template_icons: Sequence[str] = TEMPLATE_ICONS) -> None:
        super().__init__()
        self.task_tracker = task_tracker
        self.task_factory = task_factory
        self.tasks_controller = tasks_controller
        self.zone_service = zone_service
        self.player_service = player_service

        self._pending: Deque[Tuple[Callable[..., None], Tuple[Any, ...]]] = deque()
        self._dispatching = False
        # id(task_vm) -> task_vm for every task whose property_changed we listen to.
        # Weak values: a reset leaves marker-less tasks connected, they must stay collectable.
        self._subscribed: weakref.WeakValueDictionary[int, PlayerTaskViewModel] = weakref.WeakValueDictionary()

        self.player_markers = ObservableList()
        self.player_tasks: ObservableList = task_tracker.player_tasks
        for task_vm in self.player_tasks:
            self._subscribe(task_vm)
            if task_vm.has_continent_location:
                self.player_markers.append(self._create_marker(task_vm))

        self.player_tasks.items_added.connect(self._on_tasks_added)
        self.player_tasks.items_removed.connect(self._on_tasks_removed)
        self.player_tasks.items_replaced.connect(self._on_tasks_replaced)
        self.player_tasks.items_reset.connect(self._on_tasks_reset)

        self.marker_templates = ObservableList(self._create_template(icon) for icon in template_icons)
        self.player_markers.items_added.connect(self._on_markers_added)

        logger.debug(f"Initialized with {len(self.player_markers)} markers "
                     f"and {len(self.marker_templates)} templates.")

    # ---- Delegated task list actions ----

    def load(self) -> None:
        self.task_tracker.load_tasks()

    def import_tasks(self, path: str) -> None:
        self.task_tracker.import_tasks(path)

    def export_tasks(self, path: str) -> None:
        self.task_tracker.export_tasks(path)

    def delete_all(self) -> None:
        self.task_tracker.delete_all()

    # ---- Public API ----

    def find_marker(self, task_id: str) -> Optional[PlayerMarkerViewModel]:
        return self.player_markers.first_or_none(lambda m: m.id == task_id)

    def place_template(self, template: PlayerMarkerViewModel, location: Point) -> None:
        """
        Drop a template marker onto the map at `location`.

        This is the way to place a template. Appending a template to
        `player_markers` directly also consumes and saves it, but its task
        then has no location and the marker stays until the list is reset.
        """
        if location is None:
            raise ValueError("A template can only be placed at a location.")
        template.location = location
        self.player_markers.append(template)

    def dispose(self) -> None:
        """Stop listening to the task list and to every task."""
        self.player_tasks.items_added.disconnect(self._on_tasks_added)
        self.player_tasks.items_removed.disconnect(self._on_tasks_removed)
        self.player_tasks.items_replaced.disconnect(self._on_tasks_replaced)
        self.player_tasks.items_reset.disconnect(self._on_tasks_reset)
        self.player_markers.items_added.disconnect(self._on_markers_added)
        for task_vm in list(self._subscribed.values()):
            self._unsubscribe(task_vm)

    # ---- Signal handlers (queued) ----

    def _on_tasks_added(self, items: list, index: int) -> None:
        self._dispatch(self._handle_tasks_added, items)

    def _on_tasks_removed(self, items: list, index: int) -> None:
        self._dispatch(self._handle_tasks_removed, items)

    def _on_tasks_replaced(self, new_items: list, old_items: list, index: int) -> None:
        self._dispatch(self._handle_tasks_replaced, new_items, old_items)

    def _on_tasks_reset(self) -> None:
        self._dispatch(self._handle_tasks_reset)

    def _on_task_property_changed(self, task_vm: PlayerTaskViewModel, name: str) -> None:
        if name == HAS_CONTINENT_LOCATION:
            self._dispatch(self._handle_location_changed, task_vm)

    def _on_markers_added(self, items: list, index: int) -> None:
        self._dispatch(self._handle_markers_added, items)

    def _dispatch(self, handler: Callable[..., None], *args: Any) -> None:
        self._pending.append((handler, args))
        if self._dispatching:
            return
        self._dispatching = True
        try:
            while self._pending:
                next_handler, next_args = self._pending.popleft()
                next_handler(*next_args)
        finally:
            self._dispatching = False
            self._pending.clear()

    # ---- Synchronization ----

    def _handle_tasks_added(self, items: Iterable[PlayerTaskViewModel]) -> None:
        for task_vm in items:
            self._subscribe(task_vm)
            if task_vm.has_continent_location:
                self._add_marker_if_missing(task_vm)

    def _handle_tasks_removed(self, items: Iterable[PlayerTaskViewModel]) -> None:
        for task_vm in items:
            self._unsubscribe(task_vm)
            self._remove_marker_if_present(task_vm)

    def _handle_tasks_replaced(self,
                               new_items: Iterable[PlayerTaskViewModel],
                               old_items: Iterable[PlayerTaskViewModel]) -> None:
        # New items first: a replacement keeping its id finds the old marker
        # and adds nothing, then the old item's removal drops that marker.
        self._handle_tasks_added(new_items)
        self._handle_tasks_removed(old_items)

    def _handle_tasks_reset(self) -> None:
        for marker in self.player_markers:
            self._unsubscribe(marker.task_view_model)
        self.player_markers.clear()
        logger.debug("Task list reset, cleared all markers.")

    def _handle_location_changed(self, task_vm: PlayerTaskViewModel) -> None:
        if task_vm.has_continent_location:
            self._add_marker_if_missing(task_vm)
        else:
            self._remove_marker_if_present(task_vm)

    def _handle_markers_added(self, items: Iterable[PlayerMarkerViewModel]) -> None:
        for marker in items:
            if not marker.is_template:
                continue
            index = self.marker_templates.index_of(marker)
            if index is None:
                continue

            # Dropped from the palette: put a fresh template in its slot...
            self.marker_templates.pop(index)
            self.marker_templates.insert(index, self._create_template(marker.icon))
            marker.is_template = False
            logger.debug(f"Template {marker.icon} consumed by task {marker.id}")

            # ...and save the dropped marker's task
            self.tasks_controller.add_or_update_task(marker.task_view_model)

    def _add_marker_if_missing(self, task_vm: PlayerTaskViewModel) -> None:
        if self.find_marker(task_vm.id) is None:
            self.player_markers.append(self._create_marker(task_vm))
            logger.debug(f"Added marker for task {task_vm.id}")

    def _remove_marker_if_present(self, task_vm: PlayerTaskViewModel) -> None:
        marker = self.find_marker(task_vm.id)
        if marker is not None:
            self.player_markers.remove(marker)
            logger.debug(f"Removed marker for task {task_vm.id}")

    def _subscribe(self, task_vm: PlayerTaskViewModel) -> None:
        if id(task_vm) in self._subscribed:
            return
        task_vm.property_changed.connect(self._on_task_property_changed)
        self._subscribed[id(task_vm)] = task_vm

    def _unsubscribe(self, task_vm: PlayerTaskViewModel) -> None:
        if self._subscribed.pop(id(task_vm), None) is not None:
            task_vm.property_changed.disconnect(self._on_task_property_changed)

    def _create_marker(self, task_vm: PlayerTaskViewModel) -> PlayerMarkerViewModel:
        return PlayerMarkerViewModel(task_vm, self.zone_service, self.player_service)

    def _create_template(self, icon: str) -> PlayerMarkerViewModel:
        task = self.task_factory.get_player_task()
        task.icon_uri = icon
        task_vm = self.task_factory.get_player_task_view_model(task)
        return PlayerMarkerViewModel(task_vm, self.zone_service, self.player_service, is_template=True)
