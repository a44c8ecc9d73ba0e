from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, Signal

from playermarkers.model.task import PlayerTask, Point

HAS_CONTINENT_LOCATION = "has_continent_location"


class PlayerTaskViewModel(QObject):
    """
    Bindable wrapper around a PlayerTask.

    Every setter emits `property_changed(self, name)` when the value really
    changes. Moving a task on or off the map additionally emits
    HAS_CONTINENT_LOCATION.
    """
    property_changed = Signal(object, str)

    def __init__(self, task: PlayerTask) -> None:
        super().__init__()
        self._task = task

    def __repr__(self) -> str:
        return f"PlayerTaskViewModel(id={self._task.id!r}, name={self._task.name!r})"

    @property
    def task(self) -> PlayerTask:
        return self._task

    @property
    def id(self) -> str:
        return self._task.id

    @property
    def has_continent_location(self) -> bool:
        return self._task.has_continent_location

    @property
    def name(self) -> str:
        return self._task.name

    @name.setter
    def name(self, value: str) -> None:
        self._set("name", value)

    @property
    def description(self) -> str:
        return self._task.description

    @description.setter
    def description(self, value: str) -> None:
        self._set("description", value)

    @property
    def icon_uri(self) -> str:
        return self._task.icon_uri

    @icon_uri.setter
    def icon_uri(self, value: str) -> None:
        self._set("icon_uri", value)

    @property
    def map_id(self) -> Optional[int]:
        return self._task.map_id

    @map_id.setter
    def map_id(self, value: Optional[int]) -> None:
        self._set("map_id", value)

    @property
    def location(self) -> Optional[Point]:
        return self._task.location

    @location.setter
    def location(self, value: Optional[Point]) -> None:
        self._set("location", value)

    @property
    def continent_location(self) -> Optional[Point]:
        return self._task.continent_location

    @continent_location.setter
    def continent_location(self, value: Optional[Point]) -> None:
        had_location = self._task.has_continent_location
        self._set("continent_location", value)
        if had_location != self._task.has_continent_location:
            self.property_changed.emit(self, HAS_CONTINENT_LOCATION)

    @property
    def is_completed(self) -> bool:
        return self._task.is_completed

    @is_completed.setter
    def is_completed(self, value: bool) -> None:
        self._set("is_completed", value)

    def update_from(self, task: PlayerTask) -> None:
        """Copy every field but the id from `task`, through the setters."""
        self.name = task.name
        self.description = task.description
        self.icon_uri = task.icon_uri
        self.map_id = task.map_id
        self.location = task.location
        self.continent_location = task.continent_location
        self.is_completed = task.is_completed

    def _set(self, name: str, value: object) -> None:
        if getattr(self._task, name) == value:
            return
        setattr(self._task, name, value)
        self.property_changed.emit(self, name)
