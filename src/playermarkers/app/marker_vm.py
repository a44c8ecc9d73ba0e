from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject

from playermarkers.app.services import PlayerService, ZoneService
from playermarkers.app.task_vm import PlayerTaskViewModel
from playermarkers.config import get_icon_path
from playermarkers.model.task import Point


class PlayerMarkerViewModel(QObject):
    """
    A marker drawn on the map for one player task.

    `is_template` is set for markers that only offer an icon in the palette
    and are not backed by a saved task. It is cleared once the template is
    dropped on the map and its task saved.
    """

    def __init__(self,
                 task_vm: PlayerTaskViewModel,
                 zone_service: ZoneService,
                 player_service: PlayerService,
                 is_template: bool = False) -> None:
        super().__init__()
        self._task_vm = task_vm
        self._zone_service = zone_service
        self._player_service = player_service
        self.is_template = is_template

    def __repr__(self) -> str:
        kind = "template" if self.is_template else "task"
        return f"PlayerMarkerViewModel({kind}, id={self.id!r}, icon={self.icon!r})"

    @property
    def task_view_model(self) -> PlayerTaskViewModel:
        return self._task_vm

    @property
    def id(self) -> str:
        return self._task_vm.id

    @property
    def icon(self) -> str:
        return self._task_vm.icon_uri

    @icon.setter
    def icon(self, value: str) -> None:
        self._task_vm.icon_uri = value

    @property
    def icon_path(self) -> str:
        """Icon file for the map surface to draw."""
        return get_icon_path(self.icon)

    @property
    def location(self) -> Optional[Point]:
        return self._task_vm.continent_location

    @location.setter
    def location(self, value: Optional[Point]) -> None:
        self._task_vm.continent_location = value

    @property
    def zone_name(self) -> str:
        map_id = self._task_vm.map_id
        if map_id is None:
            return ""
        return self._zone_service.get_zone_name(map_id)

    @property
    def distance_from_player(self) -> Optional[float]:
        """Distance in continent units, or None if either position is unknown."""
        player_location = self._player_service.character_location
        if player_location is None or self.location is None:
            return None
        return self.location.distance_to(player_location)
