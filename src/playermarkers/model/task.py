"""
Player Task Data Model
======================
Defines the persisted player annotation (a "task") and the coordinates used
to anchor it to the game map.

Classes:
    Point: An immutable 2D/3D coordinate.
    PlayerTask: A player objective, optionally anchored to a continent location.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import math
import uuid
from typing import Any, Dict, Optional


def new_task_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def distance_to(self, other: Point) -> float:
        """Planar distance; the map is drawn top-down so z is ignored."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Point:
        return Point(
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            z=float(data.get("z", 0.0)),
        )


@dataclass
class PlayerTask:
    """
    A single player-defined task.

    `continent_location` is what places the task on the world map. Tasks
    without one exist only in the task list.
    """
    id: str = field(default_factory=new_task_id)
    name: str = ""
    description: str = ""
    icon_uri: str = ""
    map_id: Optional[int] = None
    location: Optional[Point] = None
    continent_location: Optional[Point] = None
    is_completed: bool = False

    @property
    def has_continent_location(self) -> bool:
        return self.continent_location is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon_uri": self.icon_uri,
            "map_id": self.map_id,
            "location": self.location.to_dict() if self.location else None,
            "continent_location": self.continent_location.to_dict() if self.continent_location else None,
            "is_completed": self.is_completed,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> PlayerTask:
        # 'id' is the only required key; everything else falls back to defaults
        location = data.get("location")
        continent_location = data.get("continent_location")
        map_id = data.get("map_id")
        return PlayerTask(
            id=str(data["id"]),
            name=data.get("name", ""),
            description=data.get("description", ""),
            icon_uri=data.get("icon_uri", ""),
            map_id=int(map_id) if map_id is not None else None,
            location=Point.from_dict(location) if location else None,
            continent_location=Point.from_dict(continent_location) if continent_location else None,
            is_completed=bool(data.get("is_completed", False)),
        )
