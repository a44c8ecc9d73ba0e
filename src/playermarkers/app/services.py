"""
Service Ports
=============
Lookups the map markers need for their own rendering. The real
implementations talk to the game (map API, MumbleLink) and live outside
this package; markers only ever see these protocols.
"""
from __future__ import annotations

from typing import Optional, Protocol

from playermarkers.model.task import Point


class ZoneService(Protocol):
    def get_zone_name(self, map_id: int) -> str:
        ...


class PlayerService(Protocol):
    @property
    def character_location(self) -> Optional[Point]:
        """Current character position in continent coordinates, if known."""
        ...


class NullZoneService:
    """Zone lookup used when no game data is available."""

    def get_zone_name(self, map_id: int) -> str:
        return ""


class NullPlayerService:
    """Player lookup used when the game client is not running."""

    @property
    def character_location(self) -> Optional[Point]:
        return None
