"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths scattered throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find the marker icons when the app is frozen into an .exe.
3. User data: It resolves where the player's tasks are saved.
4. Templates: It holds the fixed palette of marker icons offered on the map.

Exports:
    MARKER_ICON_DIR (str): Icon path prefix used by marker icons.
    TEMPLATE_ICONS (tuple[str, ...]): Ordered icons offered as marker templates.
    TASKS_FILENAME (str): Name of the user tasks file inside the data dir.
"""
import os
import sys
from pathlib import Path

from PySide6.QtCore import QStandardPaths

DATA_DIR_ENV_VAR = "PLAYERMARKERS_DATA_DIR"
TRACE_MARKERS_ENV_VAR = "PLAYERMARKERS_TRACE_MARKERS"
TASKS_FILENAME = "player_tasks.json"

MARKER_ICON_DIR = "/Images/Map/Markers"

_TEMPLATE_ICON_NAMES = (
    "miningNode.png",
    "harvestingNode.png",
    "loggingNode.png",
    "activity.png",
    "adventure.png",
    "anvil.png",
    "book.png",
    "parchment.png",
    "dragon.png",
    "greenFlag.png",
    "quaggan.png",
    "trophy.png",
    "pointA.png",
    "pointB.png",
    "pointC.png",
    "orangeShield.png",
    "redShield.png",
    "blueStar.png",
    "greenStar.png",
    "yellowStar.png",
    "yellowStar2.png",
    "downedAlly.png",
    "downedEnemy.png",
    "blueSiege.png",
    "redSiege.png",
    "swords.png",
)

# Order matters: it is the order of the template palette on the map
TEMPLATE_ICONS: tuple[str, ...] = tuple(f"{MARKER_ICON_DIR}/{name}" for name in _TEMPLATE_ICON_NAMES)


def get_user_data_dir() -> str:
    """
    Directory holding the user's saved tasks.

    The environment variable wins; otherwise Qt's per-application data
    location is used (requires the application name to be set first).
    """
    override = os.environ.get(DATA_DIR_ENV_VAR)
    if override:
        return override
    return QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)


def get_tasks_path() -> str:
    return os.path.join(get_user_data_dir(), TASKS_FILENAME)


def trace_markers_enabled() -> bool:
    return os.environ.get(TRACE_MARKERS_ENV_VAR, "").lower() in ("1", "true", "yes", "on")


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/playermarkers/
    project_root: Path = Path(__file__).parent.parent.parent
    return os.path.join(str(project_root), relative_path)


def get_icon_path(icon_uri: str) -> str:
    """
    File behind a marker icon URI such as '/Images/Map/Markers/book.png'.

    Icon URIs are rooted at the assets directory.
    """
    return os.path.join(get_resource_path("assets"), *icon_uri.strip("/").split("/"))
