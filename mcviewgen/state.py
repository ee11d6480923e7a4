"""Shared runtime state and well-known filesystem locations."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from mcviewgen.model import Config, Release

SKINVIEW3D_URI = "/skinview3d"
PING_URI = "/ping"
GET_PLAYER_LIST_URI = "/get_player_list"

PARENT_PATH = "./config"
ASSETS_PATH = PARENT_PATH + "/assets"
FONTS_PATH = PARENT_PATH + "/fonts"
SKINS_PATH = PARENT_PATH + "/skins"


def version_path(version: str) -> str:
    """Directory holding the assets of one game version."""
    return ASSETS_PATH + "/" + version


def skin_path(uuid: str, suffix: str) -> str:
    """File path of a cached player skin."""
    return SKINS_PATH + "/" + uuid + suffix


@dataclass
class AppState:
    """Everything loaded at start-up and shared by the request handlers."""

    config: Config = field(default_factory=Config)
    latest_version: str = ""
    version_map: dict[str, Release] = field(default_factory=dict)
    skin_map: dict[str, Any] = field(default_factory=dict)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)