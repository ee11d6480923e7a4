"""Per-version language file cache."""

from __future__ import annotations

import json
import threading
from typing import Any

from mcviewgen.fileutil import file_exists
from mcviewgen.state import version_path

ASSETS_LANG_PATH = "/assets/minecraft/lang"


class LangRegistry:
    """Language tables keyed by game version."""

    def __init__(self) -> None:
        self._tables: dict[str, Any] = {}
        self._lock = threading.Lock()

    def load(self, version: str, lang: str) -> None:
        """Read ``<lang>.json`` of ``version`` into the cache."""
        path = version_path(version) + ASSETS_LANG_PATH + "/" + lang + ".json"
        if not file_exists(path):
            raise FileNotFoundError(f"can't find lang({lang}) in path({path})")
        with open(path, encoding="utf-8") as fh:
            table = json.load(fh)
        with self._lock:
            self._tables[version] = table

    def get(self, version: str, *args: str) -> str:
        """Look up a string by its key path in the version's table."""
        with self._lock:
            if version not in self._tables:
                raise KeyError(f"not found version({version}) cache")
            value = self._tables[version]
        for key in args:
            if not isinstance(value, dict) or key not in value:
                raise KeyError(f"key path {list(args)} not found")
            value = value[key]
        if not isinstance(value, str):
            raise ValueError(f"value at {list(args)} is not a string")
        return value