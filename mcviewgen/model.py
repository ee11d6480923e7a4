"""Configuration, request and release data models."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str | int | float) -> float:
    """Parse a duration such as ``72h`` or ``1m30s`` into seconds.

    Bare numbers are taken as nanoseconds.
    """
    if isinstance(text, bool):
        raise ValueError(f"invalid duration {text!r}")
    if isinstance(text, (int, float)):
        return text * 1e-9
    s = text.strip()
    sign = 1.0
    if s[:1] in "+-" and s:
        sign = -1.0 if s[0] == "-" else 1.0
        s = s[1:]
    if s == "0":
        return 0.0
    if not s:
        raise ValueError(f"invalid duration {text!r}")
    pos = 0
    total = 0.0
    while pos < len(s):
        match = _DURATION_PART.match(s, pos)
        if not match:
            raise ValueError(f"invalid duration {text!r}")
        total += float(match.group(1)) * _UNITS[match.group(2)]
        pos = match.end()
    return sign * total


def _trim_number(value: float) -> str:
    return f"{value:.9f}".rstrip("0").rstrip(".")


def format_duration(seconds: float) -> str:
    """Render seconds in the ``1h2m3s`` duration notation."""
    if seconds == 0:
        return "0s"
    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)
    if seconds < 1e-6:
        return f"{sign}{_trim_number(seconds * 1e9)}ns"
    if seconds < 1e-3:
        return f"{sign}{_trim_number(seconds * 1e6)}µs"
    if seconds < 1:
        return f"{sign}{_trim_number(seconds * 1e3)}ms"
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    out = sign
    if hours:
        out += f"{int(hours)}h"
    if hours or minutes:
        out += f"{int(minutes)}m"
    return out + f"{_trim_number(secs) or '0'}s"


@dataclass
class LogConfig:
    force_new: bool = False
    level: str = ""
    aging: float = 0.0
    colorful: bool = False


@dataclass
class Entry:
    name: str = ""
    hash: str = ""


@dataclass
class Version:
    entry_list: list[Entry] = field(default_factory=list)
    auto_load: bool = False


@dataclass
class Resource:
    language: str = ""
    font: str = ""


@dataclass
class Minecraft:
    version: Version = field(default_factory=Version)
    resource: Resource = field(default_factory=Resource)
    blessing_skin: list[str] = field(default_factory=list)


@dataclass
class Browserless:
    url: str = ""
    timeout: float = 0.0


@dataclass
class PlayerList:
    single_column_limit: int = 0
    header_text: list[str] = field(default_factory=list)
    footer_text: list[str] = field(default_factory=list)


@dataclass
class Api:
    browserless: Browserless = field(default_factory=Browserless)
    player_list: PlayerList = field(default_factory=PlayerList)


@dataclass
class Config:
    log: LogConfig = field(default_factory=LogConfig)
    minecraft: Minecraft = field(default_factory=Minecraft)
    api: Api = field(default_factory=Api)


@dataclass
class PlayerListRequestEntry:
    player_name: str
    player_uuid: str
    ping: int


@dataclass
class PlayerListRequestOptions:
    show_avatar: bool = False


@dataclass
class PlayerListRequest:
    version: str
    entry: list[PlayerListRequestEntry] = field(default_factory=list)
    options: PlayerListRequestOptions | None = None


@dataclass
class ClientInfo:
    sha1: str = ""
    size: int = 0
    url: str = ""


@dataclass
class Release:
    id: str
    package_info_url: str
    client_info: ClientInfo | None = None


def _section(data: Any) -> dict:
    return data if isinstance(data, dict) else {}


def config_from_dict(data: dict | None) -> Config:
    """Build a :class:`Config` from parsed YAML."""
    data = _section(data)
    log = _section(data.get("log"))
    mc = _section(data.get("minecraft"))
    ver = _section(mc.get("version"))
    res = _section(mc.get("resource"))
    api = _section(data.get("api"))
    bl = _section(api.get("browserless"))
    pl = _section(api.get("player-list"))
    return Config(
        log=LogConfig(
            force_new=bool(log.get("force-new", False)),
            level=str(log.get("level") or ""),
            aging=parse_duration(log["aging"]) if log.get("aging") is not None else 0.0,
            colorful=bool(log.get("colorful", False)),
        ),
        minecraft=Minecraft(
            version=Version(
                entry_list=[
                    Entry(name=str(e.get("name") or ""), hash=str(e.get("hash") or ""))
                    for e in (ver.get("entry-list") or [])
                    if isinstance(e, dict)
                ],
                auto_load=bool(ver.get("auto-load", False)),
            ),
            resource=Resource(
                language=str(res.get("language") or ""), font=str(res.get("font") or "")
            ),
            blessing_skin=[str(s) for s in (mc.get("blessing-skin") or [])],
        ),
        api=Api(
            browserless=Browserless(
                url=str(bl.get("url") or ""),
                timeout=parse_duration(bl["timeout"]) if bl.get("timeout") is not None else 0.0,
            ),
            player_list=PlayerList(
                single_column_limit=int(pl.get("single-column-limit") or 0),
                header_text=[str(s) for s in (pl.get("header-text") or [])],
                footer_text=[str(s) for s in (pl.get("footer-text") or [])],
            ),
        ),
    )


def _omit_empty(pairs: dict) -> dict:
    return {k: v for k, v in pairs.items() if v}


def config_to_dict(config: Config) -> dict:
    """Convert a :class:`Config` into YAML-ready data, leaving out empty optional fields."""
    log = config.log
    mc = config.minecraft
    api = config.api
    return {
        "log": _omit_empty(
            {
                "force-new": log.force_new,
                "level": log.level,
                "aging": format_duration(log.aging) if log.aging else "",
                "colorful": log.colorful,
            }
        ),
        "minecraft": {
            "version": {
                "entry-list": [_omit_empty({"name": e.name, "hash": e.hash}) for e in mc.version.entry_list],
                **_omit_empty({"auto-load": mc.version.auto_load}),
            },
            "resource": _omit_empty({"language": mc.resource.language, "font": mc.resource.font}),
            **_omit_empty({"blessing-skin": list(mc.blessing_skin)}),
        },
        "api": {
            "browserless": _omit_empty(
                {
                    "url": api.browserless.url,
                    "timeout": format_duration(api.browserless.timeout) if api.browserless.timeout else "",
                }
            ),
            "player-list": _omit_empty(
                {
                    "single-column-limit": api.player_list.single_column_limit,
                    "header-text": list(api.player_list.header_text),
                    "footer-text": list(api.player_list.footer_text),
                }
            ),
        },
    }


def _lookup(data: dict, key: str) -> Any:
    if key in data:
        return data[key]
    lowered = key.lower()
    for k, v in data.items():
        if isinstance(k, str) and k.lower() == lowered:
            return v
    return None


def parse_player_list_request(data: Any) -> PlayerListRequest:
    """Validate and build a player list request; raises ValueError on bad input."""
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    version = _lookup(data, "version")
    if not isinstance(version, str) or not version:
        raise ValueError("field 'version' is required")
    entries = []
    for raw in _lookup(data, "entry") or []:
        if not isinstance(raw, dict):
            raise ValueError("player entry must be an object")
        name = _lookup(raw, "player-name")
        uuid = _lookup(raw, "player-uuid")
        ping = _lookup(raw, "ping")
        if not isinstance(name, str) or not name:
            raise ValueError("field 'player-name' is required")
        if not isinstance(uuid, str) or not uuid:
            raise ValueError("field 'player-uuid' is required")
        if isinstance(ping, bool) or not isinstance(ping, int) or ping == 0:
            raise ValueError("field 'ping' is required")
        entries.append(PlayerListRequestEntry(name, uuid, ping))
    raw_options = _lookup(data, "options")
    options = None
    if isinstance(raw_options, dict):
        options = PlayerListRequestOptions(show_avatar=bool(_lookup(raw_options, "show-avatar")))
    return PlayerListRequest(version=version, entry=entries, options=options)


def client_info_from_dict(data: dict) -> ClientInfo:
    """Build client download info from a ``downloads.client`` object."""
    return ClientInfo(
        sha1=str(_lookup(data, "sha1") or ""),
        size=int(_lookup(data, "size") or 0),
        url=str(_lookup(data, "url") or ""),
    )