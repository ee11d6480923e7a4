"""Target URLs for the 3D skin viewer page."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlencode, urlsplit

from mcviewgen.state import SKINVIEW3D_URI


@dataclass
class RenderOption:
    base_url: str
    width: int = 0
    height: int = 0
    skin_path: str = ""
    cape_path: str = ""
    name_tag: str = ""


def build_target_url(option: RenderOption) -> str:
    """Build the viewer URL with its query parameters sorted by key."""
    base = option.base_url + SKINVIEW3D_URI
    parts = urlsplit(base)
    if parts.scheme and not parts.netloc and base.startswith(parts.scheme + "://"):
        raise ValueError(f"invalid base url {option.base_url!r}")
    params = {
        "nameTag": option.name_tag,
        "skinUrl": option.skin_path,
        "capeUrl": option.cape_path,
    }
    if option.width:
        params["width"] = str(option.width)
    if option.height:
        params["height"] = str(option.height)
    return base + "?" + urlencode(sorted(params.items()))