"""Texture lookup inside extracted game assets."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from PIL import Image

from mcviewgen.imaging import cut, read_image, resize
from mcviewgen.state import version_path

log = logging.getLogger(__name__)

MINECRAFT_PATH = "minecraft:"
ROOT = "/assets/minecraft/textures"
IMAGE_SUFFIX = ".png"
ICON = ROOT + "/gui/sprites/icon"
CONTAINER = ROOT + "/gui/container"
ICDA_CONTAINER = ROOT + "/interactivechatdiscordsrvaddon/gui"


@dataclass
class Texture:
    path: str
    image: Image.Image | None = None

    def load(self) -> Image.Image:
        """Read the image from disk and keep it."""
        self.image = read_image(self.path)
        return self.image


class Asset121:
    """Texture layout of the 1.21 game versions."""

    def __init__(self, version: str) -> None:
        self.version_path = version_path(version)

    def _texture(self, *parts: str) -> Texture:
        return Texture(self.version_path + "".join(parts))

    def get_texture(self, minecraft_path: str) -> Image.Image:
        """Load a texture named like ``minecraft:block/oak_planks``."""
        if not minecraft_path.startswith(MINECRAFT_PATH):
            raise ValueError("unmatched minecraft texture format")
        rest = minecraft_path[len(MINECRAFT_PATH):]
        return self._texture(ROOT, "/", rest, IMAGE_SUFFIX).load()

    def get_player_inventory(self) -> Image.Image:
        """The inventory background, preferring the ICDA texture."""
        icda = self._texture(ICDA_CONTAINER, "/player_inventory", IMAGE_SUFFIX)
        try:
            icda.load()
        except OSError:
            fallback = self._texture(CONTAINER, "/inventory", IMAGE_SUFFIX)
            log.warning("There's no ICDA files found, use origin resource with path(%s)", fallback.path)
            return resize(cut(fallback.load(), 0, 0, 176, 166), 176 * 2, 166 * 2)
        return cut(icda.image, 2, 2, 354, 334)

    def get_ping(self, ping: int) -> Image.Image:
        """The connection icon for ``ping`` milliseconds; negative means unknown."""
        if ping < 0:
            name = "/ping_unknown"
        elif ping < 150:
            name = "/ping_5"
        elif ping < 300:
            name = "/ping_4"
        elif ping < 600:
            name = "/ping_3"
        elif ping < 1000:
            name = "/ping_2"
        else:
            name = "/ping_1"
        return self._texture(ICON, name, IMAGE_SUFFIX).load()


ASSET_MAP: dict[str, Asset121] = {
    "1.21": Asset121("1.21"),
    "1.21.1": Asset121("1.21.1"),
}


def get_asset_manager(version: str) -> Asset121:
    """The texture manager registered for ``version``."""
    try:
        return ASSET_MAP[version]
    except KeyError:
        raise KeyError(f"no asset with registered version({version}) found") from None