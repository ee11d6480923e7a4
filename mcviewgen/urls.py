"""Remote endpoint templates."""

from __future__ import annotations

GET_SKIN = "%s/skin/%s.png"

ICDA = "https://api.loohpjames.com/spigot/plugins/interactivechatdiscordsrvaddon"
ICDA_VERSIONS = ICDA + "/versions"
ICDA_RESOURCE = ICDA + "?minecraftVersion=%s"

IUNLIMIT = "https://pan.illtamer.com/d"
DEFAULT_FONT = IUNLIMIT + "/share/software/Minecraft-AE(Chinese).ttf?sign=_tDVL3VKw4Ix8uxdbnkw5HP8VXTr0IDYUVTzbxRjCaI=:0"

VERSION_MANIFEST = "https://launchermeta.mojang.com/mc/game/version_manifest.json"
INFO_UUID = "https://api.mojang.com/users/profiles/minecraft/%s"
INFO_TEXTURE = "https://sessionserver.mojang.com/session/minecraft/profile/%s"


def format_url(template: str, *args: object) -> str:
    """Fill a URL template; without arguments the template is returned unchanged."""
    if not args:
        return template
    return template % args