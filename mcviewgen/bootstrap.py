"""Start-up loading of versions, resources, language files, font and skins."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from mcviewgen import draw
from mcviewgen.fileutil import file_exists
from mcviewgen.httputil import download_file
from mcviewgen.icda import fetch_icda_versions, load_icda_resource
from mcviewgen.lang import LangRegistry
from mcviewgen.model import Entry, Release, Version
from mcviewgen.mojang import fetch_mojang_versions, load_mojang_resource
from mcviewgen.skins import load_local_skins
from mcviewgen.state import FONTS_PATH, AppState
from mcviewgen.urls import DEFAULT_FONT, format_url

log = logging.getLogger(__name__)

DEFAULT_FONT_NAME = "Minecraft.ttf"


def fetch_support_versions(state: AppState) -> dict[str, Release]:
    """Keep the releases that both the launcher service and the add-on support."""
    releases = fetch_mojang_versions(state)
    supported = set(fetch_icda_versions())
    version_map = {key: release for key, release in releases.items() if key in supported}
    log.debug("Load support VersionMap: %s", sorted(version_map))
    state.version_map = version_map
    return version_map


def set_default_version(state: AppState, version: Version) -> bool:
    """Use the latest release when no version entries are configured."""
    if not version.entry_list:
        version.entry_list = [Entry(name=state.latest_version, hash="")]
    return True


def load_resource(state: AppState, entry: Entry) -> None:
    """Load the client assets and add-on resources of one version."""
    load_mojang_resource(state, entry.name)
    load_icda_resource(state, entry)


def load_resource_list(state: AppState, entries: list[Entry]) -> None:
    """Load the resources of all entries in parallel; failures are logged."""

    def run(entry: Entry) -> None:
        try:
            load_resource(state, entry)
        except Exception as exc:  # one version failing must not stop the others
            log.error("Can't get resource map, version(%s) load skipped, %s", entry.name, exc)

    with ThreadPoolExecutor(max_workers=max(1, len(entries))) as pool:
        list(pool.map(run, entries))


def load_lang_version_map(registry: LangRegistry, lang_name: str, entries: list[Entry]) -> list[str]:
    """Load ``lang_name`` for each version; return the versions that succeeded."""
    loaded = []
    for entry in entries:
        try:
            registry.load(entry.name, lang_name)
        except (OSError, ValueError) as exc:
            log.error(
                "Failed to load %s (version %s) language file, skipped, %s", lang_name, entry.name, exc
            )
            continue
        loaded.append(entry.name)
    log.info("Success load language file %s (versions %s)", lang_name, loaded)
    return loaded


def load_font(font_name: str = "") -> bool:
    """Load the named font from the fonts folder, downloading the default one if needed.

    A missing font other than the default raises FileNotFoundError.
    """
    font_name = font_name or DEFAULT_FONT_NAME
    font_path = FONTS_PATH + "/" + font_name
    if not file_exists(font_path):
        if font_name != DEFAULT_FONT_NAME:
            raise FileNotFoundError(f"Can't find font {font_name} in path({font_path})")
        url = format_url(DEFAULT_FONT)
        try:
            download_file(font_path, url, False, True)
        except Exception as exc:
            log.error("Failed to download default font from(%s), %s", url, exc)
            return False
    try:
        draw.load_font(font_path)
    except OSError as exc:
        log.error("Failed to load font, %s", exc)
        return False
    log.info("Font %s load success", font_name)
    return True


def init_loader(state: AppState) -> LangRegistry:
    """Run the whole start-up loading sequence and return the language tables."""
    fetch_support_versions(state)
    minecraft = state.config.minecraft
    version = minecraft.version
    if set_default_version(state, version):
        load_resource_list(state, version.entry_list)
    registry = LangRegistry()
    load_lang_version_map(registry, minecraft.resource.language, version.entry_list)
    load_font(minecraft.resource.font)
    load_local_skins(state)
    return registry