"""Release metadata and client assets from the official launcher service."""

from __future__ import annotations

import json
import logging

from mcviewgen.fileutil import file_exists, unzip_spec_entity
from mcviewgen.httputil import get, try_download_client
from mcviewgen.model import Release, client_info_from_dict
from mcviewgen.state import AppState, version_path
from mcviewgen.urls import VERSION_MANIFEST, format_url

log = logging.getLogger(__name__)


def fetch_mojang_versions(state: AppState) -> dict[str, Release]:
    """Fetch all release versions and record the latest one in ``state``."""
    data = json.loads(get(format_url(VERSION_MANIFEST)))
    latest = (data.get("latest") or {}).get("release", "") if isinstance(data, dict) else ""
    releases: dict[str, Release] = {}
    for item in (data.get("versions") or []) if isinstance(data, dict) else []:
        if not isinstance(item, dict) or not isinstance(item.get("type"), str):
            log.warning("Parse Mojang version failed, %r", item)
            continue
        if item["type"] != "release":
            continue
        vid, url = item.get("id"), item.get("url")
        if not isinstance(vid, str) or not isinstance(url, str):
            log.warning("Parse mojang version failed, %r", item)
            continue
        releases[vid] = Release(id=vid, package_info_url=url)
    log.info("Successfully loaded %d mojang releases, latest version: %s(Release)", len(releases), latest)
    state.latest_version = latest or ""
    return releases


def load_mojang_resource(state: AppState, version: str) -> None:
    """Download the client jar of ``version`` and extract its assets."""
    release = state.version_map.get(version)
    if release is None:
        raise KeyError(f"version {version} not found")
    package = json.loads(get(release.package_info_url))
    try:
        client = package["downloads"]["client"]
    except (KeyError, TypeError):
        raise KeyError("downloads.client not found in package info") from None
    info = client_info_from_dict(client)
    release.client_info = info

    folder_path = version_path(version)
    file_name = "client.jar"
    log.info("Start loading mojang client(%s)", version)
    need_recover = try_download_client(folder_path, file_name, info)

    unzip_folder = folder_path + "/assets"
    if not need_recover and file_exists(unzip_folder):
        log.info("Detect assets folder, no need to unzip client")
        return
    unzip_spec_entity(folder_path + "/" + file_name, "assets", unzip_folder)
    log.info("Extract mojang assets success")