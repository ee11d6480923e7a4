"""Resource packs published for the chat add-on plugin."""

from __future__ import annotations

import json
import logging
import os
import posixpath
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from mcviewgen.conf import update_config
from mcviewgen.httputil import download_file, get, is_response_error
from mcviewgen.model import Entry
from mcviewgen.state import PARENT_PATH, AppState, version_path
from mcviewgen.urls import ICDA_RESOURCE, ICDA_VERSIONS, format_url

log = logging.getLogger(__name__)


def _as_json(data: bytes | dict) -> Any:
    return data if isinstance(data, dict) else json.loads(data)


def _section(data: bytes | dict, key: str) -> dict:
    section = _as_json(data).get(key)
    if not isinstance(section, dict):
        raise KeyError(f"{key} not found")
    return section


def fetch_icda_versions() -> list[str]:
    """Game versions the add-on publishes resources for."""
    data = json.loads(get(format_url(ICDA_VERSIONS)))
    versions = data.get("versions") if isinstance(data, dict) else None
    if not isinstance(versions, list):
        raise KeyError("versions not found")
    supports = []
    for value in versions:
        if not isinstance(value, str):
            log.warning("Parse ICDA version failed, %r", value)
            continue
        supports.append(value)
    return supports


def do_downloaded_entries(version_name: str, data: bytes | dict) -> None:
    """Download every listed file into its folder under the version path, in parallel."""
    base = version_path(version_name)
    jobs = [
        (base + str(folder) + "/" + posixpath.basename(url), url)
        for url, folder in _section(data, "downloaded-entries").items()
    ]

    def fetch(job: tuple[str, str]) -> None:
        file_path, url = job
        try:
            download_file(file_path, url, True, False)
        except Exception as exc:  # a failed file does not stop the others
            log.warning("Download file to path(%s) failed with url(%s), %s", file_path, url, exc)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(fetch, jobs))


def do_rename_entries(version_name: str, data: bytes | dict) -> None:
    """Move files inside the version path as listed."""
    base = version_path(version_name)
    for source, target in _section(data, "rename-entries").items():
        source_path = base + "/" + source
        target_path = base + "/" + str(target)
        try:
            os.rename(source_path, target_path)
        except OSError as exc:
            log.warning("Move file from '%s' to '%s' failed, %s", source_path, target_path, exc)


def load_icda_resource(state: AppState, entry: Entry) -> None:
    """Fetch the resources of ``entry`` unless its recorded hash is current."""
    body = get(format_url(ICDA_RESOURCE, entry.name))
    if is_response_error(body):
        raise RuntimeError(body.decode("utf-8", "replace"))
    data = json.loads(body)
    digest = data.get("hash")
    if not isinstance(digest, str):
        raise KeyError("hash not found")
    if entry.hash == digest:
        log.info("ICDA resource with hash %s has been loaded", digest)
        return
    log.info("Start loading ICDA resource version(%s) with hash(%s)", entry.name, digest)
    do_downloaded_entries(entry.name, data)
    log.info("ICDA Resource version(%s) download entries success", entry.name)
    do_rename_entries(entry.name, data)
    log.info("ICDA Resource version(%s) rename entries success", entry.name)

    entry.hash = digest
    try:
        update_config(state.config, PARENT_PATH)
    except OSError as exc:
        log.warning("Can't save config file, %s", exc)
        return
    log.info("Updated config file with hash(%s)", digest)