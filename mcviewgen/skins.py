"""Loading of player skins from disk, the official profile service and skin sites."""

from __future__ import annotations

import base64
import json
import logging
import os

from mcviewgen.fileutil import file_exists
from mcviewgen.httputil import download_file, get, make_parent_dirs
from mcviewgen.skin import Skin
from mcviewgen.state import SKINS_PATH, AppState, skin_path
from mcviewgen.urls import GET_SKIN, INFO_TEXTURE, INFO_UUID, format_url

log = logging.getLogger(__name__)

SKIN_SUFFIX = ".png"
SKIN_DELIMITER = "!!"

_FETCH_ERRORS = (OSError, ValueError, KeyError, TypeError, RuntimeError)


def _cached(state: AppState, uuid: str) -> Skin | None:
    with state.lock:
        return state.skin_map.get(uuid)


def _remember(state: AppState, uuid: str, skin: Skin) -> None:
    with state.lock:
        state.skin_map[uuid] = skin


def load_local_skins(state: AppState) -> dict[str, Skin]:
    """Load every cached skin file named ``<uuid>!!<slim>.png`` into ``state``."""
    if not file_exists(SKINS_PATH):
        os.makedirs(SKINS_PATH, exist_ok=True)
        log.info("Init skins folder, %s", SKINS_PATH)

    skins: dict[str, Skin] = {}
    for root, _dirs, files in os.walk(SKINS_PATH):
        for file_name in files:
            path = os.path.join(root, file_name)
            stem = file_name[: -len(SKIN_SUFFIX)] if file_name.endswith(SKIN_SUFFIX) else file_name
            parts = stem.split(SKIN_DELIMITER)
            if len(parts) < 2:
                log.warning("Load skin path(%s) failed, unexpected file name", path)
                continue
            try:
                skin = load_skin_by_file(path, parts[1] == "true")
            except (OSError, ValueError) as exc:
                log.warning("Load skin path(%s) failed, %s", path, exc)
                continue
            skins[parts[0]] = skin
    log.info("Success load %d player skins", len(skins))
    with state.lock:
        state.skin_map = skins
    return skins


def _load_from_profile_service(state: AppState, name: str, cache: bool) -> Skin:
    body = json.loads(get(format_url(INFO_UUID, name)))
    profile_id = body.get("id") if isinstance(body, dict) else None
    if not isinstance(profile_id, str):
        raise KeyError("id not found in profile")
    if cache:
        skin = _cached(state, profile_id)
        if skin is not None:
            return skin
    return load_skin_by_uuid(state, profile_id, cache)


def load_skin_by_name(state: AppState, name: str, uuid: str = "", cache: bool = True) -> Skin:
    """Load a player's skin by name.

    When the official service fails and ``uuid`` is given, the configured
    skin sites are tried in order.
    """
    if cache and uuid:
        skin = _cached(state, uuid)
        if skin is not None:
            return skin

    try:
        return _load_from_profile_service(state, name, cache)
    except _FETCH_ERRORS as exc:
        error = exc
    if not uuid:
        raise error

    for site in state.config.minecraft.blessing_skin:
        url = format_url(GET_SKIN, site, name)
        try:
            skin = load_skin_by_url(url, uuid, False)
        except _FETCH_ERRORS as exc:
            log.warning(
                "Try to get player(name: %s, uuid: %s) skin failed from %s, %s", name, uuid, url, exc
            )
            continue
        _remember(state, uuid, skin)
        return skin
    raise error


def load_skin_by_uuid(state: AppState, uuid: str, cache: bool = True) -> Skin:
    """Load the skin of a profile id such as ``57876712e6a64cb2ad6419137f209beb``."""
    body = json.loads(get(format_url(INFO_TEXTURE, uuid)))
    properties = body.get("properties") if isinstance(body, dict) else None
    if not isinstance(properties, list):
        raise KeyError("properties not found in profile")
    for prop in properties:
        try:
            decoded = json.loads(base64.b64decode(prop["value"]))
            skin_info = decoded["textures"]["SKIN"]
            skin_url = skin_info["url"]
            if not isinstance(skin_url, str):
                raise TypeError("skin url is not a string")
        except (KeyError, TypeError, ValueError) as exc:
            log.error("Failed to decode profile(uuid: %s) textures, %s", uuid, exc)
            continue
        metadata = skin_info.get("metadata")
        model = metadata.get("model", "") if isinstance(metadata, dict) else ""
        skin = load_skin_by_url(skin_url, uuid, model == "slim")
        if cache:
            _remember(state, uuid, skin)
        return skin
    raise ValueError(f"no skin texture found for profile {uuid}")


def load_skin_by_url(url: str, uuid: str, slim: bool) -> Skin:
    """Download a skin into the skin cache folder and load it."""
    flag = "true" if slim else "false"
    path = skin_path(f"{uuid}{SKIN_DELIMITER}{flag}", SKIN_SUFFIX)
    make_parent_dirs(path)
    download_file(path, url, True, False)
    return load_skin_by_file(path, slim)


def load_skin_by_file(skin_path: str, slim: bool) -> Skin:
    """Load a skin texture file."""
    return Skin.from_file(skin_path, slim)