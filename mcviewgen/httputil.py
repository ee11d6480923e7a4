"""HTTP helpers: fetching, error detection and file downloads."""

from __future__ import annotations

import contextlib
import json
import logging
import os

import requests
from tqdm import tqdm

from mcviewgen.fileutil import calculate_sha1, file_exists
from mcviewgen.model import ClientInfo

log = logging.getLogger(__name__)

_TIMEOUT = 60


def get(url: str) -> bytes:
    """Fetch ``url`` and return the body; raises on a non-2xx status."""
    resp = requests.get(url, timeout=_TIMEOUT)
    try:
        if resp.status_code < 200 or resp.status_code >= 300:
            raise RuntimeError(f"unexpect response code: {resp.status_code}")
        return resp.content
    finally:
        resp.close()


def is_response_error(body: bytes) -> bool:
    """True if the JSON body carries a string ``error`` field."""
    try:
        data = json.loads(body)
    except (ValueError, TypeError):
        return False
    if not isinstance(data, dict) or not isinstance(data.get("error"), str):
        return False
    log.debug("Request failed with body: %s", body.decode("utf-8", "replace"))
    return True


def make_parent_dirs(file_path: str) -> None:
    """Create the directories that will hold ``file_path``."""
    directory = os.path.dirname(file_path) or "."
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as exc:
        raise OSError(f"failed to create parent directories: {exc}") from exc


def download_file(file_path: str, url: str, recover: bool = False, show_bar: bool = False) -> None:
    """Download ``url`` to ``file_path``; an existing file is kept unless ``recover``."""
    if not recover and file_exists(file_path):
        return
    make_parent_dirs(file_path)
    with contextlib.suppress(FileNotFoundError):
        os.remove(file_path)
    resp = requests.get(url, stream=True, timeout=_TIMEOUT)
    try:
        total = int(resp.headers.get("content-length") or 0) or None
        with open(file_path, "wb") as out, tqdm(
            total=total,
            unit="B",
            unit_scale=True,
            desc=f"Downloading {os.path.basename(file_path)}",
            disable=not show_bar,
        ) as bar:
            for chunk in resp.iter_content(chunk_size=65536):
                if chunk:
                    out.write(chunk)
                    bar.update(len(chunk))
    finally:
        resp.close()


def try_download_client(folder_path: str, file_name: str, info: ClientInfo) -> bool:
    """Ensure the client jar is present and valid; return True if it was (re)downloaded."""
    file_path = folder_path + "/" + file_name
    if file_exists(file_path):
        try:
            digest = calculate_sha1(file_path)
        except OSError:
            digest = ""
        if digest == info.sha1:
            log.debug("File %s exists, sha1 verification passed", file_path)
            return False
        log.debug("File %s sha1 verification failed, download again", file_path)
        with contextlib.suppress(OSError):
            os.remove(file_path)
    os.makedirs(folder_path, exist_ok=True)
    download_file(file_path, info.url, True, True)
    return True