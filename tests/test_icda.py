import json
import os
from unittest import mock

import pytest

from mcviewgen import icda
from mcviewgen.model import Entry
from mcviewgen.state import AppState


class FakeResponse:
    def __init__(self, content=b"", status=200):
        self.content = content
        self.status_code = status
        self.headers = {}

    def iter_content(self, chunk_size=None):
        yield self.content

    def close(self):
        pass


def router(routes):
    def fake_get(url, **kwargs):
        if url in routes:
            return FakeResponse(routes[url])
        return FakeResponse(b"", 404)

    return fake_get


ICDA_BASE = "https://api.loohpjames.com/spigot/plugins/interactivechatdiscordsrvaddon"
VERSIONS_URL = ICDA_BASE + "/versions"
RESOURCE_URL = ICDA_BASE + "?minecraftVersion=1.21.1"
RESOURCE = {
    "hash": "h2",
    "downloaded-entries": {"https://example.com/files/a.png": "/sub"},
    "rename-entries": {"sub/a.png": "sub/b.png"},
}


def test_fetch_icda_versions():
    routes = {VERSIONS_URL: json.dumps({"versions": ["1.21", "1.21.1", 3]}).encode()}
    with mock.patch("requests.get", side_effect=router(routes)):
        assert icda.fetch_icda_versions() == ["1.21", "1.21.1"]


def test_same_hash_skips_download(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    entry = Entry(name="1.21.1", hash="h2")
    routes = {RESOURCE_URL: json.dumps(RESOURCE).encode()}
    with mock.patch("requests.get", side_effect=router(routes)):
        icda.load_icda_resource(AppState(), entry)
    assert entry.hash == "h2"
    assert not os.path.exists("config/assets")


def test_load_resource_downloads_and_renames(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    state = AppState()
    entry = Entry(name="1.21.1", hash="h1")
    state.config.minecraft.version.entry_list.append(entry)
    routes = {RESOURCE_URL: json.dumps(RESOURCE).encode(), "https://example.com/files/a.png": b"png"}
    with mock.patch("requests.get", side_effect=router(routes)):
        icda.load_icda_resource(state, entry)
    base = "config/assets/1.21.1/sub"
    assert not os.path.exists(f"{base}/a.png")
    with open(f"{base}/b.png", "rb") as fh:
        assert fh.read() == b"png"
    assert entry.hash == "h2"
    with open("config/config.yml", encoding="utf-8") as fh:
        assert "h2" in fh.read()


def test_error_response_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    routes = {RESOURCE_URL: b'{"error":"unsupported"}'}
    with mock.patch("requests.get", side_effect=router(routes)):
        with pytest.raises(RuntimeError, match="unsupported"):
            icda.load_icda_resource(AppState(), Entry(name="1.21.1"))


def test_rename_entries_missing_section():
    with pytest.raises(KeyError):
        icda.do_rename_entries("1.21.1", b'{"hash":"x"}')