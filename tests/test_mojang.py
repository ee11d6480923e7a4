import hashlib
import io
import json
import os
import zipfile
from unittest import mock

import pytest

from mcviewgen import mojang
from mcviewgen.model import Release
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


MANIFEST = {
    "latest": {"release": "1.21.1"},
    "versions": [
        {"id": "1.21.1", "type": "release", "url": "https://example.com/1.21.1.json"},
        {"id": "24w01a", "type": "snapshot", "url": "https://example.com/snap.json"},
        {"id": "1.21", "type": "release", "url": "https://example.com/1.21.json"},
    ],
}


def test_fetch_mojang_versions():
    state = AppState()
    routes = {mojang.VERSION_MANIFEST: json.dumps(MANIFEST).encode()}
    with mock.patch("requests.get", side_effect=router(routes)):
        releases = mojang.fetch_mojang_versions(state)
    assert set(releases) == {"1.21.1", "1.21"}
    assert releases["1.21"].package_info_url == "https://example.com/1.21.json"
    assert state.latest_version == "1.21.1"


def test_load_unknown_version():
    with pytest.raises(KeyError):
        mojang.load_mojang_resource(AppState(), "1.21.1")


def test_load_mojang_resource(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        zf.writestr("assets/minecraft/lang/en_us.json", "{}")
        zf.writestr("data/other.txt", "x")
    jar = buf.getvalue()
    package = {
        "downloads": {
            "client": {"sha1": hashlib.sha1(jar).hexdigest(), "size": len(jar), "url": "https://example.com/c.jar"}
        }
    }
    state = AppState()
    state.version_map["1.21.1"] = Release("1.21.1", "https://example.com/1.21.1.json")
    routes = {"https://example.com/1.21.1.json": json.dumps(package).encode(), "https://example.com/c.jar": jar}
    with mock.patch("requests.get", side_effect=router(routes)):
        mojang.load_mojang_resource(state, "1.21.1")
    base = "config/assets/1.21.1"
    assert os.path.isfile(f"{base}/assets/minecraft/lang/en_us.json")
    assert not os.path.exists(f"{base}/assets/data")
    assert state.version_map["1.21.1"].client_info.url == "https://example.com/c.jar"