import os

import pytest
from PIL import Image

from mcviewgen import texture

BASE = "config/assets/1.21.1/assets/minecraft/textures"


def _png(rel, size, color=(1, 2, 3, 255)):
    os.makedirs(os.path.dirname(rel), exist_ok=True)
    Image.new("RGBA", size, color).save(rel)


@pytest.fixture
def assets(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name, size in [("ping_unknown", (3, 3)), ("ping_5", (5, 5)), ("ping_4", (4, 4)), ("ping_1", (1, 1))]:
        _png(f"{BASE}/gui/sprites/icon/{name}.png", size)
    _png(f"{BASE}/block/dark_oak_planks.png", (16, 16), (60, 40, 20, 255))
    return tmp_path


def test_mapping(assets):
    image = texture.Asset121("1.21.1").get_ping(-1)
    assert image.size == (3, 3)


def test_get_texture(assets):
    image = texture.Asset121("1.21.1").get_texture("minecraft:block/dark_oak_planks")
    assert image.size == (16, 16)
    assert image.convert("RGBA").getpixel((0, 0)) == (60, 40, 20, 255)


def test_asset_manager(assets):
    manager = texture.get_asset_manager("1.21.1")
    assert manager.get_ping(200).size == (4, 4)
    assert manager.get_ping(50).size == (5, 5)
    assert manager.get_ping(5000).size == (1, 1)


def test_unknown_version():
    with pytest.raises(KeyError):
        texture.get_asset_manager("1.8")


def test_bad_texture_name(assets):
    with pytest.raises(ValueError):
        texture.Asset121("1.21.1").get_texture("block/dark_oak_planks")


def test_missing_texture(assets):
    with pytest.raises(OSError):
        texture.Asset121("1.21.1").get_ping(400)


def test_inventory_icda(assets):
    _png(f"{BASE}/interactivechatdiscordsrvaddon/gui/player_inventory.png", (360, 340))
    assert texture.Asset121("1.21.1").get_player_inventory().size == (352, 332)


def test_inventory_fallback(assets):
    _png(f"{BASE}/gui/container/inventory.png", (256, 256))
    assert texture.Asset121("1.21.1").get_player_inventory().size == (352, 332)