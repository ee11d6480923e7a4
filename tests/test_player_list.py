import pytest
from PIL import Image, ImageFont

from mcviewgen.component import Component
from mcviewgen.model import PlayerListRequest, PlayerListRequestEntry
from mcviewgen.player_list import draw_single_player_row, get_player_list
from mcviewgen.skin import Skin
from mcviewgen.state import AppState
from mcviewgen.texture import Asset121

BLUE = (0, 0, 255, 255)
RED = (255, 0, 0, 255)


@pytest.fixture
def setup(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    icons = tmp_path / "config/assets/1.21.1/assets/minecraft/textures/gui/sprites/icon"
    icons.mkdir(parents=True)
    Image.new("RGBA", (10, 8), RED).save(icons / "ping_5.png")
    state = AppState()
    state.skin_map["uuid-1"] = Skin(Image.new("RGBA", (64, 64), BLUE), False)
    return state, Asset121("1.21.1")


def test_no_players_is_an_error():
    with pytest.raises(ValueError, match="no player data found"):
        get_player_list(AppState(), PlayerListRequest(version="1.21.1", entry=[]))


def test_request_without_registered_version():
    request = PlayerListRequest(
        version="",
        entry=[PlayerListRequestEntry(player_name="[OP] IllTamer", player_uuid="", ping=50)],
    )
    with pytest.raises(KeyError):
        get_player_list(AppState(), request)


def test_row_has_head_and_ping_icon(setup):
    state, manager = setup
    player = PlayerListRequestEntry("Steve", "uuid-1", 50)
    row = draw_single_player_row(
        state, player, Component(""), 0.0, ImageFont.load_default(), manager
    )
    assert row.size == (38, 18)
    assert row.getpixel((5, 5)) == BLUE
    assert row.getpixel((20, 5)) == RED


def test_row_width_follows_name_width(setup):
    state, manager = setup
    player = PlayerListRequestEntry("Steve", "uuid-1", 50)
    row = draw_single_player_row(
        state, player, Component("§aSteve"), 40.0, ImageFont.load_default(), manager
    )
    assert row.size == (78, 18)
    assert row.getpixel((5, 5)) == BLUE


def test_row_without_ping_icon_fails(setup):
    state, manager = setup
    player = PlayerListRequestEntry("Steve", "uuid-1", 2000)
    with pytest.raises(OSError):
        draw_single_player_row(state, player, Component("Steve"), 30.0, ImageFont.load_default(), manager)