from mcviewgen.state import ASSETS_PATH, SKINS_PATH, AppState, skin_path, version_path


def test_version_path_is_under_assets():
    path = version_path("1.21.1")
    assert path.startswith(ASSETS_PATH + "/")
    assert path.endswith("/1.21.1")


def test_skin_path_joins_uuid_and_suffix():
    assert skin_path("abc", ".png") == SKINS_PATH + "/abc.png"


def test_app_state_maps_are_independent():
    first, second = AppState(), AppState()
    first.skin_map["x"] = 1
    assert second.skin_map == {}
    assert first.latest_version == ""