import pytest

from mcviewgen.model import (
    Config,
    Entry,
    client_info_from_dict,
    config_from_dict,
    config_to_dict,
    format_duration,
    parse_duration,
    parse_player_list_request,
)


def test_parse_duration_units():
    assert parse_duration("1h30m") == 5400.0
    assert parse_duration("0") == 0.0


def test_parse_duration_rejects_garbage():
    with pytest.raises(ValueError):
        parse_duration("ten minutes")


@pytest.mark.parametrize("text", ["72h", "1m30s", "15s", "500ms"])
def test_duration_round_trip(text):
    assert parse_duration(format_duration(parse_duration(text))) == pytest.approx(parse_duration(text))


def test_config_round_trip():
    cfg = Config()
    cfg.log.level = "debug"
    cfg.log.aging = parse_duration("72h")
    cfg.minecraft.version.entry_list.append(Entry(name="1.21.1", hash="h"))
    cfg.api.player_list.header_text = ["top"]
    assert config_from_dict(config_to_dict(cfg)) == cfg


def test_config_to_dict_omits_empty_entry_fields():
    cfg = Config()
    cfg.minecraft.version.entry_list.append(Entry(name="1.21"))
    data = config_to_dict(cfg)
    assert data["minecraft"]["version"]["entry-list"] == [{"name": "1.21"}]
    assert data["log"] == {}


def test_parse_request_ok():
    req = parse_player_list_request(
        {"version": "1.21.1", "entry": [{"player-name": "A", "player-uuid": "u", "ping": 50}]}
    )
    assert req.version == "1.21.1"
    assert [e.player_name for e in req.entry] == ["A"]
    assert req.entry[0].ping == 50


def test_parse_request_requires_version():
    with pytest.raises(ValueError):
        parse_player_list_request({"entry": []})


def test_parse_request_requires_uuid():
    with pytest.raises(ValueError):
        parse_player_list_request({"version": "1.21", "entry": [{"player-name": "A", "ping": 5}]})


def test_client_info_from_dict():
    info = client_info_from_dict({"sha1": "abc", "size": 10, "url": "http://localhost/c.jar"})
    assert (info.sha1, info.size, info.url) == ("abc", 10, "http://localhost/c.jar")