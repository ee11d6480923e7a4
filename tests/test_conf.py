import pytest
import yaml

from mcviewgen import conf
from mcviewgen.model import Config, Entry


def test_load_config_generates_default(tmp_path):
    folder = str(tmp_path / "cfg") + "/"
    exists, config = conf.load_config("config.yml", folder)
    assert exists is False
    assert (tmp_path / "cfg" / "config.yml").is_file()
    assert config == Config()


def test_load_existing_config(tmp_path):
    (tmp_path / "config.yml").write_text(
        "log:\n  level: debug\nminecraft:\n  version:\n    entry-list:\n      - name: '1.21.1'\n",
        encoding="utf-8",
    )
    exists, config = conf.load_config("config.yml", str(tmp_path) + "/")
    assert exists is True
    assert config.log.level == "debug"
    assert config.minecraft.version.entry_list == [Entry(name="1.21.1")]


def test_update_config_round_trip(tmp_path):
    config = Config()
    config.minecraft.version.entry_list.append(Entry(name="1.21", hash="abc"))
    config.api.player_list.header_text = ["top"]
    conf.update_config(config, str(tmp_path))
    _, loaded = conf.load_config("config.yml", str(tmp_path) + "/")
    assert loaded == config


def test_init_config(tmp_path):
    config = conf.init_config(str(tmp_path))
    assert config == Config()
    assert (tmp_path / "config.yml").exists()


def test_invalid_yaml_raises(tmp_path):
    (tmp_path / "config.yml").write_text("log: [unclosed\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        conf.load_config("config.yml", str(tmp_path) + "/")