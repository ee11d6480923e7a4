"""Loading and saving of the YAML configuration file."""

from __future__ import annotations

import logging
import os

import yaml

from mcviewgen.fileutil import create_file, file_exists
from mcviewgen.model import Config, config_from_dict, config_to_dict
from mcviewgen.state import PARENT_PATH

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.yml"


def _dump(config: Config) -> str:
    return yaml.safe_dump(config_to_dict(config), sort_keys=False, allow_unicode=True)


def load_config(file_name: str, file_folder: str) -> tuple[bool, Config]:
    """Load ``file_folder + file_name``, writing a default first if it is missing.

    Returns whether the file already existed, and the parsed configuration.
    """
    file_path = file_folder + file_name
    exists = file_exists(file_path)
    if not exists:
        log.warning("Can't find `%s`, generating default configuration", file_name)
        os.makedirs(file_folder or ".", exist_ok=True)
        create_file(file_path, _dump(Config()).encode("utf-8"))
    with open(file_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    return exists, config_from_dict(data)


def update_config(config: Config, parent_path: str = PARENT_PATH) -> None:
    """Write ``config`` back to the configuration file."""
    with open(parent_path + "/" + CONFIG_FILE_NAME, "w", encoding="utf-8") as fh:
        fh.write(_dump(config))


def init_config(parent_path: str = PARENT_PATH) -> Config:
    """Load the application configuration from ``parent_path``."""
    _, config = load_config(CONFIG_FILE_NAME, parent_path + "/")
    return config