from __future__ import annotations

import json
import logging

import pytest

from pests.config import DEFAULTS, load_config
from pests.errors import ConfigError
from pests.logging_config import setup_logging


def test_missing_file_gives_defaults(tmp_path) -> None:
    assert load_config(str(tmp_path / "nope.json")) == DEFAULTS


def test_file_overrides_known_keys(tmp_path, caplog) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"flood_after": 2.0, "quit_enabled": False, "colour": "red"}), encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="pests.config"):
        cfg = load_config(str(path))

    assert cfg["flood_after"] == 2.0
    assert cfg["quit_enabled"] is False
    assert cfg["flood_interval"] == DEFAULTS["flood_interval"]
    assert "colour" not in cfg
    assert "colour" in caplog.text


def test_defaults_are_not_mutated(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"window_title": "BARK"}), encoding="utf-8")

    load_config(str(path))

    assert DEFAULTS["window_title"] == "HELLO"


@pytest.mark.parametrize("text", ["{not json", "[1, 2]"])
def test_bad_file_raises(tmp_path, text: str) -> None:
    path = tmp_path / "config.json"
    path.write_text(text, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(str(path))


def test_setup_logging_does_not_stack_handlers(tmp_path) -> None:
    log_file = tmp_path / "pests.log"
    setup_logging(logging.DEBUG, str(log_file))
    setup_logging(logging.DEBUG, str(log_file))

    logger = logging.getLogger("pests")
    assert len(logger.handlers) == 2
    logger.info("hello file")
    for handler in logger.handlers:
        handler.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")



@pytest.mark.parametrize(
    "override",
    [
        {"pest_size": 200},
        {"pest_size": [200]},
        {"gravity": [0.0, "down"]},
        {"screen_margin": [10, 10, 20]},
        {"initial_pos": None},
        {"initial_velocity": [5.0, 0.0, 1.0]},
        {"flood_after": "5"},
        {"frame_budget": True},
        {"quit_enabled": 1},
        {"window_title": 7},
    ],
)
def test_wrong_value_shape_raises(tmp_path, override: dict) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(override), encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(str(path))


def test_int_accepted_where_float_expected(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"flood_after": 3, "gravity": [0, 4]}), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["flood_after"] == 3
    assert cfg["gravity"] == [0, 4]
