# -*- coding: utf-8 -*-
import json
import logging

import pytest

from vecmat import Vec3
from vecmat.utils import Config, init_logger, logger, set_level
from vecmat.utils.config import DEFAULT_CONFIG


def test_defaults_live_in_memory(tmp_path, monkeypatch):
    # файл в рабочей директории не читается и не создаётся
    monkeypatch.chdir(tmp_path)
    (tmp_path / "vecmat.json").write_text(json.dumps({"epsilon": 0.5}), encoding="utf-8")
    monkeypatch.setenv("VECMAT_CONFIG", str(tmp_path / "vecmat.json"))
    cfg = Config()
    assert cfg.path is None
    assert cfg["epsilon"] == DEFAULT_CONFIG["epsilon"]
    assert cfg["log_level"] == "WARNING"
    cfg["epsilon"] = 1e-3
    assert cfg["epsilon"] == 1e-3
    assert json.loads((tmp_path / "vecmat.json").read_text(encoding="utf-8")) == {"epsilon": 0.5}


def test_isclose_default_ignores_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "vecmat.json").write_text(json.dumps({"epsilon": 0.1}), encoding="utf-8")
    assert not Vec3(1.0, 1.0, 1.0).isclose(Vec3(1.05, 1.0, 1.0))


def test_singleton():
    assert Config() is Config()


def test_load_from_explicit_path(config_path):
    config_path.write_text(json.dumps({"epsilon": 0.5}), encoding="utf-8")
    cfg = Config.load(str(config_path))
    assert cfg is Config()
    assert cfg["epsilon"] == 0.5
    assert cfg["log_level"] == "WARNING"


def test_missing_file_means_defaults(config_path):
    cfg = Config(str(config_path))
    assert cfg["epsilon"] == DEFAULT_CONFIG["epsilon"]
    assert not config_path.exists()


def test_epsilon_drives_isclose(config_path):
    config_path.write_text(json.dumps({"epsilon": 0.1}), encoding="utf-8")
    Config.load(str(config_path))
    assert Vec3(1.0, 1.0, 1.0).isclose(Vec3(1.05, 1.0, 1.0))
    assert not Vec3(1.0, 1.0, 1.0).isclose(Vec3(1.05, 1.0, 1.0), eps=0.01)


def test_invalid_json_falls_back(config_path, caplog):
    config_path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="vecmat"):
        cfg = Config.load(str(config_path))
    assert cfg["epsilon"] == DEFAULT_CONFIG["epsilon"]
    assert "Failed to read config" in caplog.text


def test_setitem_saves(config_path):
    cfg = Config(str(config_path))
    cfg["epsilon"] = 1e-3
    assert json.loads(config_path.read_text(encoding="utf-8"))["epsilon"] == 1e-3
    assert Config.load(str(config_path))["epsilon"] == 1e-3


def test_init_logger_uses_config_level(config_path):
    config_path.write_text(json.dumps({"log_level": "debug"}), encoding="utf-8")
    Config.load(str(config_path))
    try:
        assert init_logger() is logger
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(logging.NOTSET)


def test_unknown_level():
    with pytest.raises(ValueError):
        set_level("LOUD")


def test_rejected_shape_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="vecmat"):
        with pytest.raises(ValueError):
            Vec3.from_array([1, 2])
    assert "rejected input" in caplog.text
