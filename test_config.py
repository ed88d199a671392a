# -*- coding: utf-8 -*-
import json
import logging

import pytest

from gmath import Vector, F64
from gmath.utils.config import Config, DEFAULT_CONFIG
from gmath.utils.logger import logger


def _write(directory, payload):
    (directory / "gmath.json").write_text(payload, encoding="utf-8")


def test_defaults_without_file(clean_config):
    cfg = Config()
    assert cfg["log_level"] == "INFO"
    assert cfg.get("missing", 42) == 42
    # файл не создаётся, пока не вызван save()
    assert not (clean_config / "gmath.json").exists()


def test_singleton():
    assert Config() is Config()


def test_scalar_in_config_file_does_not_change_vectors(clean_config):
    _write(clean_config, json.dumps({"default_scalar": "f32"}))
    Config()

    p1 = Vector(1.0, 0.5, 0.0)
    p3 = Vector.new_2d(1.0, 0.5 - 1.0e-16)
    p4 = Vector.new_2d(1.0, 0.5 - 1.0e-17)
    assert p1.scalar is F64
    assert p1 != p3
    assert p1 == p4


def test_unknown_scalar_in_config_file_is_ignored(clean_config):
    _write(clean_config, json.dumps({"default_scalar": "f128"}))
    Config()
    assert Vector(1.0, 0.5, 0.0).scalar is F64


def test_non_object_config_falls_back_to_defaults(clean_config, caplog):
    _write(clean_config, "[]")
    cfg = Config()
    assert cfg.data == DEFAULT_CONFIG
    assert cfg["log_level"] == "INFO"
    assert "Expected a JSON object" in caplog.text
    assert Vector(1.0, 0.5, 0.0).v() == (1.0, 0.5, 0.0)


def test_broken_file_falls_back_to_defaults(clean_config):
    _write(clean_config, "{not json")
    cfg = Config()
    assert cfg.data == DEFAULT_CONFIG
    assert Vector(1.0, 2.0, 3.0).scalar is F64


def test_bad_log_level_falls_back(clean_config, caplog):
    _write(clean_config, json.dumps({"log_level": "LOUD"}))
    assert Config()["log_level"] == "INFO"
    assert "Unknown log_level" in caplog.text


def test_apply_logging(clean_config):
    _write(clean_config, json.dumps({"log_level": "debug"}))
    Config().apply_logging()
    assert logger.level == logging.DEBUG


def test_setitem_saves(clean_config):
    cfg = Config()
    cfg["log_level"] = "WARNING"
    saved = json.loads((clean_config / "gmath.json").read_text(encoding="utf-8"))
    assert saved == {"log_level": "WARNING"}

    Config.reset()
    assert Config()["log_level"] == "WARNING"


def test_setitem_rejects_bad_level():
    with pytest.raises(ValueError):
        Config()["log_level"] = "LOUD"
