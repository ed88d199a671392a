# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры.
Каждый тест работает в чистом каталоге с заново загружаемым Config;
уровень логгера пакета восстанавливается после теста.
"""

import pytest

from gmath import Vector
from gmath.utils.config import Config
from gmath.utils.logger import logger


@pytest.fixture(autouse=True)
def clean_config(tmp_path, monkeypatch):
    """Изолировать gmath.json в tmp_path и сбросить singleton."""
    monkeypatch.chdir(tmp_path)
    level = logger.level
    Config.reset()
    yield tmp_path
    Config.reset()
    logger.setLevel(level)


# ----------------------------------------------------------------------
# Точки из демонстрационного сценария
# ----------------------------------------------------------------------
@pytest.fixture
def p1() -> Vector:
    return Vector(1.0, 0.5, 0.0)


@pytest.fixture
def p2() -> Vector:
    return Vector.new_2d(2.4, 3.9)
