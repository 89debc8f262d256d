# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры.
Каждый тест начинает с чистого Config (умолчания в памяти);
`config_path` – путь к JSON во временной директории для тестов загрузки.
"""

import numpy as np
import pytest

from vecmat import Vec2, Vec3, Mat3x3
from vecmat.utils.config import Config


@pytest.fixture(autouse=True)
def fresh_config():
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "vecmat.json"


# ----------------------------------------------------------------------
# Наборы векторов для свойств (коммутативность, ортогональность и т.п.)
# ----------------------------------------------------------------------
@pytest.fixture
def vec3_pairs():
    return [
        (Vec3(1.0, 2.0, 3.0), Vec3(4.0, -1.0, 0.0)),
        (Vec3(0.5, -2.5, 7.0), Vec3(-3.0, 0.25, 1.5)),
        (Vec3(1, 0, 0), Vec3(0, 1, 0)),
        (Vec3(np.float32(2), np.float32(-3), np.float32(4)),
         Vec3(np.float32(1), np.float32(1), np.float32(1))),
    ]


@pytest.fixture
def vec2_pairs():
    return [
        (Vec2(2, 2), Vec2(3, 4)),
        (Vec2(1.5, -0.5), Vec2(-2.0, 8.0)),
        (Vec2(np.float32(3), np.float32(4)), Vec2(np.float32(-1), np.float32(2))),
    ]


@pytest.fixture
def sample_matrix() -> Mat3x3:
    return Mat3x3.from_rows(Vec3(1, 2, 3), Vec3(4, 5, 6), Vec3(7, 8, 9))
