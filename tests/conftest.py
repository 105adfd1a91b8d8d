import random

import pytest
from fastapi.testclient import TestClient

from api import create_app
from config import Settings
from cube import COLORS, FACES


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def full_valid_configuration():
    # 9 of each color, one color per face
    return {face: [COLORS[i]] * 9 for i, face in enumerate(FACES)}


@pytest.fixture
def client():
    app = create_app(settings=Settings(RANDOM_SEED=None), rng=random.Random(42))
    with TestClient(app) as c:
        yield c
