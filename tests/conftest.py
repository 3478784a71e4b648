import random

import pytest
from fastapi.testclient import TestClient

from jokes_api.app.main import create_app
from jokes_api.app.schemas.joke import Joke
from jokes_api.app.services.joke_service import JokeStore

FISH_JOKE = {
    "id": 1,
    "type": "general",
    "setup": "What did the fish say when it hit the wall?",
    "punchline": "Dam.",
}

NEW_JOKE = {"type": "pun", "setup": "Why did...", "punchline": "Because..."}


@pytest.fixture
def store() -> JokeStore:
    return JokeStore([Joke(**FISH_JOKE)], rng=random.Random(1234))


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store)) as test_client:
        yield test_client
