import json
import random
import re

import pytest

from jokes_api.app.core.config import DEFAULT_SEED_FILE
from jokes_api.app.core.errors import BadRequestError, NotFoundError
from jokes_api.app.schemas.joke import Joke
from jokes_api.app.services.joke_service import (
    FIRST_CREATED_ID,
    JokeStore,
    format_time,
    parse_joke_id,
)

from .conftest import FISH_JOKE, NEW_JOKE

TIME_PATTERN = re.compile(r"^\w{3} \w{3} \d{2} \d{4} \d{2}:\d{2}:\d{2} GMT[+-]\d{4} \(.+\)$")


def make_store(*jokes):
    return JokeStore([Joke(**j) for j in jokes], rng=random.Random(0))


def test_bundled_seed_file_loads_in_order():
    store = JokeStore.from_file(DEFAULT_SEED_FILE)
    with open(DEFAULT_SEED_FILE, encoding="utf-8") as fh:
        raw = json.load(fh)
    assert [j.id for j in store.list_jokes()] == [item["id"] for item in raw]
    assert store.first_joke().model_dump(exclude_none=True) == FISH_JOKE


def test_ids_strictly_increase_and_are_never_reused(store):
    first = store.create_joke(NEW_JOKE)
    second = store.create_joke(NEW_JOKE)
    assert first.id == FIRST_CREATED_ID
    assert second.id == first.id + 1

    store.delete_joke(second.id)
    store.delete_all()
    store.reset()
    third = store.create_joke(NEW_JOKE)
    assert third.id == second.id + 1
    assert store.next_id == third.id + 1


def test_create_appends_with_timestamp(store):
    joke = store.create_joke(dict(NEW_JOKE, id=5, timestamp="yesterday", extra="ignored"))
    assert joke.id == FIRST_CREATED_ID
    assert TIME_PATTERN.match(joke.timestamp)
    assert store.list_jokes()[-1] == joke
    assert len(store) == 2


@pytest.mark.parametrize("payload", [None, [], "a joke", 42])
def test_create_rejects_missing_or_non_object_body(store, payload):
    with pytest.raises(BadRequestError) as excinfo:
        store.create_joke(payload)
    assert excinfo.value.plain
    assert len(store) == 1


def test_create_names_missing_fields(store):
    with pytest.raises(BadRequestError) as excinfo:
        store.create_joke({"type": "pun", "punchline": 3})
    assert "setup" in excinfo.value.message
    assert "punchline" in excinfo.value.message
    assert "type" not in excinfo.value.message.split(":")[1]
    assert store.next_id == FIRST_CREATED_ID


def test_first_joke_on_empty_store():
    with pytest.raises(NotFoundError):
        make_store().first_joke()


def test_get_joke_parses_id(store):
    assert store.get_joke("1").setup == FISH_JOKE["setup"]
    assert store.get_joke(1).punchline == "Dam."

    with pytest.raises(BadRequestError):
        store.get_joke("abc")

    with pytest.raises(NotFoundError) as excinfo:
        store.get_joke("999999")
    assert excinfo.value.extra == {"soughtId": 999999}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12", 12),
        (" 7 ", 7),
        ("-3", -3),
        ("+5", 5),
        ("12abc", 12),
        ("1.5", 1),
        ("abc", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_joke_id(raw, expected):
    assert parse_joke_id(raw) == expected


def test_search_is_case_sensitive_substring_on_setup_or_punchline():
    store = make_store(
        FISH_JOKE,
        {"id": 2, "type": "general", "setup": "What did the dentist say?", "punchline": "Open wide."},
        {"id": 3, "type": "general", "setup": "Knock knock", "punchline": "Dentist!"},
    )
    assert [j.id for j in store.search_jokes("dentist")] == [2]
    assert [j.id for j in store.search_jokes("Dam")] == [1]
    assert [j.id for j in store.search_jokes("What")] == [1, 2]
    assert store.search_jokes("zebra") == []


@pytest.mark.parametrize("term", [None, ""])
def test_search_requires_term(store, term):
    with pytest.raises(BadRequestError):
        store.search_jokes(term)


def test_random_joke_comes_from_store():
    store = make_store(FISH_JOKE, dict(FISH_JOKE, id=2))
    for _ in range(10):
        assert store.random_joke() in store.list_jokes()


def test_random_joke_on_empty_store():
    with pytest.raises(NotFoundError):
        make_store().random_joke()


def test_delete_unknown_id_leaves_store_unchanged(store):
    with pytest.raises(NotFoundError):
        store.delete_joke("424242")
    with pytest.raises(NotFoundError):
        store.delete_joke("not-a-number")
    assert len(store) == 1


def test_delete_missing_id_is_plain_not_found(store):
    with pytest.raises(NotFoundError) as excinfo:
        store.delete_joke(None)
    assert excinfo.value.plain
    assert excinfo.value.message == "missing id"


def test_delete_returns_removed_joke(store):
    created = store.create_joke(NEW_JOKE)
    removed = store.delete_joke(str(created.id))
    assert removed == created
    assert [j.id for j in store.list_jokes()] == [1]


def test_reset_restores_seed_in_original_order():
    seed = [FISH_JOKE, dict(FISH_JOKE, id=2, setup="Second"), dict(FISH_JOKE, id=3, setup="Third")]
    store = make_store(*seed)
    store.delete_joke(2)
    store.create_joke(NEW_JOKE)
    store.reset()
    assert [j.model_dump(exclude_none=True) for j in store.list_jokes()] == seed


def test_delete_all_then_list_is_empty(store):
    store.delete_all()
    assert store.list_jokes() == []
    assert len(store) == 0


def test_format_time():
    assert TIME_PATTERN.match(format_time())
