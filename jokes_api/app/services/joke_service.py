"""
In‑memory joke store.

``JokeStore`` owns the ordered list of jokes and the counter used to
assign ids to newly created jokes.  It is constructed once by
``create_app`` (normally from the bundled seed file) and handed to the
route handlers through the ``get_joke_store`` dependency.

Every operation runs under a single lock so that id uniqueness and
insertion order hold however the handlers are scheduled.  Created ids
start at ``FIRST_CREATED_ID`` and are never reused: neither deleting
jokes nor resetting the list rewinds the counter.
"""

from __future__ import annotations

import json
import logging
import random
import re
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from fastapi import Request

from ..core.errors import BadRequestError, NotFoundError
from ..schemas.joke import Joke, JokeCandidate

logger = logging.getLogger(__name__)

FIRST_CREATED_ID = 10_000_000

REQUIRED_FIELDS = ("type", "setup", "punchline")

_ID_PATTERN = re.compile(r"\s*([+-]?\d+)")


def format_time(moment: Optional[datetime] = None) -> str:
    """Render a local time as e.g. ``Wed Jul 10 2024 09:48:15 GMT+0000 (UTC)``.

    The parenthesised zone is the abbreviation ``strftime`` reports,
    not a long name such as "Coordinated Universal Time".
    """
    moment = (moment or datetime.now()).astimezone()
    return moment.strftime("%a %b %d %Y %H:%M:%S GMT%z (%Z)")


def parse_joke_id(raw: Union[str, int, None]) -> Optional[int]:
    """Return the integer ``raw`` starts with, or ``None`` if it has none.

    Leading whitespace and a sign are allowed and anything after the
    digits is ignored, so ``"12abc"`` and ``"12.5"`` both give 12.
    """
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    match = _ID_PATTERN.match(raw)
    if match is None:
        return None
    return int(match.group(1))


class JokeStore:
    """Ordered, mutable collection of jokes seeded from a fixed dataset."""

    def __init__(
        self,
        seed: Iterable[Joke],
        next_id: int = FIRST_CREATED_ID,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._seed: List[Joke] = [joke.model_copy() for joke in seed]
        self._jokes: List[Joke] = self._fresh_seed()
        self._next_id = next_id
        self._random = rng or random.Random()
        self._lock = threading.RLock()

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs: Any) -> "JokeStore":
        """Build a store seeded with the JSON array of jokes in ``path``."""
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        seed = [Joke.model_validate(item) for item in data]
        logger.info("Loaded %d seed jokes from %s", len(seed), path)
        return cls(seed, **kwargs)

    def _fresh_seed(self) -> List[Joke]:
        return [joke.model_copy() for joke in self._seed]

    def __len__(self) -> int:
        with self._lock:
            return len(self._jokes)

    @property
    def next_id(self) -> int:
        """Id the next created joke will receive."""
        with self._lock:
            return self._next_id

    def list_jokes(self) -> List[Joke]:
        with self._lock:
            return list(self._jokes)

    def first_joke(self) -> Joke:
        with self._lock:
            if not self._jokes:
                raise NotFoundError("no jokes in database")
            return self._jokes[0]

    def get_joke(self, raw_id: Union[str, int, None]) -> Joke:
        """Find a joke by id.

        Raises ``BadRequestError`` when ``raw_id`` is not an integer and
        ``NotFoundError`` (carrying ``soughtId``) when nothing matches.
        """
        sought_id = parse_joke_id(raw_id)
        if sought_id is None:
            raise BadRequestError("missing id to search for.")
        with self._lock:
            for joke in self._jokes:
                if joke.id == sought_id:
                    return joke
        raise NotFoundError("can't find joke with that id.", soughtId=sought_id)

    def search_jokes(self, term: Optional[str]) -> List[Joke]:
        """Return jokes whose setup or punchline contains ``term``.

        Matching is a case‑sensitive substring test.  No match is an
        empty list, not an error.
        """
        if not term:
            raise BadRequestError("missing searchTerm query parameter", plain=True)
        with self._lock:
            return [j for j in self._jokes if term in j.setup or term in j.punchline]

    def random_joke(self) -> Joke:
        with self._lock:
            if not self._jokes:
                raise NotFoundError("no jokes in database")
            return self._random.choice(self._jokes)

    def create_joke(self, payload: Any) -> Joke:
        """Validate ``payload`` and append it as a new joke.

        The payload must be a JSON object with string ``type``,
        ``setup`` and ``punchline`` values.  Any client supplied ``id``
        or ``timestamp`` is ignored.
        """
        if payload is None or not isinstance(payload, dict):
            raise BadRequestError("where is your joke! it's not in the body, i think", plain=True)
        missing = [name for name in REQUIRED_FIELDS if not isinstance(payload.get(name), str)]
        if missing:
            raise BadRequestError(
                "joke is missing required field(s): " + ", ".join(missing), plain=True
            )
        candidate = JokeCandidate.model_validate(payload)
        with self._lock:
            joke = Joke(id=self._next_id, timestamp=format_time(), **candidate.model_dump())
            self._next_id += 1
            self._jokes.append(joke)
        logger.info("Created joke %s", joke.id)
        return joke

    def delete_joke(self, raw_id: Union[str, int, None]) -> Joke:
        """Remove and return the joke with the given id."""
        if raw_id is None or raw_id == "":
            raise NotFoundError("missing id", plain=True)
        sought_id = parse_joke_id(raw_id)
        with self._lock:
            for index, joke in enumerate(self._jokes):
                if joke.id == sought_id:
                    del self._jokes[index]
                    logger.info("Deleted joke %s", joke.id)
                    return joke
        raise NotFoundError("joke not found")

    def delete_all(self) -> None:
        with self._lock:
            removed = len(self._jokes)
            self._jokes.clear()
        logger.info("Deleted all %d jokes", removed)

    def reset(self) -> None:
        """Restore the seed dataset.  The id counter keeps its value."""
        with self._lock:
            self._jokes = self._fresh_seed()
            count = len(self._jokes)
        logger.info("Reset jokes list to %d seed jokes", count)


def get_joke_store(request: Request) -> JokeStore:
    """FastAPI dependency returning the store owned by the application."""
    return request.app.state.joke_store
