"""
Joke endpoints.

These routes expose the in‑memory joke collection: listing, lookup by
position or id, substring search, random selection, creation,
deletion and resetting to the bundled dataset.  Handlers are thin;
validation and the failure responses live in ``JokeStore`` and the
error handler installed by ``create_app``.

Fixed paths (``/first``, ``/random``, ``/search``, ``/tag``) are
declared before ``/{joke_id}`` so that they are matched first.
"""

import json
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Path, Query, Request, status

from jokes_api.app.core.errors import BadRequestError
from jokes_api.app.schemas.joke import Joke, JokeCandidate, Outcome
from jokes_api.app.services.joke_service import JokeStore, get_joke_store

router = APIRouter()

FAILURE_RESPONSE = {"model": Outcome}
PLAIN_FAILURE_RESPONSE = {"content": {"text/plain": {"schema": {"type": "string"}}}}


@router.get("", response_model=List[Joke], response_model_exclude_none=True, summary="list all jokes")
async def list_jokes(store: JokeStore = Depends(get_joke_store)) -> List[Joke]:
    """Return every joke in insertion order."""
    return store.list_jokes()


@router.get(
    "/first",
    response_model=Joke,
    response_model_exclude_none=True,
    summary="Get first joke",
    responses={404: {**FAILURE_RESPONSE, "description": "no jokes in db - first joke not found"}},
)
async def get_first_joke(store: JokeStore = Depends(get_joke_store)) -> Joke:
    return store.first_joke()


@router.get(
    "/random",
    response_model=List[Joke],
    response_model_exclude_none=True,
    summary="get a random joke",
    responses={404: {**FAILURE_RESPONSE, "description": "no jokes in db"}},
)
async def get_random_joke(store: JokeStore = Depends(get_joke_store)) -> List[Joke]:
    """Return a list holding exactly one randomly chosen joke."""
    return [store.random_joke()]


@router.get(
    "/search",
    response_model=List[Joke],
    response_model_exclude_none=True,
    summary="Get jokes matching a searchTerm",
    responses={400: {**PLAIN_FAILURE_RESPONSE, "description": "missing searchTerm parameter"}},
)
@router.get(
    "/tag",
    response_model=List[Joke],
    response_model_exclude_none=True,
    summary="Get jokes matching a searchTerm (alias of /jokes/search)",
    responses={400: {**PLAIN_FAILURE_RESPONSE, "description": "missing searchTerm parameter"}},
)
async def search_jokes(
    search_term: Optional[str] = Query(
        None,
        alias="searchTerm",
        description="Text to look for in the setup or punchline (case‑sensitive).",
        examples=["dentist"],
    ),
    store: JokeStore = Depends(get_joke_store),
) -> List[Joke]:
    """Return jokes containing ``searchTerm`` in either the setup or punchline."""
    return store.search_jokes(search_term)


@router.get(
    "/{joke_id}",
    response_model=Joke,
    response_model_exclude_none=True,
    summary="Get one joke by id",
    responses={
        400: {**FAILURE_RESPONSE, "description": "id is not an integer"},
        404: {**FAILURE_RESPONSE, "description": "joke not found"},
    },
)
async def get_joke(
    joke_id: str = Path(..., description="The joke ID"),
    store: JokeStore = Depends(get_joke_store),
) -> Joke:
    return store.get_joke(joke_id)


async def _read_json_body(request: Request) -> Any:
    """Decode the request body, treating an empty body as ``None``."""
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise BadRequestError("request body is not valid JSON", plain=True) from exc


@router.post(
    "",
    response_model=Joke,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="create a joke",
    responses={400: {**PLAIN_FAILURE_RESPONSE, "description": "an error when the request is bad"}},
    openapi_extra={
        "requestBody": {
            "description": "contents of new joke to create",
            "required": True,
            "content": {"application/json": {"schema": JokeCandidate.model_json_schema()}},
        }
    },
)
async def create_joke(request: Request, store: JokeStore = Depends(get_joke_store)) -> Joke:
    """Create a joke.

    The stored joke is returned, including its newly assigned ``id``
    and creation ``timestamp``.
    """
    payload = await _read_json_body(request)
    return store.create_joke(payload)


@router.post("/reset", response_model=Outcome, summary="Reset list of jokes back to original populated list")
async def reset_jokes(store: JokeStore = Depends(get_joke_store)) -> Outcome:
    store.reset()
    return Outcome(outcome="success", message="jokes list has been reset")


@router.delete("", response_model=Outcome, summary="Delete all jokes")
async def delete_all_jokes(store: JokeStore = Depends(get_joke_store)) -> Outcome:
    """Delete all jokes.  The list can be restored with ``POST /jokes/reset``."""
    store.delete_all()
    return Outcome(outcome="success", message="all jokes deleted")


@router.delete(
    "/{joke_id}",
    response_model=Joke,
    response_model_exclude_none=True,
    summary="Delete a joke by ID",
    responses={404: {**FAILURE_RESPONSE, "description": "Joke not found for the provided ID"}},
)
async def delete_joke(
    joke_id: str = Path(..., description="The unique identifier of the joke to delete."),
    store: JokeStore = Depends(get_joke_store),
) -> Joke:
    """Delete a joke and return it."""
    return store.delete_joke(joke_id)
