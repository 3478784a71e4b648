"""
Pydantic models for joke data.

``JokeCandidate`` is what a client submits; ``Joke`` extends it with
the ``id`` and ``timestamp`` assigned by the store.  Jokes from the
bundled seed dataset have no timestamp, so routes serialise with
``response_model_exclude_none`` to leave the key out.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class JokeCandidate(BaseModel):
    """Representation of a Joke submitted before it has been validated and assigned an ID."""

    type: str = Field(..., description="The category of the joke (e.g., general, pun, knock-knock).")
    setup: str = Field(..., description="The leading part of the joke that introduces the humorous situation.")
    punchline: str = Field(..., description="The concluding part of the joke that delivers the humour.")


class Joke(JokeCandidate):
    """Representation of a Joke after it has been validated and assigned an ID."""

    id: int = Field(..., description="The unique identifier of the joke.")
    timestamp: Optional[str] = Field(None, description="When the joke was created on this server.")

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 1,
                "type": "general",
                "setup": "What did the fish say when it hit the wall?",
                "punchline": "Dam.",
            }
        }
    }


class Outcome(BaseModel):
    """Result of an operation that does not return a joke."""

    outcome: Literal["success", "failure"]
    message: str
