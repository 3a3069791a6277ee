"""Pydantic schemas for upstream service payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NamePair(BaseModel):
    """Random name returned by the name service."""

    model_config = ConfigDict(frozen=True)

    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class JokeValue(BaseModel):
    joke: str = Field(..., description="Joke text with the name substituted in")


class JokePayload(BaseModel):
    """Envelope returned by the joke service."""

    value: JokeValue
