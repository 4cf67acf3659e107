from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .edit_distance import Transform


class Feedback(BaseModel):
    guess: str
    edit_distance: int = Field(ge=0)
    transforms: list[Transform] = Field(default_factory=list)


class TransformResult(BaseModel):
    source: str
    target: str
    distance: int
    transforms: list[Transform] = Field(default_factory=list)
    table: Optional[list[list[int]]] = None


class SuggestResult(BaseModel):
    guess: str
    secret: str
    feedback: Feedback
    remaining: list[str] = Field(default_factory=list)
    next_guess: Optional[str] = None
