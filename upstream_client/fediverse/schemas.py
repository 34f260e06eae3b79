"""Fediverse (Misskey-compatible) API schemas."""

from pydantic import BaseModel, Field


class NoteSchema(BaseModel):
    """Public engagement counters of one note."""

    id: str
    replies_count: int = Field(alias="repliesCount", ge=0)
    reaction_count: int = Field(alias="reactionCount", ge=0)

    class Config:
        populate_by_name = True
