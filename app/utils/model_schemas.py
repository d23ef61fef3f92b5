# model_schemas.py

"""
Pydantic models for the records the data layer hands to the views:
notes, collections, and per-collection summaries.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Note(BaseModel):
    """
    A user's note.
    - content: the visible text (flashcard prompt)
    - hidden_content: the hidden counterpart (flashcard answer)
    """
    id: int
    content: str = ""
    hidden_content: str = ""
    model_config = ConfigDict(extra='forbid')

    @field_validator("content", "hidden_content", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        # Older rows may store NULL for either text column
        return "" if value is None else value


class Collection(BaseModel):
    """
    A named grouping of notes (many-to-many through note_collections).
    """
    id: int
    name: str
    model_config = ConfigDict(extra='forbid')


class CollectionSummary(Collection):
    note_count: int = Field(default=0, ge=0)
