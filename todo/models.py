"""
Task Model

Tasks live only on the client. The JSON shape matches the seed feed:

    {"id": 1, "title": "delectus aut autem", "completed": false, "userId": 1}

userId is carried through from seed data and otherwise unused. Any other
keys the feed sends are ignored.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FilterMode(str, Enum):
    """Which tasks the view shows."""

    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"


class Task(BaseModel):
    """A to-do item. Immutable: changes produce a new Task."""

    id: int = Field(..., description="Client-generated identifier")
    title: str = Field(..., description="What needs doing")
    completed: bool = Field(default=False, description="Whether the task is done")
    user_id: int | None = Field(
        default=None,
        alias="userId",
        description="Owner id from the seed feed",
    )

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    def to_json(self) -> dict:
        """Serialize with the feed's key names, leaving out an absent userId."""
        return self.model_dump(by_alias=True, exclude_none=True)
