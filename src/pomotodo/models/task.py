"""Task data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Task(BaseModel):
    """A trackable unit of work.

    Attributes:
        id: Opaque unique identifier, assigned at creation
        text: Display label, trimmed and non-empty
        completed: Completion flag toggled by the user
        target_sessions: Planned sessions for this task (stored as ``pomodoros``)
        completed_sessions: Sessions finished while bound to this task
            (stored as ``completedPomodoros``). May exceed ``target_sessions``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    text: str = Field(min_length=1)
    completed: bool = False
    target_sessions: int = Field(default=1, ge=1, alias="pomodoros")
    completed_sessions: int = Field(default=0, ge=0, alias="completedPomodoros")

    def to_record(self) -> dict:
        """Convert to the persisted record layout."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_record(cls, data: dict) -> "Task":
        """Create from a persisted record."""
        return cls.model_validate(data)


# Ordered sequence of tasks as stored in the blob
TaskList = TypeAdapter(list[Task])
