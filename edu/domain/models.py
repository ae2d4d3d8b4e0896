"""Record types persisted in the JSON stores."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Base for persisted records.

    Strict so that a store holding ``"id": "7"`` or ``"completed": "no"`` is
    rejected instead of silently coerced. Unknown keys are kept so a
    load/save cycle does not drop them.
    """

    model_config = ConfigDict(strict=True, extra="allow")

    id: int

    def to_dict(self) -> dict:
        return self.model_dump()


class Task(Record):
    task: str
    completed: bool = False


class User(Record):
    firstname: str
    lastname: str
    email: str
