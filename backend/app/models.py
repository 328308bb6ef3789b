"""Domain models held by the in-memory store.

Models are plain pydantic classes. Field names follow Python naming; the
JSON keys used by the HTTP API are declared as aliases so responses keep
the camelCase shape clients expect (`groupName`).
"""

from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field


class Student(BaseModel):
    """A named student.

    Fields:
    - `id`: assigned by the store at creation, never reused
    - `name`: the name supplied when the owning group was created
    """
    id: int
    name: Any


class Group(BaseModel):
    """A named group owning its students.

    `members` keeps the insertion order of the names supplied at
    creation; it is never reordered.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: int
    group_name: Any = Field(default=None, alias="groupName")
    members: List[Student] = Field(default_factory=list)
