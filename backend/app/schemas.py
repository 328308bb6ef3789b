"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable. Validation is deliberately
narrow: only the JSON shape is enforced here, the member rule lives in
`services.GroupService`.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List


class GroupCreateIn(BaseModel):
    """Payload for creating a group with its member names."""
    model_config = ConfigDict(populate_by_name=True)

    group_name: Any = Field(default=None, alias="groupName")
    members: List[Any]


class GroupSummary(BaseModel):
    """Group projection listing member ids instead of full students."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    group_name: Any = Field(default=None, alias="groupName")
    members: List[int]
