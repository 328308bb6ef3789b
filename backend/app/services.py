"""Business logic services used by HTTP controllers.

`GroupService` sits between the controllers and the store. The store
reports a missing group as `None`; the service turns that into
`GroupNotFound` so controllers can map it to a 404. The only payload
rule enforced anywhere is the member check in `create_group`.
"""

from typing import Any, List, Optional
from . import models, schemas
from .store import GroupStore

EMPTY_MEMBERS_MESSAGE = "Groups must contain members"


class GroupNotFound(LookupError):
    """No group matches the requested id."""
    def __init__(self, group_id):
        self.group_id = group_id
        super().__init__(f"Group not found with ID: {format_group_id(group_id)}")


class InvalidMembers(ValueError):
    """The first member name of a new group is empty."""
    def __init__(self):
        super().__init__(EMPTY_MEMBERS_MESSAGE)


def format_group_id(group_id: Optional[int]) -> str:
    """Render a parsed path id; an unparseable id reads as `NaN`."""
    return "NaN" if group_id is None else str(group_id)


class GroupService:
    """Group operations on top of a `GroupStore`."""
    def __init__(self, store: GroupStore):
        self.store = store

    def list_summaries(self) -> List[schemas.GroupSummary]:
        return self.store.get_all_group_summaries()

    def list_students(self) -> List[models.Student]:
        return self.store.get_all_students()

    def create_group(self, group_name: Any, members: List[Any]) -> schemas.GroupSummary:
        """Create a group after checking its first member name.

        Only `members[0]` is inspected. An empty list has no first
        element, which counts as a non-match: the group is created with
        no members.
        """
        if members and members[0] == "":
            raise InvalidMembers()
        return self.store.create_group(group_name, members)

    def get_group(self, group_id: Optional[int]) -> models.Group:
        """Return the group or raise `GroupNotFound`."""
        group = self.store.get_group(group_id)
        if group is None:
            raise GroupNotFound(group_id)
        return group

    def delete_group(self, group_id: Optional[int]) -> None:
        """Delete an existing group; raise `GroupNotFound` if there is none."""
        if not self.store.delete_group(group_id):
            raise GroupNotFound(group_id)
