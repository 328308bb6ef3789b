"""In-memory store for groups and their students.

The store owns every group, generates ids for groups and students and
builds the summary projections returned by list endpoints. Nothing is
persisted; the process-wide instance lives until the process exits.

`get_store` is the FastAPI dependency handing that instance to
controllers. Tests override it to get an isolated store per test case.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, List, Optional

from .models import Group, Student
from .schemas import GroupSummary

logger = logging.getLogger("app.store")


class GroupStore:
    """Groups and students kept in creation order."""

    def __init__(self) -> None:
        self._groups: List[Group] = []
        # id trackers; never decremented, so ids are never reissued
        self._group_id_tracker = 0
        self._student_id_tracker = 0
        self._lock = threading.Lock()

    def get_group(self, group_id: Optional[int]) -> Optional[Group]:
        """Return the group with `group_id` or `None` if there is none."""
        with self._lock:
            return next((g for g in self._groups if g.id == group_id), None)

    def get_all_group_summaries(self) -> List[GroupSummary]:
        with self._lock:
            return [self.create_group_summary(g) for g in self._groups]

    @staticmethod
    def create_group_summary(group: Group) -> GroupSummary:
        """Project `group` to its summary form (member ids only)."""
        return GroupSummary(
            id=group.id,
            group_name=group.group_name,
            members=[s.id for s in group.members],
        )

    def create_group(self, group_name: Any, member_names: List[Any]) -> GroupSummary:
        """Create a group and one student per name, in the given order.

        Duplicate names are not merged; each name yields a new student.
        Returns the summary of the new group.
        """
        with self._lock:
            members = [self._create_student(name) for name in member_names]
            group = Group(id=self._group_id_tracker, group_name=group_name, members=members)
            self._group_id_tracker += 1
            self._groups.append(group)
        logger.debug("created group %s with %d members", group.id, len(members))
        return self.create_group_summary(group)

    def create_student(self, name: Any) -> Student:
        with self._lock:
            return self._create_student(name)

    def _create_student(self, name: Any) -> Student:
        student = Student(id=self._student_id_tracker, name=name)
        self._student_id_tracker += 1
        return student

    def get_all_students(self) -> List[Student]:
        """Every student, by group storage order then member order."""
        with self._lock:
            return [s for g in self._groups for s in g.members]

    def delete_group(self, group_id: Optional[int]) -> bool:
        """Remove the group with `group_id`; return whether one was removed."""
        with self._lock:
            for idx, g in enumerate(self._groups):
                if g.id == group_id:
                    del self._groups[idx]
                    break
            else:
                return False
        logger.debug("deleted group %s", group_id)
        return True


_store = GroupStore()


def get_store() -> GroupStore:
    """Return the process-wide `GroupStore` for FastAPI dependency injection."""
    return _store
