"""Ownership rules for blog mutations."""

from typing import Protocol
from uuid import UUID


class Owned(Protocol):
    """Anything that records the id of the user who owns it."""

    @property
    def user_id(self) -> UUID | str | None: ...


def can_delete(actor_user_id: UUID | str, record: Owned) -> bool:
    """
    Check whether the actor may delete the record.

    Ids are compared by their canonical string form, so a ``UUID`` and its
    string representation identify the same user.

    Args:
        actor_user_id: Id of the authenticated user
        record: Blog (or any owned record)

    Returns:
        bool: True only if the record has an owner and it is the actor
    """
    owner = record.user_id
    if owner is None:
        return False
    return str(owner) == str(actor_user_id)
