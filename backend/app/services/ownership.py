"""
Inkpost Backend — Ownership Policy
====================================

What:  The one place that decides what a caller hears when they try to
       mutate a resource they do not own.

Policy (see DESIGN.md, "Ownership reporting"):
    CONCEAL  → NotFoundError (404). Mismatch is indistinguishable from
               absence. Used for tasks and blogs, whose update/delete queries
               are scoped to the owner and never see foreign rows.
    REVEAL   → ForbiddenError (403). Used for comments: they are looked up by
               id first, and their existence and author are already public
               through GET /blogposts/{id}/comments, so hiding them would
               protect nothing.
"""

import enum
import uuid
from typing import Any, Optional

from app.exceptions import ForbiddenError, NotFoundError


class Disclosure(enum.Enum):
    CONCEAL = "conceal"
    REVEAL = "reveal"


POLICY = {
    "task": Disclosure.CONCEAL,
    "blog post": Disclosure.CONCEAL,
    "comment": Disclosure.REVEAL,
}


def ensure_owner(
    resource: str,
    record: Optional[Any],
    caller_id: uuid.UUID,
    resource_id: Optional[uuid.UUID] = None,
) -> Any:
    """
    Return `record` if `caller_id` owns it, otherwise raise per POLICY.

    Args:
        resource:    Key into POLICY, also used in the error message.
        record:      ORM object with a `user_id` attribute, or None if absent.
        caller_id:   Identifier from the caller's TokenClaim.
        resource_id: For the log context only.
    """
    rid = str(resource_id) if resource_id else None
    if record is None:
        raise NotFoundError(resource=resource, resource_id=rid)

    if record.user_id != caller_id:
        if POLICY.get(resource, Disclosure.CONCEAL) is Disclosure.REVEAL:
            raise ForbiddenError(
                message=f"You are not authorized to modify this {resource}",
                context={"resource": resource, "resource_id": rid},
            )
        raise NotFoundError(resource=resource, resource_id=rid)

    return record
