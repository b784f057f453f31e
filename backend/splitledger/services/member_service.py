import logging

from splitledger.core.config import settings
from splitledger.core.errors import InvalidNameError, MemberConflictError, MemberNotFoundError
from splitledger.core.store import GroupStore
from splitledger.models.member import Member

logger = logging.getLogger(__name__)


async def add_member(store: GroupStore, group_id: int, name: str) -> Member:
    name = name.strip()
    if not name:
        raise InvalidNameError("User name cannot be empty")
    if len(name) > settings.max_member_name_length:
        raise InvalidNameError(f"User name too long (max {settings.max_member_name_length} chars)")

    async with store.lock.write():
        group = store.require(group_id)
        if group.find_member(name) is not None:
            raise MemberConflictError(f"User '{name}' already exists")
        member = Member(id=group.next_member_id(), name=name)
        group.members.append(member)

    logger.info(f"Group {group_id}: added member {member.id} ({name})")
    return member


async def remove_member(store: GroupStore, group_id: int, member_id: int) -> None:
    """Remove a member. Members that appear in any event can't be removed."""
    async with store.lock.write():
        group = store.require(group_id)
        member = next((m for m in group.members if m.id == member_id), None)
        if member is None:
            raise MemberNotFoundError(f"User with id {member_id} not found")
        if any(event.involves(member.name) for event in group.events):
            raise MemberConflictError("Cannot delete user with existing expenses")
        group.members.remove(member)

    logger.info(f"Group {group_id}: removed member {member_id}")
