from splitledger.core.errors import GroupNotFoundError
from splitledger.core.locking import RWLock
from splitledger.models.group import Group


class GroupStore:
    """
    In-memory groups, guarded by a reader/writer lock.
    Balance and settlement queries take the read side; anything that adds,
    edits or removes data takes the write side.
    """

    def __init__(self):
        self.groups: dict[int, Group] = {}
        self.lock = RWLock()

    def require(self, group_id: int) -> Group:
        """Look up a group. Caller must hold the lock."""
        group = self.groups.get(group_id)
        if group is None:
            raise GroupNotFoundError(f"Group with id {group_id} not found")
        return group

    def next_group_id(self) -> int:
        return max(self.groups, default=0) + 1


_store = GroupStore()


def get_store() -> GroupStore:
    return _store


def reset_store() -> GroupStore:
    global _store
    _store = GroupStore()
    return _store
