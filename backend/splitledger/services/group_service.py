import logging

from splitledger.core.config import settings
from splitledger.core.errors import InvalidNameError
from splitledger.core.store import GroupStore
from splitledger.models.group import Group
from splitledger.models.settlement import Settlement
from splitledger.services.calculation_service import compute_balances
from splitledger.services.settlement_service import compute_settlements

logger = logging.getLogger(__name__)


def _clean_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise InvalidNameError("Group name cannot be empty")
    return name


async def create_group(store: GroupStore, name: str) -> Group:
    name = _clean_name(name)
    async with store.lock.write():
        group = Group(
            id=store.next_group_id(),
            name=name,
            simplify_debts=settings.default_simplify_debts,
        )
        store.groups[group.id] = group
        snapshot = group.model_copy(deep=True)
    logger.info(f"Created group {group.id} ({name})")
    return snapshot


async def list_groups(store: GroupStore) -> list[Group]:
    async with store.lock.read():
        return [g.model_copy(deep=True) for g in sorted(store.groups.values(), key=lambda g: g.id)]


async def get_group(store: GroupStore, group_id: int) -> Group:
    async with store.lock.read():
        return store.require(group_id).model_copy(deep=True)


async def update_group(store: GroupStore, group_id: int, name: str) -> Group:
    name = _clean_name(name)
    async with store.lock.write():
        group = store.require(group_id)
        group.name = name
        return group.model_copy(deep=True)


async def delete_group(store: GroupStore, group_id: int) -> None:
    async with store.lock.write():
        store.require(group_id)
        del store.groups[group_id]
    logger.info(f"Deleted group {group_id}")


async def toggle_simplify(store: GroupStore, group_id: int) -> bool:
    async with store.lock.write():
        group = store.require(group_id)
        group.simplify_debts = not group.simplify_debts
        new_value = group.simplify_debts
    logger.info(f"Group {group_id}: simplify_debts set to {new_value}")
    return new_value


async def get_group_balances(store: GroupStore, group_id: int) -> dict[str, float]:
    async with store.lock.read():
        return compute_balances(store.require(group_id))


async def get_group_settlements(store: GroupStore, group_id: int) -> list[Settlement]:
    async with store.lock.read():
        return compute_settlements(store.require(group_id))
