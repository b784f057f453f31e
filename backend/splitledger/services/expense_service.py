import logging
import math

from splitledger.core.errors import EventNotFoundError, InvalidExpenseError, MemberNotFoundError
from splitledger.core.store import GroupStore
from splitledger.models.expense import Expense, SettlementPayment
from splitledger.models.group import Group
from splitledger.models.member import Member
from splitledger.services.payment_service import record_settlement_payment, revoke_settlement_record

logger = logging.getLogger(__name__)


def _validate(description: str, amount: float, participants: list[str]) -> str:
    description = description.strip()
    if not description:
        raise InvalidExpenseError("Description cannot be empty")
    if not math.isfinite(amount):
        raise InvalidExpenseError("Amount must be a finite number")
    if amount <= 0:
        raise InvalidExpenseError("Amount must be positive")
    if not participants:
        raise InvalidExpenseError("Must have at least one participant")
    return description


def _resolve(group: Group, payer: str, participants: list[str]) -> tuple[Member, list[Member]]:
    payer_member = group.find_member(payer)
    if payer_member is None:
        raise MemberNotFoundError(f"Payer '{payer}' not found")

    participant_members = []
    for name in participants:
        member = group.find_member(name)
        if member is None:
            raise MemberNotFoundError(f"Participant '{name}' not found")
        participant_members.append(member)
    return payer_member, participant_members


def _find_event_index(group: Group, event_id: int) -> int:
    for index, event in enumerate(group.events):
        if event.id == event_id:
            return index
    raise EventNotFoundError(f"Expense with id {event_id} not found")


async def add_expense(
    store: GroupStore,
    group_id: int,
    description: str,
    amount: float,
    payer: str,
    participants: list[str],
    category: str | None = None,
    notes: str | None = None,
) -> Expense:
    description = _validate(description, amount, participants)

    async with store.lock.write():
        group = store.require(group_id)
        payer_member, participant_members = _resolve(group, payer, participants)
        expense = Expense(
            id=group.next_event_id(),
            description=description,
            amount=amount,
            payer=payer_member,
            participants=participant_members,
            category=category,
            notes=notes,
        )
        group.events.append(expense)

    logger.info(f"Group {group_id}: expense {expense.id} of {amount:.2f} paid by {payer}")
    return expense.model_copy(deep=True)


async def update_expense(
    store: GroupStore,
    group_id: int,
    expense_id: int,
    description: str,
    amount: float,
    payer: str,
    participants: list[str],
    category: str | None = None,
    notes: str | None = None,
) -> Expense:
    description = _validate(description, amount, participants)

    async with store.lock.write():
        group = store.require(group_id)
        index = _find_event_index(group, expense_id)
        existing = group.events[index]
        if isinstance(existing, SettlementPayment):
            raise InvalidExpenseError("Settlement payments cannot be edited; delete and record again")

        payer_member, participant_members = _resolve(group, payer, participants)
        expense = Expense(
            id=existing.id,
            description=description,
            amount=amount,
            payer=payer_member,
            participants=participant_members,
            created_at=existing.created_at,
            category=category,
            notes=notes,
        )
        group.events[index] = expense

    logger.info(f"Group {group_id}: updated expense {expense_id}")
    return expense.model_copy(deep=True)


async def delete_event(store: GroupStore, group_id: int, event_id: int) -> None:
    """
    Remove an expense or settlement payment.
    Deleting a settlement payment also drops the settled-pair record for its
    payer -> recipient pair, so the suggestion shows as outstanding again.
    """
    async with store.lock.write():
        group = store.require(group_id)
        index = _find_event_index(group, event_id)
        event = group.events.pop(index)
        if isinstance(event, SettlementPayment):
            revoke_settlement_record(group, event.payer.name, event.recipient.name)

    logger.info(f"Group {group_id}: deleted event {event_id}")


async def settle(
    store: GroupStore,
    group_id: int,
    from_user: str,
    to_user: str,
    amount: float,
) -> SettlementPayment:
    async with store.lock.write():
        group = store.require(group_id)
        payment, record = record_settlement_payment(group, from_user, to_user, amount)
        group.events.append(payment)
        group.settled_records.append(record)

    logger.info(f"Group {group_id}: {from_user} paid {to_user} {amount:.2f}")
    return payment.model_copy(deep=True)
