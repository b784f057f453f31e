import logging
import math
from datetime import datetime, timezone

from splitledger.core.errors import InvalidExpenseError, MemberNotFoundError
from splitledger.models.expense import SETTLEMENT_CATEGORY, SettlementPayment
from splitledger.models.group import Group
from splitledger.models.settlement import SettledPairRecord

logger = logging.getLogger(__name__)


def record_settlement_payment(
    group: Group,
    from_user: str,
    to_user: str,
    amount: float,
    now: datetime | None = None,
) -> tuple[SettlementPayment, SettledPairRecord]:
    """
    Build the event and the settled-pair record for "from_user paid to_user".
    Neither is added to the group; the caller appends both under its write lock.
    """
    if not math.isfinite(amount):
        raise InvalidExpenseError("Amount must be a finite number")
    if amount <= 0:
        raise InvalidExpenseError("Amount must be positive")
    if from_user == to_user:
        raise InvalidExpenseError("Cannot settle with yourself")

    payer = group.find_member(from_user)
    if payer is None:
        raise MemberNotFoundError(f"User '{from_user}' not found")
    recipient = group.find_member(to_user)
    if recipient is None:
        raise MemberNotFoundError(f"User '{to_user}' not found")

    now = now or datetime.now(timezone.utc)
    payment = SettlementPayment(
        id=group.next_event_id(),
        description=f"{from_user} paid {to_user}",
        amount=amount,
        payer=payer,
        participants=[recipient],
        created_at=now,
        category=SETTLEMENT_CATEGORY,
    )
    record = SettledPairRecord(from_user=from_user, to_user=to_user, amount=amount, settled_at=now)
    return payment, record


def revoke_settlement_record(group: Group, from_user: str, to_user: str) -> int:
    """Drop every settled-pair record for from_user -> to_user. Returns how many were removed."""
    kept = [
        r for r in group.settled_records
        if not (r.from_user == from_user and r.to_user == to_user)
    ]
    removed = len(group.settled_records) - len(kept)
    group.settled_records = kept
    if removed:
        logger.info(f"Group {group.id}: revoked {removed} settled record(s) {from_user} -> {to_user}")
    return removed
