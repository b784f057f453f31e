import logging
from collections.abc import Iterable

from splitledger.models.group import Group
from splitledger.models.settlement import Settlement, SettledPairRecord
from splitledger.services.calculation_service import calculate_balances, calculate_pairwise_debts
from splitledger.utils.currency_utils import SETTLEMENT_THRESHOLD, is_significant, round_cents

logger = logging.getLogger(__name__)


def pairwise_settlements(group: Group) -> list[Settlement]:
    """
    One settlement per pair of members whose mutual debts don't cancel out.

    Each pair is netted on its own history only, so adding or removing events
    between two members never changes what anyone else is told to pay. The
    price is that transfers are never consolidated across pairs.
    Output is sorted by (from, to).
    """
    debts = calculate_pairwise_debts(group)
    names = sorted(member.name for member in group.members)

    result = []
    for i, a in enumerate(names):
        for b in names[i + 1:]:
            net = debts[a][b] - debts[b][a]
            amount = round_cents(abs(net))
            if not is_significant(amount):
                continue
            if net > 0:
                result.append(Settlement(from_user=a, to_user=b, amount=amount))
            else:
                result.append(Settlement(from_user=b, to_user=a, amount=amount))

    result.sort(key=lambda s: (s.from_user, s.to_user))
    return result


def simplified_settlements(group: Group) -> list[Settlement]:
    """
    Greedy debtor/creditor matching over net balances.
    Produces at most len(members) - 1 transfers, but a single new expense can
    reshuffle who pays whom across the whole group.
    """
    balances = calculate_balances(group)

    debtors = []
    creditors = []
    for name, amount in balances.items():
        if amount < -SETTLEMENT_THRESHOLD:
            debtors.append([name, -amount])
        elif amount > SETTLEMENT_THRESHOLD:
            creditors.append([name, amount])

    debtors.sort(key=lambda x: (-x[1], x[0]))
    creditors.sort(key=lambda x: (-x[1], x[0]))

    result = []
    i, j = 0, 0
    while i < len(debtors) and j < len(creditors):
        debtor_name, debt_amount = debtors[i]
        creditor_name, credit_amount = creditors[j]
        transfer = min(debt_amount, credit_amount)
        amount = round_cents(transfer)
        if is_significant(amount):
            result.append(Settlement(from_user=debtor_name, to_user=creditor_name, amount=amount))
        debtors[i][1] -= transfer
        creditors[j][1] -= transfer
        if debtors[i][1] < SETTLEMENT_THRESHOLD:
            i += 1
        if creditors[j][1] < SETTLEMENT_THRESHOLD:
            j += 1

    return result


def annotate_settlements(
    settlements: Iterable[Settlement],
    settled_records: Iterable[SettledPairRecord],
) -> list[Settlement]:
    """
    Mark each suggestion settled when a record exists for the same (from, to) pair.
    Only the direction of the pair is matched; the recorded amount and time are not.
    Returns new Settlement objects and leaves the inputs untouched.
    """
    settled_pairs = {(r.from_user, r.to_user) for r in settled_records}
    return [
        s.model_copy(update={"settled": (s.from_user, s.to_user) in settled_pairs})
        for s in settlements
    ]


def compute_settlements(group: Group) -> list[Settlement]:
    """Suggested transfers under the group's policy, annotated with settled state."""
    if group.simplify_debts:
        settlements = simplified_settlements(group)
    else:
        settlements = pairwise_settlements(group)

    annotated = annotate_settlements(settlements, group.settled_records)
    logger.debug(
        f"Group {group.id}: {len(annotated)} settlements "
        f"({'simplified' if group.simplify_debts else 'pairwise'}), "
        f"{sum(1 for s in annotated if s.settled)} settled"
    )
    return annotated
