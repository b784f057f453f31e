from collections import defaultdict

from splitledger.models.group import Group
from splitledger.utils.currency_utils import equal_share


def calculate_balances(group: Group) -> dict[str, float]:
    """
    Net balance per member name for a group.
    Positive = the group owes this member; negative = this member owes the group.

    Every event credits the payer with the full amount and debits each
    participant with an equal share. When the payer is also a participant their
    own share is credited and debited and nets out, so no special case is needed.
    Settlement payments fold in the same way (payer -> single recipient).
    """
    balances = {member.name: 0.0 for member in group.members}

    for event in group.events:
        share = equal_share(event.amount, len(event.participants))

        balances[event.payer.name] += event.amount

        for participant in event.participants:
            balances[participant.name] -= share

    return balances


def calculate_pairwise_debts(group: Group) -> dict[str, dict[str, float]]:
    """
    Directed debt table: debts[a][b] is the total a owes b across all events.
    Every ordered pair of distinct members is present, starting at 0.
    """
    names = [member.name for member in group.members]
    debts: dict[str, dict[str, float]] = defaultdict(dict)
    for a in names:
        for b in names:
            if a != b:
                debts[a][b] = 0.0

    for event in group.events:
        share = equal_share(event.amount, len(event.participants))
        payer = event.payer.name
        for participant in event.participants:
            if participant.name == payer:
                continue
            debts[participant.name][payer] += share

    return dict(debts)


# Callers outside the services package use this name.
compute_balances = calculate_balances
