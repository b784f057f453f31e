from datetime import datetime, timezone

import pytest

from splitledger.core.errors import InvalidExpenseError, MemberNotFoundError
from splitledger.models import Expense, Group, Member, SettledPairRecord, SettlementPayment, SETTLEMENT_CATEGORY
from splitledger.services.payment_service import record_settlement_payment, revoke_settlement_record

ALICE = Member(id=1, name="Alice")
BOB = Member(id=2, name="Bob")
CHARLIE = Member(id=3, name="Charlie")

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_group(records=None):
    return Group(
        id=1,
        name="Trip",
        members=[ALICE, BOB, CHARLIE],
        events=[
            Expense(id=1, description="Dinner", amount=90.0, payer=ALICE, participants=[ALICE, BOB, CHARLIE]),
            Expense(id=4, description="Taxi", amount=30.0, payer=BOB, participants=[ALICE, BOB, CHARLIE]),
        ],
        settled_records=records or [],
    )


def test_record_builds_event_and_record():
    group = make_group()
    payment, record = record_settlement_payment(group, "Bob", "Alice", 20.0, now=NOW)

    assert isinstance(payment, SettlementPayment)
    assert payment.id == 5
    assert payment.description == "Bob paid Alice"
    assert payment.amount == 20.0
    assert payment.payer == BOB
    assert payment.participants == [ALICE]
    assert payment.recipient == ALICE
    assert payment.category == SETTLEMENT_CATEGORY
    assert payment.created_at == NOW

    assert record == SettledPairRecord(from_user="Bob", to_user="Alice", amount=20.0, settled_at=NOW)


def test_record_does_not_modify_group():
    group = make_group()
    record_settlement_payment(group, "Bob", "Alice", 20.0)
    assert len(group.events) == 2
    assert group.settled_records == []


def test_record_defaults_to_current_time():
    before = datetime.now(timezone.utc)
    payment, record = record_settlement_payment(make_group(), "Bob", "Alice", 20.0)
    assert payment.created_at >= before
    assert record.settled_at == payment.created_at


@pytest.mark.parametrize("amount", [0.0, -5.0])
def test_record_rejects_non_positive_amount(amount):
    with pytest.raises(InvalidExpenseError, match="positive"):
        record_settlement_payment(make_group(), "Bob", "Alice", amount)


def test_record_rejects_self_settlement():
    with pytest.raises(InvalidExpenseError, match="yourself"):
        record_settlement_payment(make_group(), "Bob", "Bob", 10.0)


def test_record_rejects_unknown_member():
    with pytest.raises(MemberNotFoundError, match="Zoe"):
        record_settlement_payment(make_group(), "Zoe", "Alice", 10.0)
    with pytest.raises(MemberNotFoundError, match="Zoe"):
        record_settlement_payment(make_group(), "Alice", "Zoe", 10.0)


def test_revoke_removes_all_matching_records():
    group = make_group(records=[
        SettledPairRecord(from_user="Bob", to_user="Alice", amount=20.0, settled_at=NOW),
        SettledPairRecord(from_user="Alice", to_user="Bob", amount=5.0, settled_at=NOW),
        SettledPairRecord(from_user="Bob", to_user="Alice", amount=3.0, settled_at=NOW),
        SettledPairRecord(from_user="Charlie", to_user="Alice", amount=30.0, settled_at=NOW),
    ])
    assert revoke_settlement_record(group, "Bob", "Alice") == 2
    assert [(r.from_user, r.to_user) for r in group.settled_records] == [("Alice", "Bob"), ("Charlie", "Alice")]


def test_revoke_without_match_is_noop():
    group = make_group()
    assert revoke_settlement_record(group, "Bob", "Alice") == 0
    assert group.settled_records == []


@pytest.mark.parametrize("amount", [float("inf"), float("-inf"), float("nan")])
def test_record_rejects_non_finite_amount(amount):
    with pytest.raises(InvalidExpenseError, match="finite"):
        record_settlement_payment(make_group(), "Bob", "Alice", amount)
