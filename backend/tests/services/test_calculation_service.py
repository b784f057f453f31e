import pytest

from splitledger.models import Expense, Group, Member, SettlementPayment
from splitledger.services.calculation_service import calculate_balances, calculate_pairwise_debts

ALICE = Member(id=1, name="Alice")
BOB = Member(id=2, name="Bob")
CHARLIE = Member(id=3, name="Charlie")
DAVE = Member(id=4, name="Dave")


def make_group(events, members=(ALICE, BOB, CHARLIE)):
    return Group(id=1, name="Trip", members=list(members), events=events)


def expense(id, amount, payer, participants):
    return Expense(id=id, description=f"expense {id}", amount=amount, payer=payer, participants=participants)


def test_equal_split_between_two():
    """Payer is also a participant: their own share nets out."""
    group = make_group([expense(1, 50.0, ALICE, [ALICE, BOB])], members=[ALICE, BOB])
    assert calculate_balances(group) == {"Alice": 25.0, "Bob": -25.0}


def test_three_way_split():
    group = make_group([expense(1, 90.0, ALICE, [ALICE, BOB, CHARLIE])])
    assert calculate_balances(group) == {"Alice": 60.0, "Bob": -30.0, "Charlie": -30.0}


def test_multiple_expenses_accumulate():
    group = make_group(
        [expense(1, 50.0, ALICE, [ALICE, BOB]), expense(2, 30.0, BOB, [ALICE, BOB])],
        members=[ALICE, BOB],
    )
    balances = calculate_balances(group)
    assert balances["Alice"] == pytest.approx(10.0)
    assert balances["Bob"] == pytest.approx(-10.0)


def test_payer_not_participating():
    group = make_group([expense(1, 40.0, ALICE, [BOB, CHARLIE])])
    assert calculate_balances(group) == {"Alice": 40.0, "Bob": -20.0, "Charlie": -20.0}


def test_no_events_all_zero():
    group = make_group([])
    assert calculate_balances(group) == {"Alice": 0.0, "Bob": 0.0, "Charlie": 0.0}


def test_member_without_events_stays_zero():
    group = make_group([expense(1, 50.0, ALICE, [ALICE, BOB])], members=[ALICE, BOB, CHARLIE])
    assert calculate_balances(group)["Charlie"] == 0.0


def test_settlement_payment_folds_like_expense():
    """Bob paying Alice back his share zeroes both balances."""
    group = make_group(
        [
            expense(1, 50.0, ALICE, [ALICE, BOB]),
            SettlementPayment(id=2, description="Bob paid Alice", amount=25.0, payer=BOB, participants=[ALICE]),
        ],
        members=[ALICE, BOB],
    )
    assert calculate_balances(group) == {"Alice": 0.0, "Bob": 0.0}


def test_balances_sum_to_zero():
    group = make_group(
        [
            expense(1, 100.0, ALICE, [ALICE, BOB, CHARLIE]),
            expense(2, 45.5, BOB, [BOB, CHARLIE]),
            expense(3, 12.34, CHARLIE, [ALICE, BOB, CHARLIE, DAVE]),
            expense(4, 7.0, DAVE, [ALICE]),
            expense(5, 0.1, ALICE, [BOB, CHARLIE, DAVE]),
        ],
        members=[ALICE, BOB, CHARLIE, DAVE],
    )
    assert abs(sum(calculate_balances(group).values())) < 1e-9


def test_pairwise_debts_table():
    group = make_group([expense(1, 90.0, ALICE, [ALICE, BOB, CHARLIE]), expense(2, 30.0, BOB, [ALICE, BOB, CHARLIE])])
    debts = calculate_pairwise_debts(group)
    assert debts["Bob"]["Alice"] == 30.0
    assert debts["Charlie"]["Alice"] == 30.0
    assert debts["Alice"]["Bob"] == 10.0
    assert debts["Charlie"]["Bob"] == 10.0
    assert debts["Alice"]["Charlie"] == 0.0
    assert "Alice" not in debts["Alice"]
