from splitledger.models.member import Member
from splitledger.models.expense import Event, Expense, SettlementPayment, SETTLEMENT_CATEGORY
from splitledger.models.settlement import Settlement, SettledPairRecord
from splitledger.models.group import Group

__all__ = [
    "Member", "Group",
    "Event", "Expense", "SettlementPayment", "SETTLEMENT_CATEGORY",
    "Settlement", "SettledPairRecord",
]
