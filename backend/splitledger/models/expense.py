from datetime import datetime, timezone
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from splitledger.models.member import Member

SETTLEMENT_CATEGORY = "Settlement"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class _EventBase(BaseModel):
    id: int
    description: str
    amount: float = Field(gt=0, allow_inf_nan=False)
    payer: Member
    participants: list[Member] = Field(min_length=1)
    created_at: datetime = Field(default_factory=_utcnow)
    category: str | None = None
    notes: str | None = None

    def involves(self, name: str) -> bool:
        return self.payer.name == name or any(p.name == name for p in self.participants)


class Expense(_EventBase):
    kind: Literal["expense"] = "expense"


class SettlementPayment(_EventBase):
    """A transfer between two members, folded into balances like an expense
    with the recipient as its only participant."""

    kind: Literal["settlement"] = "settlement"
    participants: list[Member] = Field(min_length=1, max_length=1)
    category: str | None = SETTLEMENT_CATEGORY

    @property
    def recipient(self) -> Member:
        return self.participants[0]


Event = Annotated[Union[Expense, SettlementPayment], Field(discriminator="kind")]
