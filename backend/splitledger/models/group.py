from pydantic import BaseModel, Field

from splitledger.models.expense import Event
from splitledger.models.member import Member
from splitledger.models.settlement import SettledPairRecord


class Group(BaseModel):
    id: int
    name: str
    members: list[Member] = Field(default_factory=list)
    events: list[Event] = Field(default_factory=list)
    simplify_debts: bool = False
    settled_records: list[SettledPairRecord] = Field(default_factory=list)

    def find_member(self, name: str) -> Member | None:
        for member in self.members:
            if member.name == name:
                return member
        return None

    def next_event_id(self) -> int:
        return max((e.id for e in self.events), default=0) + 1

    def next_member_id(self) -> int:
        return max((m.id for m in self.members), default=0) + 1

