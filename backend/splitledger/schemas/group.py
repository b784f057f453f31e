from pydantic import BaseModel, ConfigDict

from splitledger.models.expense import Event
from splitledger.models.member import Member
from splitledger.models.settlement import Settlement, SettledPairRecord


class GroupCreate(BaseModel):
    name: str


class GroupUpdate(BaseModel):
    name: str


class GroupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    members: list[Member] = []
    events: list[Event] = []
    simplify_debts: bool
    settled_records: list[SettledPairRecord] = []


class GroupListResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    simplify_debts: bool


class SimplifyResponse(BaseModel):
    simplify_debts: bool


class BalancesResponse(BaseModel):
    balances: dict[str, float]


class SettlementsResponse(BaseModel):
    settlements: list[Settlement]
