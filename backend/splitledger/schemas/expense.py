from pydantic import BaseModel, ConfigDict, Field, FiniteFloat


class ExpenseCreate(BaseModel):
    description: str
    amount: FiniteFloat
    payer: str
    participants: list[str]
    category: str | None = None
    notes: str | None = None


class ExpenseUpdate(ExpenseCreate):
    pass


class SettleRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    from_user: str = Field(alias="from")
    to_user: str = Field(alias="to")
    amount: FiniteFloat
