from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class SettledPairRecord(BaseModel):
    from_user: str
    to_user: str
    amount: float
    settled_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Settlement(BaseModel):
    """Suggested transfer. Serialised with ``from``/``to`` keys."""

    model_config = ConfigDict(populate_by_name=True)

    from_user: str = Field(alias="from")
    to_user: str = Field(alias="to")
    amount: float
    settled: bool = False
