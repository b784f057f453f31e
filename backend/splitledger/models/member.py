from pydantic import BaseModel, ConfigDict


class Member(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
