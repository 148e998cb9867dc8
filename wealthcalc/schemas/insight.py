"""Data contracts for narrative insights."""

from pydantic import BaseModel, ConfigDict, Field


class Insight(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    analysis: str
    pro_tip: str = Field(..., alias="proTip")
    warning: str
