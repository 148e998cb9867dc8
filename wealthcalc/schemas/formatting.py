"""Data contracts for the currency formatting endpoint."""

from pydantic import BaseModel, ConfigDict


class CurrencyFormatRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    value: float


class CurrencyFormatResponse(BaseModel):
    formatted: str
    words: str
