# ibanreg/schemas.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

IBAN_MAX_LENGTH = 34


# -------- REGISTRY --------
class CountryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = Field(pattern="^[A-Z]{2}$")
    iban_length: int = Field(ge=1, le=IBAN_MAX_LENGTH)
    sepa: bool


# -------- CATALOG EXPORT --------
class CountryCatalogItem(BaseModel):
    country: str = Field(pattern="^[A-Z]{2}$")
    iban_length: int = Field(ge=1, le=IBAN_MAX_LENGTH)
    sepa: bool


class CountryCatalog(BaseModel):
    count: int = Field(ge=0)
    sepa_count: int = Field(ge=0)
    countries: List[CountryCatalogItem]
