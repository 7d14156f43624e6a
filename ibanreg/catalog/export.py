# ibanreg/catalog/export.py
from __future__ import annotations

from ibanreg.catalog.country_codes import COUNTRY_CODES, COUNTRY_IBAN_FORMATS
from ibanreg.schemas import CountryCatalog, CountryCatalogItem


def country_code_catalog(*, sepa_only: bool = False) -> dict:
    countries = []
    for code, fmt in zip(COUNTRY_CODES, COUNTRY_IBAN_FORMATS):
        if sepa_only and not fmt.sepa:
            continue
        countries.append(
            CountryCatalogItem(
                country=code,
                iban_length=fmt.iban_length,
                sepa=fmt.sepa,
            )
        )
    catalog = CountryCatalog(
        count=len(countries),
        sepa_count=sum(1 for item in countries if item.sepa),
        countries=countries,
    )
    return catalog.model_dump()
