# ibanreg/catalog/country_codes.py
from __future__ import annotations

import logging
from bisect import bisect_left
from typing import NamedTuple

from ibanreg.catalog.validate import check_builtin_country_table
from ibanreg.errors import require_country_code
from ibanreg.schemas import CountryEntry

logger = logging.getLogger("ibanreg.catalog")


class IbanFormat(NamedTuple):
    iban_length: int
    sepa: bool


# (code, total IBAN length, SEPA member)
# Must stay sorted by code: every lookup below is a binary search.
_COUNTRY_TABLE: tuple[tuple[str, int, bool], ...] = (
    ("AD", 24, False),
    ("AE", 23, False),
    ("AL", 28, False),
    ("AO", 25, False),
    ("AT", 20, True),
    ("AZ", 28, False),
    ("BA", 20, False),
    ("BE", 16, True),
    ("BF", 27, False),
    ("BG", 22, True),
    ("BH", 22, False),
    ("BI", 16, False),
    ("BJ", 28, False),
    ("BR", 29, False),
    ("CG", 27, False),
    ("CH", 21, True),
    ("CI", 28, False),
    ("CM", 27, False),
    ("CR", 21, False),
    ("CV", 25, False),
    ("CY", 28, True),
    ("CZ", 24, True),
    ("DE", 22, True),
    ("DK", 18, True),
    ("DO", 28, False),
    ("DZ", 24, False),
    ("EE", 20, True),
    ("EG", 27, False),
    ("ES", 24, True),
    ("FI", 18, True),
    ("FO", 18, False),
    ("FR", 27, True),
    ("GA", 27, False),
    ("GB", 22, True),
    ("GE", 22, False),
    ("GI", 23, True),
    ("GL", 18, False),
    ("GR", 27, True),
    ("GT", 28, False),
    ("HR", 21, True),
    ("HU", 28, True),
    ("IE", 22, True),
    ("IL", 23, False),
    ("IR", 26, False),
    ("IS", 26, True),
    ("IT", 27, True),
    ("KW", 30, False),
    ("KZ", 20, False),
    ("LB", 28, False),
    ("LI", 21, True),
    ("LT", 20, True),
    ("LU", 20, True),
    ("LV", 21, True),
    ("MC", 27, True),
    ("MD", 24, False),
    ("ME", 22, False),
    ("MG", 27, False),
    ("MK", 19, False),
    ("ML", 28, False),
    ("MR", 27, False),
    ("MT", 31, True),
    ("MU", 30, False),
    ("MZ", 25, False),
    ("NL", 18, True),
    ("NO", 15, True),
    ("PK", 24, False),
    ("PL", 28, True),
    ("PS", 29, False),
    ("PT", 25, True),
    ("QA", 29, False),
    ("RO", 24, True),
    ("RS", 22, False),
    ("SA", 24, False),
    ("SE", 24, True),
    ("SI", 19, True),
    ("SK", 24, True),
    ("SM", 27, False),
    ("SN", 28, False),
    ("TN", 24, False),
    ("TR", 26, False),
    ("UA", 29, False),
    ("VG", 24, False),
)

COUNTRY_CODES: tuple[str, ...] = tuple(row[0] for row in _COUNTRY_TABLE)
COUNTRY_IBAN_FORMATS: tuple[IbanFormat, ...] = tuple(IbanFormat(row[1], row[2]) for row in _COUNTRY_TABLE)
SEPA_COUNTRY_CODES: tuple[str, ...] = tuple(
    code for code, fmt in zip(COUNTRY_CODES, COUNTRY_IBAN_FORMATS) if fmt.sepa
)


def _index_of(code: str) -> int:
    i = bisect_left(COUNTRY_CODES, code)
    if i < len(COUNTRY_CODES) and COUNTRY_CODES[i] == code:
        return i
    return -1


def length_for_country_code(code: str) -> int:
    """
    Total IBAN length for `code`, or -1 if it is not a known,
    uppercase, two-letter country code.

    Raises InvalidArgumentError for None.
    """
    i = _index_of(require_country_code(code))
    if i < 0:
        return -1
    return COUNTRY_IBAN_FORMATS[i].iban_length


def is_sepa_country(code: str) -> bool:
    """
    True only for known SEPA countries. Unknown codes are False too;
    use is_known_country_code() to tell the two apart.

    Raises InvalidArgumentError for None.
    """
    i = _index_of(require_country_code(code))
    if i < 0:
        return False
    return COUNTRY_IBAN_FORMATS[i].sepa


def is_known_country_code(code: object) -> bool:
    if not isinstance(code, str) or len(code) != 2:
        return False
    return _index_of(code) >= 0


def known_country_codes() -> tuple[str, ...]:
    return COUNTRY_CODES


def sepa_country_codes() -> tuple[str, ...]:
    return SEPA_COUNTRY_CODES


def country_entry(code: str) -> CountryEntry | None:
    i = _index_of(require_country_code(code))
    if i < 0:
        return None
    fmt = COUNTRY_IBAN_FORMATS[i]
    return CountryEntry(code=COUNTRY_CODES[i], iban_length=fmt.iban_length, sepa=fmt.sepa)


check_builtin_country_table(COUNTRY_CODES, COUNTRY_IBAN_FORMATS)

logger.info(
    "iban country registry loaded: countries=%s sepa=%s",
    len(COUNTRY_CODES),
    len(SEPA_COUNTRY_CODES),
)
