# ibanreg/catalog/validate.py
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ibanreg.schemas import IBAN_MAX_LENGTH

logger = logging.getLogger("ibanreg.catalog")

BUILTIN_COUNTRY_COUNT = 82


def _is_country_code(value: object) -> bool:
    return (
        isinstance(value, str)
        and len(value) == 2
        and all("A" <= ch <= "Z" for ch in value)
    )


def _sorted_csv(items: Iterable[str]) -> str:
    return ", ".join(sorted(set(items)))


def validate_country_table(
    codes: Sequence[str],
    entries: Sequence[tuple[int, bool]],
    *,
    expected_count: int | None = None,
    max_length: int | None = None,
) -> list[str]:
    """
    Check the static registry tables and return every problem found.

    entries are (iban_length, sepa) pairs, index-aligned with codes.
    An empty list means the tables are safe to binary-search.
    """
    problems: list[str] = []
    upper = max_length if max_length is not None else IBAN_MAX_LENGTH

    if len(codes) != len(entries):
        problems.append(f"table size mismatch: codes={len(codes)} entries={len(entries)}")

    bad_codes = [repr(c) for c in codes if not _is_country_code(c)]
    if bad_codes:
        problems.append(f"malformed country codes: {_sorted_csv(bad_codes)}")

    # malformed codes are already reported above
    seen: set[str] = set()
    dupes: set[str] = set()
    for code in codes:
        if not _is_country_code(code):
            continue
        if code in seen:
            dupes.add(code)
        seen.add(code)
    if dupes:
        problems.append(f"duplicate country codes: {_sorted_csv(dupes)}")

    for prev, cur in zip(codes, codes[1:]):
        if not (_is_country_code(prev) and _is_country_code(cur)):
            continue
        if prev >= cur:
            problems.append(f"country codes not strictly ascending: {prev} before {cur}")

    for code, entry in zip(codes, entries):
        if not isinstance(entry, (tuple, list)) or len(entry) != 2:
            problems.append(f"{code!r}: entry {entry!r} is not an (iban_length, sepa) pair")
            continue
        length, sepa = entry
        if isinstance(length, bool) or not isinstance(length, int) or not 1 <= length <= upper:
            problems.append(f"{code}: iban length {length!r} outside 1..{upper}")
        if not isinstance(sepa, bool):
            problems.append(f"{code}: sepa flag {sepa!r} is not a bool")

    if expected_count and len(codes) != expected_count:
        problems.append(f"expected {expected_count} countries, found {len(codes)}")

    return problems


def check_builtin_country_table(
    codes: Sequence[str],
    entries: Sequence[tuple[int, bool]],
) -> None:
    """
    Import-time guard for the shipped table. Fixed limits, always raises;
    environment and .env settings have no say here.
    """
    problems = validate_country_table(
        codes,
        entries,
        expected_count=BUILTIN_COUNTRY_COUNT,
        max_length=IBAN_MAX_LENGTH,
    )
    if problems:
        raise RuntimeError(
            "Built-in country code table is corrupt. " + "; ".join(problems)
        )


def validate_country_registry_startup(
    codes: Sequence[str] | None = None,
    entries: Sequence[tuple[int, bool]] | None = None,
) -> None:
    """
    Fail-fast check of registry tables, driven by settings.

    Rules:
      - skipped entirely when IBANREG_STARTUP_VALIDATION is off
      - strict: raise RuntimeError listing all problems
      - non-strict: log each problem and carry on
      - no tables given: check the live registry
    """
    from ibanreg.settings import settings

    if not settings.STARTUP_VALIDATION:
        return

    if codes is None or entries is None:
        from ibanreg.catalog.country_codes import COUNTRY_CODES, COUNTRY_IBAN_FORMATS

        codes = COUNTRY_CODES
        entries = COUNTRY_IBAN_FORMATS

    strict = bool(settings.STRICT_VALIDATION)
    problems = validate_country_table(
        codes,
        entries,
        expected_count=settings.EXPECTED_COUNTRY_COUNT,
        max_length=settings.MAX_IBAN_LENGTH,
    )

    logger.info(
        "country registry startup check: strict=%s countries=%s problems=%s",
        strict,
        len(codes),
        len(problems),
    )

    if not problems:
        return

    if strict:
        raise RuntimeError(
            "Country code registry validation failed. " + "; ".join(problems)
        )

    for problem in problems:
        logger.warning("country registry problem: %s", problem)
