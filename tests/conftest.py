# tests/conftest.py

import pytest

from ibanreg.settings import settings


# Hand-checked against the published IBAN registry; kept separate from the
# library table so a bad edit there shows up as a test failure.
REFERENCE_COUNTRIES = [
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
]


@pytest.fixture
def reference_countries():
    return list(REFERENCE_COUNTRIES)


@pytest.fixture
def registry_settings(monkeypatch):
    """Reset the startup check settings to their defaults for one test."""
    monkeypatch.setattr(settings, "STARTUP_VALIDATION", True, raising=False)
    monkeypatch.setattr(settings, "STRICT_VALIDATION", True, raising=False)
    monkeypatch.setattr(settings, "EXPECTED_COUNTRY_COUNT", 82, raising=False)
    monkeypatch.setattr(settings, "MAX_IBAN_LENGTH", 34, raising=False)
    return settings
