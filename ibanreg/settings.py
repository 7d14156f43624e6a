# ibanreg/settings.py
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ibanreg.schemas import IBAN_MAX_LENGTH


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="IBANREG_",
        extra="ignore",
    )

    # -----------------------
    # Explicit startup check (validate_country_registry_startup)
    # The built-in table is always checked at import, independent of these.
    # -----------------------
    STARTUP_VALIDATION: bool = True
    STRICT_VALIDATION: bool = True

    # 0 disables the count check
    EXPECTED_COUNTRY_COUNT: int = Field(default=82, ge=0)
    MAX_IBAN_LENGTH: int = Field(default=IBAN_MAX_LENGTH, ge=1, le=IBAN_MAX_LENGTH)


settings = Settings()
