# ibanreg/errors.py
from __future__ import annotations

ERROR_MESSAGES: dict[str, str] = {
    "COUNTRY_CODE_REQUIRED": "country code must not be None",
    "COUNTRY_CODE_NOT_STR": "country code must be a str",
}


class InvalidArgumentError(TypeError):
    """
    Raised when a caller breaks the lookup contract (None or a non-str code).
    Unknown or malformed strings never raise; they map to -1 / False.
    """

    def __init__(self, code: str, detail: str | None = None):
        self.code = code
        message = ERROR_MESSAGES.get(code, code)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


def require_country_code(value: object) -> str:
    if value is None:
        raise InvalidArgumentError("COUNTRY_CODE_REQUIRED")
    if not isinstance(value, str):
        raise InvalidArgumentError("COUNTRY_CODE_NOT_STR", f"got {type(value).__name__}")
    return value
