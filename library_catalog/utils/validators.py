import re
from typing import Optional

# Sentinels typed at a prompt to abandon the current action
CANCEL_TEXT = "0"
CANCEL_USER_ID = {"x", "X"}

# Plain ASCII digits with an optional minus sign; no "+", "_" or other numerals
_USER_ID_RE = re.compile(r"-?[0-9]+")


class InputValidator:
    """Validation for raw prompt input before it reaches the library core."""

    @staticmethod
    def is_cancel(text: Optional[str]) -> bool:
        return text == CANCEL_TEXT

    @staticmethod
    def is_cancel_user_id(text: Optional[str]) -> bool:
        return text is not None and text.strip() in CANCEL_USER_ID

    @staticmethod
    def parse_user_id(text: str) -> int:
        """Parse a user id typed at a prompt. Raises ValueError if it is not a plain whole number."""
        raw = (text or "").strip()
        if not _USER_ID_RE.fullmatch(raw):
            raise ValueError(f"User ID must be a whole number, got {raw!r}.")
        return int(raw)

    @staticmethod
    def is_valid_role_selector(text: Optional[str]) -> bool:
        return text is not None and text.strip() in ("1", "2")
