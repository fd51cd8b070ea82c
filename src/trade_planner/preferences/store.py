"""JSON file store for the persisted account size preference."""

from __future__ import annotations

import json
import math
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from trade_planner.utils.logging import get_logger

ACCOUNT_SIZE_KEY = "accountSize"


def _parse_positive_decimal(value: str) -> Decimal | None:
    try:
        parsed = Decimal(value.strip())
    except (InvalidOperation, AttributeError):
        return None
    if not parsed.is_finite() or parsed <= 0:
        return None
    return parsed


class PreferenceStore:
    """Single-key preference file holding the account size as decimal text."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._logger = get_logger("trade_planner.preferences")

    @property
    def path(self) -> Path:
        return self._path

    def load_account_size(self, default: float | str) -> str:
        """Return the stored account size, or ``default`` as text."""
        fallback = str(default)
        data = self._read()
        stored = data.get(ACCOUNT_SIZE_KEY)
        if not isinstance(stored, str) or _parse_positive_decimal(stored) is None:
            if stored is not None:
                self._logger.warning(
                    "preference_invalid",
                    key=ACCOUNT_SIZE_KEY,
                    value=stored,
                    fallback=fallback,
                )
            return fallback
        return stored.strip()

    def save_account_size(self, value: str) -> bool:
        """Persist ``value`` if it is a positive decimal. Returns whether it was written."""
        if _parse_positive_decimal(value) is None:
            self._logger.info("preference_rejected", key=ACCOUNT_SIZE_KEY, value=value)
            return False
        data = self._read()
        data[ACCOUNT_SIZE_KEY] = value.strip()
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, ensure_ascii=True) + "\n", encoding="utf-8")
        self._logger.info("preference_saved", key=ACCOUNT_SIZE_KEY, path=str(self._path))
        return True

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            decoded = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            self._logger.warning("preference_file_unreadable", path=str(self._path), error=str(exc))
            return {}
        if not isinstance(decoded, dict):
            self._logger.warning("preference_file_not_object", path=str(self._path))
            return {}
        return decoded


def account_size_as_float(text: str) -> float:
    """Convert account size text to a float; non-numeric text gives NaN."""
    try:
        return float(Decimal(text.strip()))
    except (InvalidOperation, AttributeError):
        return math.nan
