import math
import re
import unicodedata
from functools import lru_cache
from typing import Any, Iterable, Optional

# Largest integer the persistence layer uses to mean "no upper limit".
UNBOUNDED_SENTINEL = 2 ** 53 - 1

_SEPARATORS = re.compile(r"[_/\-&,.;:()]+")


def normalize_text(value: Any) -> str:
    """
    Lowercase, strip accents and collapse separators/whitespace.

    "Café_QSR" -> "cafe qsr", "HSR Layout, Sector-2" -> "hsr layout sector 2".
    Non-string input normalizes to an empty string.
    """
    if not isinstance(value, str):
        return ""
    lowered = unicodedata.normalize("NFKD", value.strip().lower())
    ascii_text = "".join(ch for ch in lowered if not unicodedata.combining(ch))
    ascii_text = _SEPARATORS.sub(" ", ascii_text)
    return " ".join(ascii_text.split())


@lru_cache(maxsize=512)
def _phrase_pattern(phrase: str) -> "re.Pattern[str]":
    return re.compile(r"(?<![a-z0-9])" + re.escape(phrase) + r"(?![a-z0-9])")


def contains_phrase(haystack: str, needle: str) -> bool:
    """
    Whole-phrase containment over already-normalized text.

    "hsr" is found in "456 test street hsr layout" but not in "hsrx road";
    an empty needle never matches.
    """
    if not needle or not haystack:
        return False
    return _phrase_pattern(needle).search(haystack) is not None


def contains_any_phrase(haystack: str, needles: Iterable[str]) -> bool:
    return any(contains_phrase(haystack, needle) for needle in needles)


def safe_float(value: Any) -> Optional[float]:
    """Coerce to a finite float, or None if the value is missing or unparseable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).replace(",", "")) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def bound_or_none(value: Any) -> Optional[float]:
    """
    Normalize a band bound: missing, zero, negative, infinite or the
    "no limit" sentinel all mean unconstrained (None).
    """
    number = safe_float(value)
    if number is None or number <= 0:
        return None
    if math.isinf(number) or number >= UNBOUNDED_SENTINEL:
        return None
    return number


def clamp_score(value: float) -> int:
    """Round half-up and clamp to the 0-100 integer score range."""
    if value is None or math.isnan(value):
        return 0
    return max(0, min(100, int(math.floor(value + 0.5))))
