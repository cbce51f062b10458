"""Accent-insensitive text normalization for station names and prize labels."""

import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: str | None) -> str:
    """Lower-case, strip Vietnamese diacritics and collapse whitespace.

    "Đà Lạt" and "da lat" both become "da lat". Never raises.
    """
    if not text:
        return ""
    # đ has no combining-mark decomposition
    lowered = text.lower().replace("đ", "d")
    decomposed = unicodedata.normalize("NFD", lowered)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _WHITESPACE.sub(" ", stripped).strip()


def normalize_token(text: str | None) -> str:
    """Normalize and keep only ``[a-z0-9]``, e.g. "TP. HCM" -> "tphcm"."""
    return _NON_ALNUM.sub("", normalize(text))
