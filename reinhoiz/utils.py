"""General utility helpers."""
from __future__ import annotations

import json
import unicodedata
from pathlib import Path
from typing import Any


def load_json(path: Path) -> Any:
    """Load a JSON document, failing loudly when it is missing."""

    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def read_text(path: Path) -> str:
    """Read a UTF-8 source file without a leading byte order mark."""

    return path.read_text(encoding="utf-8").lstrip("\ufeff")


def fold_accents(value: str) -> str:
    """Strip combining marks so that accented letters sort beside their base letter."""

    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def collation_key(value: str) -> tuple[str, str]:
    """Return a locale-aware sort key for display strings.

    Letters compare case-insensitively and without diacritics first
    (``Äpfel`` sorts next to ``Apfel``). Remaining ties put lowercase before
    uppercase and plain letters before accented ones, like ICU collation.
    """

    folded = fold_accents(value).casefold()
    return folded, value.swapcase()
