"""ProductCategory — a catalog section products are filed under."""

from __future__ import annotations

import re
from dataclasses import dataclass

_CYRILLIC = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "e",
    "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k", "л": "l", "м": "m",
    "н": "n", "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "h", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "sch",
    "ъ": "", "ы": "y", "ь": "", "э": "e", "ю": "yu", "я": "ya",
}


def slugify(name: str) -> str:
    """URL-safe slug of a category name, transliterating Russian letters.

    >>> slugify("Стиральные машины")
    'stiralnye-mashiny'
    """
    text = "".join(_CYRILLIC.get(ch, ch) for ch in name.lower())
    text = re.sub(r"[^a-z0-9\s-]", "", text)
    text = re.sub(r"\s+", "-", text.strip())
    return re.sub(r"-+", "-", text).strip("-")


@dataclass(frozen=True)
class ProductCategory:
    id: str
    name: str
    slug: str

    def matches(self, key: str) -> bool:
        """A category can be addressed by id or by slug."""
        return key in (self.id, self.slug)
