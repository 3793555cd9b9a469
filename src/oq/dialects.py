"""
Dialect keyword tables.

Every supported human language gets one table mapping the surface spelling of a
keyword to a :class:`KeywordEntry`. All tables funnel into the same token kinds
and the same canonical spellings, so ``let``, ``olsun`` and ``болсын`` all
become a ``LET`` token whose canonical text is ``"let"`` and the parser never
needs to know which dialect was active.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .oq_token import (
    IDENT, FUNCTION, LET, TRUE, FALSE, IF, ELSE, ELSIF, RETURN, AND, OR, FOR, WHILE,
)


@dataclass(frozen=True)
class KeywordEntry:
    kind: str
    canonical: str


def _table(spellings: Dict[str, KeywordEntry]) -> Mapping[str, KeywordEntry]:
    return MappingProxyType(dict(spellings))


ENG_KEYWORDS = _table({
    "fn": KeywordEntry(FUNCTION, "fn"),
    "let": KeywordEntry(LET, "let"),
    "true": KeywordEntry(TRUE, "true"),
    "false": KeywordEntry(FALSE, "false"),
    "if": KeywordEntry(IF, "if"),
    "else": KeywordEntry(ELSE, "else"),
    "elsif": KeywordEntry(ELSIF, "elsif"),
    "return": KeywordEntry(RETURN, "return"),
    "and": KeywordEntry(AND, "and"),
    "or": KeywordEntry(OR, "or"),
    "for": KeywordEntry(FOR, "for"),
    "while": KeywordEntry(WHILE, "while"),
})

# Turkish
TRK_KEYWORDS = _table({
    "fn": KeywordEntry(FUNCTION, "fn"),
    "olsun": KeywordEntry(LET, "let"),
    "doğru": KeywordEntry(TRUE, "true"),
    "yanlış": KeywordEntry(FALSE, "false"),
    "eğer": KeywordEntry(IF, "if"),
    "yoksa": KeywordEntry(ELSE, "else"),
    "yok_eğer": KeywordEntry(ELSIF, "elsif"),
    "döndür": KeywordEntry(RETURN, "return"),
    "ve": KeywordEntry(AND, "and"),
    "veya": KeywordEntry(OR, "or"),
    "için": KeywordEntry(FOR, "for"),
    "iken": KeywordEntry(WHILE, "while"),
})

# Kazakh (Cyrillic)
QZQ_KEYWORDS = _table({
    "фн": KeywordEntry(FUNCTION, "fn"),
    "болсын": KeywordEntry(LET, "let"),
    "шын": KeywordEntry(TRUE, "true"),
    "жалған": KeywordEntry(FALSE, "false"),
    "егер": KeywordEntry(IF, "if"),
    "әйтпесе": KeywordEntry(ELSE, "else"),
    "егер_әйтпесе": KeywordEntry(ELSIF, "elsif"),
    "қайтару": KeywordEntry(RETURN, "return"),
    "және": KeywordEntry(AND, "and"),
    "немесе": KeywordEntry(OR, "or"),
    "үшін": KeywordEntry(FOR, "for"),
    "уақытша": KeywordEntry(WHILE, "while"),
})

DEFAULT_DIALECT = "eng"

DIALECTS: Mapping[str, Mapping[str, KeywordEntry]] = MappingProxyType({
    "eng": ENG_KEYWORDS,
    "trk": TRK_KEYWORDS,
    "qzq": QZQ_KEYWORDS,
})


def available_dialects() -> List[str]:
    return list(DIALECTS)


def get_dialect(name: str) -> Optional[Mapping[str, KeywordEntry]]:
    """Return the keyword table registered under ``name`` (case-sensitive)."""
    return DIALECTS.get(name)


def lookup_ident(ident: str, keywords: Mapping[str, KeywordEntry]) -> KeywordEntry:
    """Classify ``ident`` against the active table.

    Keywords come back with their canonical spelling; anything else is an
    identifier whose canonical spelling is the identifier itself.
    """
    entry = keywords.get(ident)
    if entry is not None:
        return entry
    return KeywordEntry(IDENT, ident)
