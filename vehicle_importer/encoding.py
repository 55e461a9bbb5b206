"""
String encodings for packing lists into single spreadsheet cells.

``|`` separates list entries and ``:`` separates name from price inside an
entry. Neither character is escaped: a name or price containing one of them
does not survive a decode unchanged.
"""
import re
from typing import Iterable, List, Tuple

LIST_SEPARATOR = "|"
PAIR_SEPARATOR = ":"

_LIST_SPLIT_RE = re.compile(r"\r?\n|\|")


def normalize_list_field(text: str) -> str:
    """Turn multi-line free text into a pipe-joined list of trimmed entries.

    >>> normalize_list_field("a\\nb\\n\\n c ")
    'a|b|c'
    """
    if not text:
        return ""
    parts = (part.strip() for part in _LIST_SPLIT_RE.split(text))
    return LIST_SEPARATOR.join(p for p in parts if p)


def encode_entity_list(items: Iterable, name_field: str, price_field: str) -> str:
    """Encode items as ``name:price`` pairs joined by ``|``.

    Items whose name is blank are skipped.
    """
    pairs = []
    for item in items:
        name = (getattr(item, name_field) or "").strip()
        if not name:
            continue
        price = (getattr(item, price_field) or "").strip()
        pairs.append(f"{name}{PAIR_SEPARATOR}{price}")
    return LIST_SEPARATOR.join(pairs)


def decode_entity_list(text: str) -> List[Tuple[str, str]]:
    """Split an encoded cell back into ``(name, price)`` pairs."""
    if not text:
        return []
    pairs = []
    for segment in text.split(LIST_SEPARATOR):
        name, _, price = segment.partition(PAIR_SEPARATOR)
        pairs.append((name, price))
    return pairs
