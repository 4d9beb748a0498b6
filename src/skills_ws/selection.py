"""Turn user input into the list of skill names to install."""

from __future__ import annotations

from typing import Sequence

ALL_TOKEN = "all"


def _parse_index(token: str, size: int) -> int | None:
    if not (token.isascii() and token.isdigit()):
        return None
    n = int(token)
    if 1 <= n <= size:
        return n - 1
    return None


def resolve_selection(raw_input: str, catalog_order: Sequence[str]) -> list[str]:
    """Resolve a line typed at the picker prompt.

    The line is a comma-separated list where each token is either a 1-based
    index into ``catalog_order`` or a skill name. ``all`` on its own selects
    the whole catalog. Unknown names are kept so the installer can report
    them as skipped; duplicates are kept too.

    Args:
        raw_input: The line as typed.
        catalog_order: Catalog names in display (sorted) order.

    Returns:
        list[str]: Requested names in the order given. Empty for blank input.
    """
    stripped = raw_input.strip()
    if not stripped:
        return []
    if stripped.lower() == ALL_TOKEN:
        return list(catalog_order)

    names: list[str] = []
    for token in (part.strip() for part in stripped.split(",")):
        if not token:
            continue
        index = _parse_index(token, len(catalog_order))
        names.append(catalog_order[index] if index is not None else token)
    return names


def resolve_names(names: Sequence[str], catalog_order: Sequence[str]) -> list[str]:
    """Resolve names given on the command line, without prompting.

    Only a sole ``all`` (any case) expands; everything else is taken verbatim.
    """
    cleaned = [n.strip() for n in names if n.strip()]
    if len(cleaned) == 1 and cleaned[0].lower() == ALL_TOKEN:
        return list(catalog_order)
    return cleaned
