"""
Id-list helpers for the loose references between tables (car crew and
services, package contents). Unknown ids are skipped, never an error.
"""

from typing import Iterable, List, Optional, Sequence, TypeVar

from .models import EntityRow

RowT = TypeVar("RowT", bound=EntityRow)


def resolve_by_ids(ids: Optional[Iterable[str]], rows: Sequence[RowT]) -> List[RowT]:
    """Rows matching ids, in id order; dangling ids are omitted"""
    if not ids:
        return []
    by_id = {row.id: row for row in rows}
    return [by_id[i] for i in ids if i in by_id]


def names_for_ids(ids: Optional[Iterable[str]], rows: Sequence[RowT]) -> List[str]:
    return [getattr(row, "name") for row in resolve_by_ids(ids, rows)]


def toggle_id(ids: Optional[Sequence[str]], item_id: str) -> List[str]:
    """Remove item_id if present, otherwise append it. Returns a new list."""
    current = list(ids or [])
    if item_id in current:
        return [i for i in current if i != item_id]
    return current + [item_id]
