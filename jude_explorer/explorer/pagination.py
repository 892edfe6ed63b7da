"""Fixed-size paging for the subject image panels."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Sequence, TypeVar, Union

import pandas as pd

PAGE_SIZE = 16

T = TypeVar("T")
Records = Union[pd.DataFrame, Sequence[T]]


def page_count(n_items: int, page_size: int = PAGE_SIZE) -> int:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(n_items / page_size)


@dataclass(frozen=True)
class Pager:
    """Current page over *total* items.

    ``page`` is always clamped into ``[0, n_pages - 1]`` (``0`` when there
    are no items).
    """

    total: int
    page: int = 0
    page_size: int = PAGE_SIZE

    def __post_init__(self) -> None:
        object.__setattr__(self, "page", self.clamp(self.page))

    @property
    def n_pages(self) -> int:
        return page_count(self.total, self.page_size)

    def clamp(self, page: int) -> int:
        return min(max(int(page), 0), max(self.n_pages - 1, 0))

    def next(self) -> "Pager":
        return replace(self, page=self.page + 1)

    def previous(self) -> "Pager":
        return replace(self, page=self.page - 1)

    @property
    def bounds(self) -> tuple[int, int]:
        start = self.page * self.page_size
        return start, min(self.total, start + self.page_size)

    @property
    def label(self) -> str:
        return f"{self.page + 1} / {self.n_pages}"


def paginate(records: Records, page: int = 0, page_size: int = PAGE_SIZE) -> Records:
    """Return the slice of *records* shown on *page* (clamped)."""
    pager = Pager(total=len(records), page=page, page_size=page_size)
    start, stop = pager.bounds
    if isinstance(records, pd.DataFrame):
        return records.iloc[start:stop]
    return records[start:stop]
