"""
Screening Paginator

Slices an ordered screening sequence into fixed-size pages (1-based).
"""

from math import ceil
from typing import Generic, List, Sequence, TypeVar

import attrs

from src.platform.exception.exceptions import ValidationError


_T = TypeVar('_T')


@attrs.define(frozen=True)
class Page(Generic[_T]):
    number: int
    max_page: int
    items: List[_T]


@attrs.define(frozen=True)
class ScreeningPaginator(Generic[_T]):
    items: Sequence[_T]
    page_size: int = 6

    @property
    def max_page(self) -> int:
        return ceil(len(self.items) / self.page_size)

    def paginate(self, page: int) -> Page[_T]:
        """
        An empty sequence still has an (empty) page 1.

        Raises:
            ValidationError: When the page is below 1 or beyond the last page
        """
        last_page = max(self.max_page, 1)
        if page < 1 or page > last_page:
            raise ValidationError(f'Page {page} is out of range (1-{last_page})')
        start = (page - 1) * self.page_size
        return Page(
            number=page,
            max_page=last_page,
            items=list(self.items[start : start + self.page_size]),
        )
