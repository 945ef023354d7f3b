"""Paging metadata derived from a search response."""

from __future__ import annotations

from dataclasses import dataclass, field

from issue_tracker_interface.errors import InvalidArgumentError


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


@dataclass(frozen=True)
class Pagination:
    """
    total, start_at and max_results are the raw values reported by the tracker.
    page, page_count and pages are derived in __post_init__ and cannot be passed in.

    pages is the zero-based index sequence 0 .. page_count-1, handy for rendering
    a pager; it is not a list of page numbers relative to page.
    """

    total: int
    start_at: int
    max_results: int
    page: int = field(init=False)
    page_count: int = field(init=False)
    pages: tuple[int, ...] = field(init=False)

    def __post_init__(self) -> None:
        if self.max_results <= 0:
            raise InvalidArgumentError(f"max_results must be positive, got {self.max_results}")
        if self.total < 0:
            raise InvalidArgumentError(f"total must not be negative, got {self.total}")
        if self.start_at < 0:
            raise InvalidArgumentError(f"start_at must not be negative, got {self.start_at}")

        page_count = _ceil_div(self.total, self.max_results)
        #frozen dataclass, so derived fields are written through object.__setattr__
        object.__setattr__(self, "page_count", page_count)
        object.__setattr__(self, "page", _ceil_div(self.start_at, self.max_results))
        object.__setattr__(self, "pages", tuple(range(page_count)))


def compute_pagination(total: int, start_at: int, max_results: int) -> Pagination:
    """Return paging metadata for a result window.

    Args:
        total:       Total number of results the tracker reported.
        start_at:    Offset of the first result in the window.
        max_results: Page size. Must be positive.

    Raises:
        InvalidArgumentError: If max_results is not positive or total/start_at are negative.
    """
    return Pagination(total=total, start_at=start_at, max_results=max_results)
