import math
from dataclasses import dataclass

from config import ApplicationConfig
from src.app.use_cases.common import PaginationMeta


@dataclass(frozen=True)
class PageRequest:
    """1-indexed page with a bounded page size"""

    page: int = 1
    limit: int = ApplicationConfig.DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if not 1 <= self.limit <= ApplicationConfig.MAX_PAGE_SIZE:
            raise ValueError(
                f"limit must be between 1 and {ApplicationConfig.MAX_PAGE_SIZE}"
            )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def build_pagination(page: PageRequest, total: int) -> PaginationMeta:
    total_pages = math.ceil(total / page.limit)
    return PaginationMeta(
        page=page.page,
        limit=page.limit,
        total=total,
        total_pages=total_pages,
        has_next=page.page < total_pages,
        has_prev=page.page > 1,
    )
