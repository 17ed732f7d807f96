"""Page-number pagination helpers shared by the list endpoints."""

from dataclasses import dataclass

from blockboard.domain.exceptions import ValidationError

# Largest OFFSET/LIMIT every supported driver binds as a 32-bit integer
MAX_OFFSET = 2**31 - 1


@dataclass(frozen=True)
class PageRequest:
    """A validated 1-indexed page request."""

    page: int
    per_page: int

    @classmethod
    def of(cls, page: int, per_page: int) -> "PageRequest":
        if per_page < 1:
            raise ValidationError("posts_per_page must be at least 1", field="posts_per_page")
        if per_page > MAX_OFFSET:
            raise ValidationError(
                f"posts_per_page must be at most {MAX_OFFSET}", field="posts_per_page"
            )
        if page < 1:
            raise ValidationError("page must be at least 1", field="page")
        if (page - 1) * per_page > MAX_OFFSET:
            raise ValidationError("page is out of range", field="page")
        return cls(page=page, per_page=per_page)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.per_page


def count_pages(total: int, per_page: int) -> int:
    """ceil(total / per_page) without floats."""
    return -(-total // per_page)
