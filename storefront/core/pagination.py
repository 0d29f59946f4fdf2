import math
from typing import List, Union

ELLIPSIS = "ellipsis"
MAX_VISIBLE_PAGES = 5

PageNumber = Union[int, str]


def offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    if limit <= 0:
        return 0
    return math.ceil(total / limit)


def get_page_numbers(current_page: int, pages: int) -> List[PageNumber]:
    """Page strip for a pager, e.g. ``[1, "ellipsis", 4, 5, 6, "ellipsis", 10]``.

    Shows every page when there are at most five, otherwise the first and
    last page around a window near ``current_page``.
    """
    if pages <= MAX_VISIBLE_PAGES:
        return list(range(1, pages + 1))

    if current_page <= 3:
        return [1, 2, 3, 4, ELLIPSIS, pages]

    if current_page >= pages - 2:
        return [1, ELLIPSIS] + list(range(pages - 3, pages + 1))

    return [
        1,
        ELLIPSIS,
        current_page - 1,
        current_page,
        current_page + 1,
        ELLIPSIS,
        pages,
    ]
