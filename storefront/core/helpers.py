import re
from typing import Iterable, Optional

VALID_IS_ACTIVE_VALUES = (None, "true", "false")


def slugify(text: str, fallback: str = "item") -> str:
    """Lowercase, collapse every non-alphanumeric run into one hyphen, trim hyphens."""
    slug = re.sub(r"[^a-z0-9]+", "-", (text or "").lower()).strip("-")
    return slug or fallback


def validate_is_active_param(value: Optional[str]) -> bool:
    return value in VALID_IS_ACTIVE_VALUES


def parse_is_active(value: Optional[str]) -> Optional[bool]:
    """Turn the ``isActive`` query param into a tri-state filter.

    ``None`` means "no filter". Anything other than ``"true"``/``"false"``
    raises ``ValueError``.
    """
    if not validate_is_active_param(value):
        raise ValueError(f"invalid isActive value: {value!r}")
    if value is None:
        return None
    return value.lower() == "true"


def average_rating(ratings: Iterable[int]) -> float:
    total = 0
    count = 0
    for rating in ratings:
        total += rating
        count += 1
    return total / count if count else 0


def discounted_price(price: float, discount_percentage: float) -> float:
    return price - (price * (discount_percentage or 0) / 100)
