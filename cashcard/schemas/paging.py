"""Page and sort resolution for collection listings.

Query parameters follow the usual ``page``/``size``/``sort`` convention:

    GET /cashcards?page=1&size=5&sort=amount,desc&sort=id

Each ``sort`` value is ``property[,property...][,asc|desc]``. A caller-supplied
sort replaces the default sort completely; the two are never merged.
"""
from enum import Enum
from typing import Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from cashcard.core.config import Settings
from cashcard.core.errors import InvalidSortError

SORTABLE_PROPERTIES = ("id", "amount")
MAX_OFFSET = 2**63 - 1


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortOrder(BaseModel):
    model_config = ConfigDict(frozen=True)

    property: str
    direction: Direction = Direction.ASC


class PageRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int
    size: int
    sort: Tuple[SortOrder, ...]

    @property
    def offset(self) -> int:
        return self.page * self.size


def parse_sort(values: Iterable[str]) -> Tuple[SortOrder, ...]:
    orders = []
    for value in values:
        tokens = [t.strip() for t in value.split(",") if t.strip()]
        if not tokens:
            continue

        direction = Direction.ASC
        if tokens[-1].lower() in (Direction.ASC.value, Direction.DESC.value):
            direction = Direction(tokens.pop().lower())
        if not tokens:
            # "sort=desc" без свойства
            raise InvalidSortError("INVALID_SORT", f"No sort property in {value!r}.")

        for prop in tokens:
            if prop not in SORTABLE_PROPERTIES:
                raise InvalidSortError(
                    "INVALID_SORT",
                    f"Cannot sort by {prop!r}; allowed: {', '.join(SORTABLE_PROPERTIES)}.",
                )
            orders.append(SortOrder(property=prop, direction=direction))
    return tuple(orders)


def resolve_page_request(
    page: Optional[int],
    size: Optional[int],
    sort: Optional[Iterable[str]],
    settings: Settings,
) -> PageRequest:
    if page is None or page < 0:
        page = settings.DEFAULT_PAGE
    if size is None or size < 1:
        size = settings.DEFAULT_PAGE_SIZE
    size = min(size, settings.MAX_PAGE_SIZE)
    # OFFSET в БД - signed 64-bit
    page = min(page, MAX_OFFSET // size)

    orders = parse_sort(sort or ())
    if not orders:
        orders = parse_sort([settings.DEFAULT_SORT])

    return PageRequest(page=page, size=size, sort=orders)
