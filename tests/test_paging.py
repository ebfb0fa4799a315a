"""
Tests for page/size/sort resolution.
"""

import pytest

from cashcard.core.config import Settings
from cashcard.core.errors import InvalidSortError
from cashcard.schemas.paging import (
    MAX_OFFSET,
    Direction,
    SortOrder,
    parse_sort,
    resolve_page_request,
)


@pytest.fixture
def settings():
    return Settings()


def test_defaults_when_nothing_supplied(settings):
    req = resolve_page_request(None, None, None, settings)

    assert req.page == 0
    assert req.size == 20
    assert req.sort == (SortOrder(property="amount", direction=Direction.ASC),)
    assert req.offset == 0


def test_caller_sort_replaces_default(settings):
    req = resolve_page_request(0, 1, ["id,desc"], settings)

    assert req.sort == (SortOrder(property="id", direction=Direction.DESC),)


def test_offset_uses_page_and_size(settings):
    req = resolve_page_request(3, 5, None, settings)

    assert req.offset == 15


def test_out_of_range_values_fall_back(settings):
    req = resolve_page_request(-2, 0, None, settings)
    assert req.page == 0
    assert req.size == 20

    req = resolve_page_request(0, 100000, None, settings)
    assert req.size == settings.MAX_PAGE_SIZE


def test_parse_sort_direction_applies_to_all_properties():
    orders = parse_sort(["amount,id,DESC"])

    assert [o.property for o in orders] == ["amount", "id"]
    assert all(o.direction == Direction.DESC for o in orders)


def test_parse_sort_combines_values_in_order():
    orders = parse_sort(["amount,desc", "id"])

    assert orders == (
        SortOrder(property="amount", direction=Direction.DESC),
        SortOrder(property="id", direction=Direction.ASC),
    )


def test_blank_sort_values_are_ignored(settings):
    assert parse_sort(["", " , "]) == ()

    req = resolve_page_request(None, None, [""], settings)
    assert req.sort[0].property == "amount"


@pytest.mark.parametrize("value", ["owner", "amount,owner", "desc"])
def test_unknown_sort_property_rejected(value):
    with pytest.raises(InvalidSortError) as exc:
        parse_sort([value])

    assert exc.value.code == "INVALID_SORT"
    assert exc.value.status_code == 400


def test_huge_page_keeps_offset_in_64_bit_range(settings):
    req = resolve_page_request(10**20, 20, None, settings)

    assert req.offset <= MAX_OFFSET
    assert req.page == MAX_OFFSET // 20

    req = resolve_page_request(10**20, 10**20, None, settings)
    assert req.size == settings.MAX_PAGE_SIZE
    assert req.offset <= MAX_OFFSET
